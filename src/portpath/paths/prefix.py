# Copyright (c) 2024 Portpath Contributors
# MIT License

"""
Path prefix grammar.

The prefix is the leading, syntax-defined root of a path. Both Unix and
Windows forms are recognized regardless of the host:

    a/b/c.txt           ""          relative
    /a/b/c.txt          "/"         root absolute
    C:a\\b\\c.txt       "C:"        drive relative
    C:\\a\\b\\c.txt     "C:\\"      drive absolute
    \\\\server\\a\\b    "\\\\server\\"  UNC
    ~/a/b/c.txt         "~/"        current user
    ~                   "~/"        current user (separator added)
    ~user/a/b/c.txt     "~user/"    named user
    ~user               "~user/"    named user (separator added)
    \\\\\\a\\b\\c.txt   invalid

The prefix length includes the first separator, so for ``~`` and ``~user``
the reported length is one more than the input: a trailing separator is
implied.
"""

import enum
import string
from typing import NamedTuple, Optional

from portpath.errors import UnsanitizedInputError
from portpath.paths.hosts import is_valid_host_name
from portpath.platform import UNIX_SEPARATOR, WINDOWS_SEPARATOR, is_separator

NOT_FOUND = -1

_DRIVE_LETTERS = frozenset(string.ascii_letters)


class PrefixKind(enum.Enum):
    """The syntactic kind of a path prefix."""

    RELATIVE = "relative"
    ROOT_ABSOLUTE = "root_absolute"
    DRIVE_RELATIVE = "drive_relative"
    DRIVE_ABSOLUTE = "drive_absolute"
    UNC = "unc"
    HOME_CURRENT_USER = "home_current_user"
    HOME_NAMED_USER = "home_named_user"


class Prefix(NamedTuple):
    """A parsed prefix: its kind and its (possibly virtual) length."""

    kind: PrefixKind
    length: int

    def is_virtual(self, path: str) -> bool:
        """True when the prefix implies a separator missing from ``path``."""
        return self.length > len(path)


def _first_separator(path: str, start: int) -> int:
    pos_unix = path.find(UNIX_SEPARATOR, start)
    pos_win = path.find(WINDOWS_SEPARATOR, start)
    if pos_unix == NOT_FOUND:
        return pos_win
    if pos_win == NOT_FOUND:
        return pos_unix
    return min(pos_unix, pos_win)


def parse_prefix(path: str) -> Optional[Prefix]:
    """
    Classify the leading syntax of ``path``.

    Returns None if the prefix is invalid: a leading colon, a drive form whose
    first character is not an ASCII letter, or a UNC form with an empty or
    malformed host.
    """
    size = len(path)
    if size == 0:
        return Prefix(PrefixKind.RELATIVE, 0)
    ch0 = path[0]
    if ch0 == ":":
        return None
    if size == 1:
        if ch0 == "~":
            return Prefix(PrefixKind.HOME_CURRENT_USER, 2)
        if is_separator(ch0):
            return Prefix(PrefixKind.ROOT_ABSOLUTE, 1)
        return Prefix(PrefixKind.RELATIVE, 0)

    if ch0 == "~":
        pos = _first_separator(path, 1)
        if pos == NOT_FOUND:
            return Prefix(PrefixKind.HOME_NAMED_USER, size + 1)
        kind = PrefixKind.HOME_CURRENT_USER if pos == 1 else PrefixKind.HOME_NAMED_USER
        return Prefix(kind, pos + 1)

    ch1 = path[1]
    if ch1 == ":":
        if ch0 in _DRIVE_LETTERS:
            if size == 2 or not is_separator(path[2]):
                return Prefix(PrefixKind.DRIVE_RELATIVE, 2)
            return Prefix(PrefixKind.DRIVE_ABSOLUTE, 3)
        if ch0 == UNIX_SEPARATOR:
            return Prefix(PrefixKind.ROOT_ABSOLUTE, 1)
        return None

    if is_separator(ch0) and is_separator(ch1):
        pos = _first_separator(path, 2)
        if pos == NOT_FOUND or pos == 2:
            return None
        if not is_valid_host_name(path[2:pos]):
            return None
        return Prefix(PrefixKind.UNC, pos + 1)

    if is_separator(ch0):
        return Prefix(PrefixKind.ROOT_ABSOLUTE, 1)
    return Prefix(PrefixKind.RELATIVE, 0)


def prefix_length(path: str) -> int:
    """
    Return the length of the prefix of ``path``, or -1 if it is invalid.

    The length may exceed ``len(path)`` for ``~`` and ``~user``.

    >>> prefix_length("C:\\\\a\\\\b")
    3
    >>> prefix_length("~")
    2
    """
    prefix = parse_prefix(path)
    return NOT_FOUND if prefix is None else prefix.length


def get_prefix(path: str) -> Optional[str]:
    """
    Return the prefix text of ``path``, or None if it is invalid.

    A virtual prefix gets its implied separator appended: ``~user`` gives
    ``~user/``.
    """
    if "\0" in path:
        raise UnsanitizedInputError(path)
    prefix = parse_prefix(path)
    if prefix is None:
        return None
    if prefix.is_virtual(path):
        return path + UNIX_SEPARATOR
    return path[: prefix.length]
