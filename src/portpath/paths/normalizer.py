# Copyright (c) 2024 Portpath Contributors
# MIT License

"""
Path normalization.

Removes double and single dot path steps and merges duplicate separators
without touching the file system. The input may use either separator
convention; the output uses the one requested (or the host's).

    /foo//               -->   /foo/
    /foo/./              -->   /foo/
    /foo/../bar          -->   /bar
    /foo/../bar/         -->   /bar/
    /foo/../bar/../baz   -->   /baz
    /../                 -->   None
    ../foo               -->   None
    foo/bar/..           -->   foo/
    foo/../../bar        -->   None
    foo/../bar           -->   bar
    //server/foo/../bar  -->   //server/bar
    //server/../bar      -->   None
    C:\\foo\\..\\bar     -->   C:\\bar
    C:\\..\\bar          -->   None
    ~/foo/../bar/        -->   ~/bar/
    ~/../bar             -->   None

A double dot with no parent segment to consume makes the path invalid, as
does any prefix that fails to parse. Invalid paths are reported as None.
"""

import logging
from typing import List, Optional

from portpath.errors import UnsanitizedInputError
from portpath.paths.prefix import prefix_length
from portpath.platform import (
    SYSTEM_SEPARATOR,
    UNIX_SEPARATOR,
    WINDOWS_SEPARATOR,
    flip_separator,
    is_separator,
)

logger = logging.getLogger(__name__)


def fail_if_nul_present(path: str) -> None:
    """Raise UnsanitizedInputError if ``path`` contains a NUL character."""
    if "\0" in path:
        raise UnsanitizedInputError(path)


def _target_separator(unix_separator: Optional[bool]) -> str:
    if unix_separator is None:
        return SYSTEM_SEPARATOR
    return UNIX_SEPARATOR if unix_separator else WINDOWS_SEPARATOR


def _collapse_double_separators(buf: List[str], prefix: int, sep: str) -> None:
    i = prefix + 1
    while i < len(buf):
        if buf[i] == sep and buf[i - 1] == sep:
            del buf[i - 1]
            continue
        i += 1


def _collapse_single_dots(buf: List[str], prefix: int, sep: str) -> bool:
    """Remove ``./`` steps; return True if the last segment was one."""
    last_was_dot = False
    i = prefix + 1
    while i < len(buf):
        if buf[i] == sep and buf[i - 1] == "." and (i == prefix + 1 or buf[i - 2] == sep):
            if i == len(buf) - 1:
                last_was_dot = True
            del buf[i - 1 : i + 1]
            continue
        i += 1
    return last_was_dot


def _resolve_double_dots(buf: List[str], prefix: int, sep: str) -> Optional[bool]:
    """
    Splice out ``segment/../`` steps in place.

    Returns None when a ``..`` would climb above the prefix, otherwise
    whether the last segment of the path was a ``..``.
    """
    last_was_dots = False
    i = prefix + 2
    while i < len(buf):
        if (
            buf[i] == sep
            and buf[i - 1] == "."
            and buf[i - 2] == "."
            and (i == prefix + 2 or buf[i - 3] == sep)
        ):
            if i == prefix + 2:
                return None
            if i == len(buf) - 1:
                last_was_dots = True
            for j in range(i - 4, prefix - 1, -1):
                if buf[j] == sep:
                    # remove b/../ from a/b/../c
                    del buf[j + 1 : i + 1]
                    i = j + 2
                    break
            else:
                # remove a/../ from a/../c
                del buf[prefix : i + 1]
                i = prefix + 2
            continue
        i += 1
    return last_was_dots


def _normalize(path: str, separator: str, keep_separator: bool) -> Optional[str]:
    fail_if_nul_present(path)
    if not path:
        return path
    prefix = prefix_length(path)
    if prefix < 0:
        logger.debug("Rejecting path with invalid prefix: %r", path)
        return None

    other = flip_separator(separator)
    buf = [separator if ch == other else ch for ch in path]

    # a trailing separator simplifies the scans below
    last_is_directory = True
    if buf[-1] != separator:
        buf.append(separator)
        last_is_directory = False

    _collapse_double_separators(buf, prefix, separator)
    if _collapse_single_dots(buf, prefix, separator):
        last_is_directory = True
    climbed = _resolve_double_dots(buf, prefix, separator)
    if climbed is None:
        logger.debug("Rejecting path that ascends above its prefix: %r", path)
        return None
    if climbed:
        last_is_directory = True

    size = len(buf)
    if size <= prefix:
        return "".join(buf)
    if last_is_directory and keep_separator:
        return "".join(buf)
    return "".join(buf[: size - 1])


def normalize(path: str, unix_separator: Optional[bool] = None) -> Optional[str]:
    """
    Normalize a path, keeping a trailing separator.

    Args:
        path: Path in either separator convention
        unix_separator: True for ``/``, False for ``\\``, None for the host's

    Returns:
        The normalized path, or None if the prefix is invalid or the path
        ascends above it.

    Raises:
        UnsanitizedInputError: If the path contains a NUL character
    """
    return _normalize(path, _target_separator(unix_separator), True)


def normalize_no_end_separator(path: str, unix_separator: Optional[bool] = None) -> Optional[str]:
    """Normalize a path like :func:`normalize` but drop any final separator."""
    return _normalize(path, _target_separator(unix_separator), False)


def concat(base_path: str, path_to_add: str, unix_separator: Optional[bool] = None) -> Optional[str]:
    """
    Join ``path_to_add`` onto ``base_path`` and normalize the result.

    If ``path_to_add`` has a prefix of its own (it is absolute, drive or home
    relative, or UNC) it replaces ``base_path`` entirely.

        /foo/      + bar         -->  /foo/bar
        /foo       + bar         -->  /foo/bar
        /foo       + /bar        -->  /bar
        /foo       + C:/bar      -->  C:/bar
        /foo/a/    + ../bar      -->  /foo/bar
        /foo/      + ../../bar   -->  None
        /foo/      + ~/bar       -->  ~/bar
    """
    prefix = prefix_length(path_to_add)
    if prefix < 0:
        return None
    if prefix > 0:
        return normalize(path_to_add, unix_separator)
    if not base_path:
        return normalize(path_to_add, unix_separator)
    if is_separator(base_path[-1]):
        return normalize(base_path + path_to_add, unix_separator)
    return normalize(base_path + UNIX_SEPARATOR + path_to_add, unix_separator)
