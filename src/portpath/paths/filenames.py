# Copyright (c) 2024 Portpath Contributors
# MIT License

"""
File name helpers.

Split a path into prefix, path, name, base name and extension, and compare
names, without touching the file system. Both separator conventions are
recognized on every host:

    C:\\dev\\project\\file.txt
    ~/dev/project/file.txt

    prefix    C:\\              ~/
    path      dev\\project\\    dev/project/
    full path C:\\dev\\project\\  ~/dev/project/
    name      file.txt          file.txt
    base name file              file
    extension txt               txt
"""

from typing import Optional

from portpath.errors import InvalidFileNameError
from portpath.paths.case import CaseSensitivity
from portpath.paths.normalizer import fail_if_nul_present, normalize
from portpath.paths.prefix import NOT_FOUND, get_prefix, prefix_length
from portpath.platform import (
    OTHER_SEPARATOR,
    SYSTEM_SEPARATOR,
    UNIX_SEPARATOR,
    WINDOWS_SEPARATOR,
    is_separator,
    is_system_windows,
)

EXTENSION_SEPARATOR = "."


def separators_to_unix(path: str) -> str:
    """Convert all separators to ``/``."""
    return path.replace(WINDOWS_SEPARATOR, UNIX_SEPARATOR)


def separators_to_windows(path: str) -> str:
    """Convert all separators to ``\\``."""
    return path.replace(UNIX_SEPARATOR, WINDOWS_SEPARATOR)


def separators_to_system(path: str) -> str:
    """Convert all separators to the host's separator."""
    return separators_to_windows(path) if is_system_windows() else separators_to_unix(path)


def index_of_last_separator(path: str) -> int:
    """Index of the last separator of either convention, or -1."""
    return max(path.rfind(UNIX_SEPARATOR), path.rfind(WINDOWS_SEPARATOR))


def _ads_critical_offset(path: str) -> int:
    # only the last name segment can hold an alternate data stream marker
    offset = max(path.rfind(SYSTEM_SEPARATOR), path.rfind(OTHER_SEPARATOR))
    return offset + 1


def index_of_extension(path: str) -> int:
    """
    Index of the last extension separator in the name segment, or -1.

    On Windows a ``:`` in the name is an NTFS alternate data stream marker,
    which would make any extension found here meaningless.

    Raises:
        InvalidFileNameError: If the name contains ``:`` on Windows
    """
    if is_system_windows() and path.find(":", _ads_critical_offset(path)) != NOT_FOUND:
        raise InvalidFileNameError("NTFS ADS separator (':') in file name is forbidden.", path)
    extension_pos = path.rfind(EXTENSION_SEPARATOR)
    last_separator = index_of_last_separator(path)
    return NOT_FOUND if last_separator > extension_pos else extension_pos


def get_name(path: str) -> str:
    """Return the name after the last separator: ``a/b/c.txt`` gives ``c.txt``."""
    fail_if_nul_present(path)
    return path[index_of_last_separator(path) + 1 :]


def get_extension(path: str) -> str:
    """Return the extension without its dot, or an empty string."""
    index = index_of_extension(path)
    if index == NOT_FOUND:
        return ""
    return path[index + 1 :]


def remove_extension(path: str) -> str:
    """Strip the extension (and its dot) from ``path``."""
    fail_if_nul_present(path)
    index = index_of_extension(path)
    if index == NOT_FOUND:
        return path
    return path[:index]


def get_base_name(path: str) -> str:
    """Return the name without its extension: ``a/b/c.txt`` gives ``c``."""
    return remove_extension(get_name(path))


def _get_path(path: str, separator_add: int) -> Optional[str]:
    prefix = prefix_length(path)
    if prefix < 0:
        return None
    index = index_of_last_separator(path)
    end = index + separator_add
    if prefix >= len(path) or index < 0 or prefix >= end:
        return ""
    result = path[prefix:end]
    fail_if_nul_present(result)
    return result


def get_path(path: str) -> Optional[str]:
    """
    Return the directory part without the prefix, keeping the end separator.

    ``C:\\a\\b\\c.txt`` gives ``a\\b\\``; None if the prefix is invalid.
    """
    return _get_path(path, 1)


def get_path_no_end_separator(path: str) -> Optional[str]:
    """Like :func:`get_path` but without the end separator."""
    return _get_path(path, 0)


def _get_full_path(path: str, include_separator: bool) -> Optional[str]:
    prefix = prefix_length(path)
    if prefix < 0:
        return None
    if prefix >= len(path):
        if include_separator:
            return get_prefix(path)
        return path
    index = index_of_last_separator(path)
    if index < 0:
        return path[:prefix]
    end = index + (1 if include_separator else 0)
    if end == 0:
        end += 1
    return path[:end]


def get_full_path(path: str) -> Optional[str]:
    """
    Return the prefix plus directory part, keeping the end separator.

    ``C:\\a\\b\\c.txt`` gives ``C:\\a\\b\\``; ``~user`` gives ``~user/``.
    """
    return _get_full_path(path, True)


def get_full_path_no_end_separator(path: str) -> Optional[str]:
    """Like :func:`get_full_path` but without the end separator."""
    return _get_full_path(path, False)


def is_extension(path: str, *extensions: str) -> bool:
    """
    Check whether the extension of ``path`` is one of ``extensions``.

    Comparison is case sensitive. With no extensions given, true only when
    the path has no extension.
    """
    fail_if_nul_present(path)
    extension = get_extension(path)
    if not extensions:
        return extension == ""
    return extension in extensions


def equals(
    name1: Optional[str],
    name2: Optional[str],
    normalized: bool = False,
    case: CaseSensitivity = CaseSensitivity.SENSITIVE,
) -> bool:
    """
    Compare two file names, optionally after normalizing both.

    Names that fail to normalize are never equal.
    """
    if name1 is None or name2 is None:
        return name1 is None and name2 is None
    if normalized:
        name1 = normalize(name1)
        if name1 is None:
            return False
        name2 = normalize(name2)
        if name2 is None:
            return False
    return case.check_equals(name1, name2)


def equals_on_system(name1: Optional[str], name2: Optional[str]) -> bool:
    """Compare with the host's case sensitivity."""
    return equals(name1, name2, False, CaseSensitivity.SYSTEM)


def equals_normalized(name1: Optional[str], name2: Optional[str]) -> bool:
    """Compare after normalizing, case sensitively."""
    return equals(name1, name2, True, CaseSensitivity.SENSITIVE)


def equals_normalized_on_system(name1: Optional[str], name2: Optional[str]) -> bool:
    """Compare after normalizing, with the host's case sensitivity."""
    return equals(name1, name2, True, CaseSensitivity.SYSTEM)


def directory_contains(
    canonical_parent: str,
    canonical_child: Optional[str],
    case: CaseSensitivity = CaseSensitivity.SYSTEM,
) -> bool:
    """
    Check whether ``canonical_child`` lies below ``canonical_parent``.

    Both paths should already be canonical; this is a string comparison only.
    A directory does not contain itself, and ``/foo`` does not contain
    ``/foobar``.
    """
    if not canonical_parent or not canonical_child:
        return False
    if case.check_equals(canonical_parent, canonical_child):
        return False
    if not case.check_starts_with(canonical_child, canonical_parent):
        return False
    if is_separator(canonical_parent[-1]):
        return True
    if len(canonical_child) <= len(canonical_parent):
        return False
    return is_separator(canonical_child[len(canonical_parent)])
