# Copyright (c) 2024 Portpath Contributors
# MIT License

"""
Portpath: portable path and file name handling.

Parses and normalizes path strings from Unix and Windows alike, and checks or
repairs file names against the naming rules of a target filesystem, without
ever touching the file system.

Features:
    - Prefix grammar for ``/``, ``C:``, ``C:\\``, ``\\\\server\\``, ``~`` and ``~user``
    - Normalization of ``.`` and ``..`` steps that never escapes the prefix
    - Filesystem profiles for Linux, macOS, Windows and a generic lowest
      common denominator
    - File name legalization measured in bytes or UTF-16 code units

This package exposes the library API and release metadata.
"""

from __future__ import annotations

from portpath.release import __version__, __author__, __codename__
from portpath.errors import (
    ConfigError,
    ExitCode,
    InvalidFileNameError,
    InvalidPathError,
    PortpathError,
    UnknownProfileError,
    UnsanitizedInputError,
)
from portpath.paths import (
    CaseSensitivity,
    Prefix,
    PrefixKind,
    concat,
    normalize,
    normalize_no_end_separator,
    parse_prefix,
    prefix_length,
)
from portpath.filesystem import (
    GENERIC,
    LINUX,
    MAC_OSX,
    WINDOWS,
    FilesystemProfile,
    current_profile,
    get_profile,
    is_legal_file_name,
    to_legal_file_name,
)

__all__ = [
    "__version__",
    "__author__",
    "__codename__",
    "CaseSensitivity",
    "ConfigError",
    "ExitCode",
    "FilesystemProfile",
    "GENERIC",
    "InvalidFileNameError",
    "InvalidPathError",
    "LINUX",
    "MAC_OSX",
    "PortpathError",
    "Prefix",
    "PrefixKind",
    "UnknownProfileError",
    "UnsanitizedInputError",
    "WINDOWS",
    "concat",
    "current_profile",
    "get_profile",
    "is_legal_file_name",
    "normalize",
    "normalize_no_end_separator",
    "parse_prefix",
    "prefix_length",
    "to_legal_file_name",
]
