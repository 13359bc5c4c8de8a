# Copyright (c) 2024 Portpath Contributors
# MIT License

"""
Filesystem naming rules: profiles, name length strategies and the legalizer.
"""

from portpath.filesystem.length import BYTES, UTF16_CODE_UNITS, LengthUnit, NameLengthStrategy
from portpath.filesystem.profiles import (
    GENERIC,
    LINUX,
    MAC_OSX,
    PROFILES,
    WINDOWS,
    FilesystemProfile,
    current_profile,
    get_profile,
)
from portpath.filesystem.legalizer import is_legal_file_name, is_legal_path_length, to_legal_file_name

__all__ = [
    "BYTES",
    "GENERIC",
    "LINUX",
    "MAC_OSX",
    "PROFILES",
    "UTF16_CODE_UNITS",
    "WINDOWS",
    "FilesystemProfile",
    "LengthUnit",
    "NameLengthStrategy",
    "current_profile",
    "get_profile",
    "is_legal_file_name",
    "is_legal_path_length",
    "to_legal_file_name",
]
