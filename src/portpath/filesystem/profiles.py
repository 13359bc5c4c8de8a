# Copyright (c) 2024 Portpath Contributors
# MIT License

"""
Filesystem profiles.

A profile is an immutable record of the naming rules of one platform: which
code points may not appear in a file name, which names are reserved, how long
a name and a path may be and in which unit the name length is counted.

The registry is fixed. The profile of the running host is resolved once from
the operating system name and cached.
"""

import bisect
import functools
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from portpath.errors import UnknownProfileError
from portpath.filesystem.length import LengthUnit, NameLengthStrategy, split_extension, strategy_for
from portpath.platform import UNIX_SEPARATOR, WINDOWS_SEPARATOR, flip_separator, os_name

logger = logging.getLogger(__name__)


def _is_sorted(values: Tuple[Any, ...]) -> bool:
    return all(a < b for a, b in zip(values, values[1:]))


def _in_sorted(values: Tuple[Any, ...], item: Any) -> bool:
    index = bisect.bisect_left(values, item)
    return index < len(values) and values[index] == item


@dataclass(frozen=True)
class FilesystemProfile:
    """
    Naming rules of a filesystem.

    Attributes:
        name: Registry name, e.g. ``"windows"``
        block_size: Allocation block size in bytes
        case_sensitive: Whether names differing only in case are distinct
        case_preserving: Whether the case of a name is kept as given
        max_name_length: Longest legal file name, in ``length_unit``
        max_path_length: Longest legal path, in characters
        length_unit: Unit of ``max_name_length``
        illegal_code_points: Code points forbidden in names, sorted ascending
        reserved_names: Names forbidden regardless of extension, sorted
        reserved_names_strip_extension: Compare reserved names without extension
        supports_drive_letter: Whether paths may start with ``C:``
        name_separator: The separator of this filesystem
    """

    name: str
    block_size: int
    case_sensitive: bool
    case_preserving: bool
    max_name_length: int
    max_path_length: int
    length_unit: LengthUnit
    illegal_code_points: Tuple[int, ...]
    reserved_names: Tuple[str, ...] = ()
    reserved_names_strip_extension: bool = False
    supports_drive_letter: bool = False
    name_separator: str = UNIX_SEPARATOR

    def __post_init__(self) -> None:
        # lookups bisect these tables
        if not _is_sorted(self.illegal_code_points):
            raise ValueError(f"{self.name}: illegal_code_points must be sorted and unique")
        if not _is_sorted(self.reserved_names):
            raise ValueError(f"{self.name}: reserved_names must be sorted and unique")
        if self.name_separator not in (UNIX_SEPARATOR, WINDOWS_SEPARATOR):
            raise ValueError(f"{self.name}: unsupported name separator {self.name_separator!r}")

    @property
    def illegal_characters(self) -> Tuple[str, ...]:
        """The illegal code points as one-character strings."""
        return tuple(chr(cp) for cp in self.illegal_code_points)

    @property
    def length_strategy(self) -> NameLengthStrategy:
        """The strategy measuring names in this profile's unit."""
        return strategy_for(self.length_unit)

    def is_illegal_code_point(self, code_point: int) -> bool:
        """Check whether ``code_point`` may not appear in a file name."""
        return _in_sorted(self.illegal_code_points, code_point)

    def is_illegal_character(self, ch: str) -> bool:
        return self.is_illegal_code_point(ord(ch))

    def is_reserved_file_name(self, candidate: str) -> bool:
        """
        Check whether ``candidate`` is a reserved name on this filesystem.

        On Windows ``CON``, ``con`` and ``CON.txt`` are all reserved: the
        extension is stripped and, since the filesystem is case insensitive,
        case is ignored.
        """
        test = candidate
        if self.reserved_names_strip_extension:
            test = split_extension(test)[0]
        if not self.case_sensitive:
            test = test.upper()
        return _in_sorted(self.reserved_names, test)

    def normalize_separators(self, path: str) -> str:
        """Rewrite separators of the other convention to this profile's."""
        return path.replace(flip_separator(self.name_separator), self.name_separator)

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation for JSON output."""
        return {
            "name": self.name,
            "block_size": self.block_size,
            "case_sensitive": self.case_sensitive,
            "case_preserving": self.case_preserving,
            "max_name_length": self.max_name_length,
            "max_path_length": self.max_path_length,
            "length_unit": self.length_unit.value,
            "illegal_characters": list(self.illegal_characters),
            "reserved_names": list(self.reserved_names),
            "reserved_names_strip_extension": self.reserved_names_strip_extension,
            "supports_drive_letter": self.supports_drive_letter,
            "name_separator": self.name_separator,
        }


GENERIC = FilesystemProfile(
    name="generic",
    block_size=4096,
    case_sensitive=False,
    case_preserving=False,
    max_name_length=1020,
    max_path_length=1024 * 1024,
    length_unit=LengthUnit.BYTES,
    illegal_code_points=(0,),
)

LINUX = FilesystemProfile(
    name="linux",
    block_size=8192,
    case_sensitive=True,
    case_preserving=True,
    max_name_length=255,
    max_path_length=4096,
    length_unit=LengthUnit.BYTES,
    illegal_code_points=(0, ord("/")),
)

MAC_OSX = FilesystemProfile(
    name="mac_osx",
    block_size=4096,
    case_sensitive=True,
    case_preserving=True,
    max_name_length=255,
    max_path_length=1024,
    length_unit=LengthUnit.UTF16_CODE_UNITS,
    illegal_code_points=(0, ord("/"), ord(":")),
)

WINDOWS = FilesystemProfile(
    name="windows",
    block_size=4096,
    case_sensitive=False,
    case_preserving=True,
    max_name_length=255,
    max_path_length=32767,
    length_unit=LengthUnit.UTF16_CODE_UNITS,
    # 1-31 may be allowed in file streams
    illegal_code_points=tuple(range(0, 32)) + tuple(sorted(map(ord, '"*/:<>?\\|'))),
    reserved_names=tuple(sorted(
        ["AUX", "CON", "CONIN$", "CONOUT$", "NUL", "PRN"]
        + [f"COM{n}" for n in "123456789¹²³"]
        + [f"LPT{n}" for n in "123456789¹²³"]
    )),
    reserved_names_strip_extension=True,
    supports_drive_letter=True,
    name_separator=WINDOWS_SEPARATOR,
)

PROFILES: Mapping[str, FilesystemProfile] = MappingProxyType({
    profile.name: profile for profile in (GENERIC, LINUX, MAC_OSX, WINDOWS)
})

_ALIASES = {
    "macos": "mac_osx",
    "macosx": "mac_osx",
    "darwin": "mac_osx",
    "win": "windows",
}

# Matched case-insensitively against the start of the OS name
_OS_NAME_PREFIXES = (
    ("linux", LINUX),
    ("mac", MAC_OSX),
    ("darwin", MAC_OSX),
    ("windows", WINDOWS),
)


def get_profile(name: str) -> FilesystemProfile:
    """
    Look up a profile by name.

    Lookup ignores case and treats ``-`` and spaces like ``_``; a few aliases
    such as ``macos`` and ``darwin`` are accepted.

    Raises:
        UnknownProfileError: If no profile has that name
    """
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    key = _ALIASES.get(key, key)
    try:
        return PROFILES[key]
    except KeyError:
        raise UnknownProfileError(name, sorted(PROFILES)) from None


def profile_for_os_name(name: Optional[str]) -> FilesystemProfile:
    """Pick the profile for an operating system name; GENERIC if unknown."""
    if not name:
        return GENERIC
    lowered = name.lower()
    for prefix, profile in _OS_NAME_PREFIXES:
        if lowered.startswith(prefix):
            return profile
    return GENERIC


@functools.lru_cache(maxsize=None)
def current_profile() -> FilesystemProfile:
    """The profile of the host filesystem, resolved once per process."""
    name = os_name()
    profile = profile_for_os_name(name)
    logger.debug("Resolved filesystem profile %s for OS %r", profile.name, name)
    return profile
