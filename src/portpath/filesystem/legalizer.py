# Copyright (c) 2024 Portpath Contributors
# MIT License

"""
File name legality checks and repair.

A name is legal on a filesystem profile when it is non-empty, fits the
profile's name length limit, is not a reserved name and contains no illegal
code point. :func:`to_legal_file_name` repairs a name by truncating it and
replacing illegal characters; it does not rename reserved names, so
``to_legal_file_name("CON")`` on Windows is still not legal.
"""

import logging
from typing import Optional

from portpath.config import get_config, resolve_profile
from portpath.errors import InvalidFileNameError
from portpath.filesystem.profiles import FilesystemProfile

logger = logging.getLogger(__name__)


def _defaults(profile: Optional[FilesystemProfile], charset: Optional[str]):
    if profile is None:
        profile = resolve_profile()
    if charset is None:
        charset = get_config().charset
    return profile, charset


def is_legal_file_name(
    candidate: Optional[str],
    profile: Optional[FilesystemProfile] = None,
    charset: Optional[str] = None,
) -> bool:
    """
    Check whether ``candidate`` is a legal file name on ``profile``.

    Args:
        candidate: The file name, without any directory part
        profile: Filesystem rules; defaults to the configured profile
        charset: Charset for byte-counting filesystems; defaults to the
            configured charset

    Returns:
        False for an empty, oversized, reserved or unencodable name, or one
        containing an illegal character.
    """
    if not candidate:
        return False
    profile, charset = _defaults(profile, charset)
    if profile.length_strategy.measure(candidate, charset) > profile.max_name_length:
        return False
    if profile.is_reserved_file_name(candidate):
        return False
    return not any(profile.is_illegal_character(ch) for ch in candidate)


def to_legal_file_name(
    candidate: str,
    replacement: Optional[str] = None,
    profile: Optional[FilesystemProfile] = None,
    charset: Optional[str] = None,
) -> str:
    """
    Make ``candidate`` legal by truncating it and replacing illegal characters.

    The extension survives truncation. Reserved names are returned as they
    are; check the result with :func:`is_legal_file_name` if that matters.

    Raises:
        InvalidFileNameError: If the candidate is empty, the replacement is
            not a single legal character, or the name cannot be truncated
    """
    profile, charset = _defaults(profile, charset)
    if replacement is None:
        replacement = get_config().replacement

    if not candidate:
        raise InvalidFileNameError("The candidate file name is empty", candidate)
    if len(replacement) != 1:
        raise InvalidFileNameError(
            "The replacement must be a single character",
            candidate,
            f"got {replacement!r}",
        )
    if profile.is_illegal_character(replacement):
        raise InvalidFileNameError(
            f"The replacement character {replacement!r} cannot be one of the illegal characters "
            f"of the {profile.name} profile",
            candidate,
        )

    truncated = profile.length_strategy.truncate(candidate, profile.max_name_length, charset)
    legal = "".join(replacement if profile.is_illegal_character(ch) else ch for ch in truncated)
    if legal != candidate:
        logger.debug("Legalized %r to %r for %s", candidate, legal, profile.name)
    return legal


def is_legal_path_length(path: str, profile: Optional[FilesystemProfile] = None) -> bool:
    """Check whether ``path`` fits the profile's maximum path length."""
    if profile is None:
        profile = resolve_profile()
    return len(path) <= profile.max_path_length
