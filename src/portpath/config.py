# Copyright (c) 2024 Portpath Contributors
# MIT License

"""
Portpath Configuration

Process-wide defaults for the legalizer and the command-line tool. A file
holds the same keys as :class:`PortpathConfig`:

    default_profile: windows
    charset: utf-8
    replacement: "_"
    unix_separator: true
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

import yaml

from portpath.errors import ConfigError, UnknownProfileError

if TYPE_CHECKING:
    from portpath.filesystem.profiles import FilesystemProfile

logger = logging.getLogger(__name__)


@dataclass
class PortpathConfig:
    """
    Configuration for path and file name handling.

    Attributes:
        default_profile: Profile name used when none is given; None means
            the profile of the running host
        charset: Charset used to measure names on byte-counting filesystems
        replacement: Character substituted for illegal characters
        unix_separator: Separator for normalized output; None means the host's
    """

    default_profile: Optional[str] = None
    charset: str = "utf-8"
    replacement: str = "_"
    unix_separator: Optional[bool] = None


# Default configuration
_config = PortpathConfig()


def get_config() -> PortpathConfig:
    """Get the current configuration."""
    return _config


def set_config(config: PortpathConfig) -> None:
    """Set the configuration."""
    global _config
    _config = config


def configure(**kwargs: Any) -> None:
    """
    Update individual settings of the current configuration.

    Raises:
        ConfigError: If a key is not a configuration setting
    """
    global _config
    known = {f.name for f in fields(PortpathConfig)}
    unknown = sorted(map(str, set(kwargs) - known))
    if unknown:
        raise ConfigError(f"Unknown setting(s): {', '.join(unknown)}")
    _config = replace(_config, **kwargs)


def reset_config() -> None:
    """Restore the default configuration."""
    set_config(PortpathConfig())


def resolve_profile(config: Optional[PortpathConfig] = None) -> FilesystemProfile:
    """Return the configured default profile, or the host's."""
    from portpath.filesystem.profiles import current_profile, get_profile

    config = config or get_config()
    if config.default_profile is None:
        return current_profile()
    return get_profile(config.default_profile)


def _validate(data: Dict[str, Any], file_path: str) -> PortpathConfig:
    from portpath.filesystem.profiles import get_profile

    known = {f.name for f in fields(PortpathConfig)}
    unknown = sorted(map(str, set(data) - known))
    if unknown:
        raise ConfigError(f"Unknown setting(s): {', '.join(unknown)}", file_path)

    config = PortpathConfig(**data)

    if config.default_profile is not None:
        try:
            get_profile(str(config.default_profile))
        except UnknownProfileError as e:
            raise ConfigError(e.message, file_path, e.details) from e

    if not isinstance(config.charset, str):
        raise ConfigError("charset must be a string", file_path)
    try:
        codecs.lookup(config.charset)
    except LookupError as e:
        raise ConfigError(f"Unknown charset: {config.charset!r}", file_path) from e

    if not isinstance(config.replacement, str) or len(config.replacement) != 1:
        raise ConfigError("replacement must be a single character", file_path)

    if config.unix_separator is not None and not isinstance(config.unix_separator, bool):
        raise ConfigError("unix_separator must be true, false or null", file_path)

    return config


def load_config(path: Union[str, Path]) -> PortpathConfig:
    """
    Load a configuration from a YAML file.

    An empty file gives the default configuration. The result is returned,
    not installed; pass it to :func:`set_config` to apply it.

    Raises:
        ConfigError: If the file cannot be read or parsed, or holds unknown
            keys or invalid values
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read file: {e.strerror}", str(path)) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError("Invalid YAML", str(path), str(e)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping, got {type(data).__name__}", str(path))

    config = _validate(data, str(path))
    logger.debug("Loaded configuration from %s: %r", path, config)
    return config
