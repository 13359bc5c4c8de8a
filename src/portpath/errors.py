# Copyright (c) 2024 Portpath Contributors
# MIT License

"""
Portpath Error Classes.

All custom exceptions for clear error handling and CLI exit codes.

An invalid path is not an exception in the library API: normalization and
prefix parsing return ``None`` (or ``-1``) so callers must check explicitly.
Embedded NUL characters and bad arguments to the legalizer are raised.
"""

from __future__ import annotations

import enum


class ExitCode(enum.IntEnum):
    """Exit codes used by the portpath command-line tool."""

    SUCCESS = 0
    GENERIC_ERROR = 1
    INVALID_PATH = 2
    ILLEGAL_NAME = 3
    INVALID_ARGUMENT = 4
    UNSANITIZED_INPUT = 5
    CONFIG_ERROR = 6
    KEYBOARD_INTERRUPT = 130


class PortpathError(Exception):
    """Base exception for all portpath errors."""

    exit_code: int = ExitCode.GENERIC_ERROR

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class InvalidPathError(PortpathError):
    """A path whose prefix is malformed or that ascends above its root."""

    exit_code: int = ExitCode.INVALID_PATH

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        super().__init__(f"Invalid path: {path!r}", reason)


class UnsanitizedInputError(PortpathError, ValueError):
    """
    A NUL character was found inside a path or file name.

    There are no legitimate uses for such data, but several injection attacks
    rely on it, so it is reported separately from an ordinary invalid path.
    """

    exit_code: int = ExitCode.UNSANITIZED_INPUT

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            "Null character present in file/path name",
            f"at index {path.find(chr(0))} of a {len(path)}-character string",
        )


class InvalidFileNameError(PortpathError, ValueError):
    """A file name (or a replacement character) that cannot be legalized."""

    exit_code: int = ExitCode.INVALID_ARGUMENT

    def __init__(self, message: str, name: str | None = None, details: str | None = None) -> None:
        self.name = name
        super().__init__(message, details)


class UnknownProfileError(PortpathError, KeyError):
    """Lookup of a filesystem profile name that is not registered."""

    exit_code: int = ExitCode.INVALID_ARGUMENT

    def __init__(self, name: str, known: list[str] | None = None) -> None:
        self.name = name
        details = f"known profiles: {', '.join(known)}" if known else None
        super().__init__(f"Unknown filesystem profile: {name!r}", details)

    # KeyError.__str__ would repr() the message
    def __str__(self) -> str:
        return PortpathError.__str__(self)


class ConfigError(PortpathError):
    """Error loading or applying portpath configuration."""

    exit_code: int = ExitCode.CONFIG_ERROR

    def __init__(self, message: str, file_path: str | None = None, details: str | None = None) -> None:
        self.file_path = file_path
        location = f" in {file_path}" if file_path else ""
        super().__init__(f"Configuration error{location}: {message}", details)
