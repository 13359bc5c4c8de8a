# Copyright (c) 2024 Portpath Contributors
# MIT License

"""
Host platform identification.

Everything else in portpath is pure string processing; this module is the one
place that looks at the running interpreter to decide which separator and
which filesystem profile are "native".
"""

import os
import platform as _platform

UNIX_SEPARATOR = "/"
WINDOWS_SEPARATOR = "\\"

SYSTEM_SEPARATOR = os.sep
OTHER_SEPARATOR = UNIX_SEPARATOR if SYSTEM_SEPARATOR == WINDOWS_SEPARATOR else WINDOWS_SEPARATOR


def os_name() -> str:
    """Return the operating system name as reported by the interpreter."""
    return _platform.system()


def is_separator(ch: str) -> bool:
    """Check whether ``ch`` is a Unix or Windows name separator."""
    return ch == UNIX_SEPARATOR or ch == WINDOWS_SEPARATOR


def flip_separator(ch: str) -> str:
    """Return the separator of the other convention."""
    if ch == UNIX_SEPARATOR:
        return WINDOWS_SEPARATOR
    if ch == WINDOWS_SEPARATOR:
        return UNIX_SEPARATOR
    raise ValueError(f"Not a name separator: {ch!r}")


def is_system_windows() -> bool:
    """Check whether the system separator is the Windows one."""
    return SYSTEM_SEPARATOR == WINDOWS_SEPARATOR
