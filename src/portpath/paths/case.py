# Copyright (c) 2024 Portpath Contributors
# MIT License

"""Case sensitivity rules for comparing file names."""

import enum

from portpath.platform import is_system_windows


class CaseSensitivity(enum.Enum):
    """How file names are compared."""

    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"
    # case sensitive everywhere except Windows
    SYSTEM = "system"

    @classmethod
    def for_name(cls, name: str) -> "CaseSensitivity":
        """Look up a rule by its name, e.g. ``"insensitive"``."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown case sensitivity: {name!r}") from None

    @property
    def is_case_sensitive(self) -> bool:
        if self is CaseSensitivity.SYSTEM:
            return not is_system_windows()
        return self is CaseSensitivity.SENSITIVE

    def _fold(self, text: str) -> str:
        return text if self.is_case_sensitive else text.casefold()

    def check_equals(self, str1: str, str2: str) -> bool:
        return self._fold(str1) == self._fold(str2)

    def check_starts_with(self, text: str, start: str) -> bool:
        return self._fold(text).startswith(self._fold(start))

    def check_ends_with(self, text: str, end: str) -> bool:
        return self._fold(text).endswith(self._fold(end))
