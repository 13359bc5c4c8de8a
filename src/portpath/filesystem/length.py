# Copyright (c) 2024 Portpath Contributors
# MIT License

"""
File name length strategies.

Filesystems measure name length in different units: Linux counts encoded
bytes, Windows and macOS count UTF-16 code units. A strategy measures a
candidate name in its unit and truncates an oversized name so that:

- the extension (everything from the first dot that is not the leading
  character) survives intact;
- no surrogate pair or multi-byte encoded sequence is split;
- a name that already fits is returned unchanged.
"""

import abc
import codecs
import enum
import logging
import math
from typing import Tuple, Union

from portpath.errors import InvalidFileNameError

logger = logging.getLogger(__name__)

DEFAULT_CHARSET = "utf-8"
EXTENSION_SEPARATOR = "."

Size = Union[int, float]


class LengthUnit(enum.Enum):
    """The unit a filesystem uses for its name length limit."""

    BYTES = "bytes"
    UTF16_CODE_UNITS = "utf16_code_units"


def split_extension(name: str) -> Tuple[str, str]:
    """
    Split ``name`` into base and extension at the first non-leading dot.

    A leading dot marks a hidden file, not an extension:

        report.tar.gz  -> ("report", ".tar.gz")
        .profile       -> (".profile", "")
    """
    index = name.find(EXTENSION_SEPARATOR, 1)
    if index < 0:
        return name, ""
    return name[:index], name[index:]


class NameLengthStrategy(abc.ABC):
    """Measures and truncates file names in one unit."""

    unit: LengthUnit
    label: str

    @abc.abstractmethod
    def measure(self, name: str, charset: str = DEFAULT_CHARSET) -> Size:
        """
        Return the length of ``name`` in this strategy's unit.

        A name that cannot be represented measures as infinity.
        """

    @abc.abstractmethod
    def _fit(self, base: str, budget: int, charset: str) -> int:
        """Return how many leading characters of ``base`` fit in ``budget``."""

    def _prepare(self, name: str, charset: str) -> str:
        """Validate an oversized ``name`` before it is cut."""
        return name

    def _suffix_size(self, extension: str, charset: str) -> Size:
        """Size ``extension`` adds when it follows the base name."""
        return self.measure(extension, charset)

    def truncate(self, name: str, limit: int, charset: str = DEFAULT_CHARSET) -> str:
        """
        Shorten ``name`` to at most ``limit`` units, keeping its extension.

        When the extension alone fills the limit the base name is dropped
        and the extension is returned.

        Raises:
            InvalidFileNameError: If an oversized name cannot be encoded, or
                if the extension alone is longer than ``limit``
        """
        if self.measure(name, charset) <= limit:
            return name
        name = self._prepare(name, charset)

        base, extension = split_extension(name)
        if extension:
            extension_size = self.measure(extension, charset)
            if extension_size > limit:
                raise InvalidFileNameError(
                    f"The extension of {name!r} is too long to fit in {limit} {self.label}",
                    name,
                    f"extension {extension!r} uses {extension_size} {self.label}",
                )
            budget = limit - self._suffix_size(extension, charset)
        else:
            budget = limit

        keep = self._fit(base, budget, charset)
        truncated = base[:keep] + extension
        logger.debug("Truncated %r to %r (%d %s)", name, truncated, limit, self.label)
        return truncated

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.unit.name}>"


class BytesStrategy(NameLengthStrategy):
    """Length is the size of the name encoded with a given charset."""

    unit = LengthUnit.BYTES
    label = "bytes"

    def measure(self, name: str, charset: str = DEFAULT_CHARSET) -> Size:
        try:
            return len(name.encode(charset, "strict"))
        except (UnicodeEncodeError, LookupError):
            return math.inf

    def _prepare(self, name: str, charset: str) -> str:
        try:
            codec = codecs.lookup(charset)
        except LookupError as e:
            raise InvalidFileNameError(f"Unknown charset: {charset!r}", name) from e
        try:
            name.encode(codec.name, "strict")
        except UnicodeEncodeError as e:
            raise InvalidFileNameError(
                f"File name contains characters that cannot be encoded with charset {codec.name}",
                name,
                str(e),
            ) from e
        return name

    def _suffix_size(self, extension: str, charset: str) -> Size:
        # the BOM of a stateful charset is paid once, by the base name
        return len(extension.encode(charset, "strict")) - len("".encode(charset, "strict"))

    def _fit(self, base: str, budget: int, charset: str) -> int:
        # an incremental encoder emits stateful output (BOMs) only once
        encoder = codecs.getincrementalencoder(charset)("strict")
        used = 0
        for index, ch in enumerate(base):
            size = len(encoder.encode(ch))
            if used + size > budget:
                return index
            used += size
        return len(base)


def _utf16_units(ch: str) -> int:
    return 2 if ord(ch) > 0xFFFF else 1


def _is_high_surrogate(ch: str) -> bool:
    return 0xD800 <= ord(ch) <= 0xDBFF


def _is_low_surrogate(ch: str) -> bool:
    return 0xDC00 <= ord(ch) <= 0xDFFF


class Utf16CodeUnitsStrategy(NameLengthStrategy):
    """Length is the number of UTF-16 code units; the charset is ignored."""

    unit = LengthUnit.UTF16_CODE_UNITS
    label = "UTF-16 code units"

    def measure(self, name: str, charset: str = DEFAULT_CHARSET) -> Size:
        return len(name.encode("utf-16-le", "surrogatepass")) // 2

    def _fit(self, base: str, budget: int, charset: str) -> int:
        # lone surrogates count as one unit and are kept as they are
        used = 0
        keep = len(base)
        for index, ch in enumerate(base):
            size = _utf16_units(ch)
            if used + size > budget:
                keep = index
                break
            used += size
        if 0 < keep < len(base) and _is_high_surrogate(base[keep - 1]) and _is_low_surrogate(base[keep]):
            keep -= 1
        return keep


BYTES = BytesStrategy()
UTF16_CODE_UNITS = Utf16CodeUnitsStrategy()

_STRATEGIES = {
    LengthUnit.BYTES: BYTES,
    LengthUnit.UTF16_CODE_UNITS: UTF16_CODE_UNITS,
}


def strategy_for(unit: LengthUnit) -> NameLengthStrategy:
    """Return the strategy that measures names in ``unit``."""
    return _STRATEGIES[unit]
