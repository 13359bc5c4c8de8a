"""Unit tests for name length strategies."""

import math

import pytest

from portpath.errors import InvalidFileNameError
from portpath.filesystem.length import (
    BYTES,
    UTF16_CODE_UNITS,
    LengthUnit,
    split_extension,
    strategy_for,
)

GRINNING = "\U0001F600"
NI_HAO_MA = "你好嗎"


def has_lone_surrogate(text):
    return any(0xD800 <= ord(ch) <= 0xDFFF for ch in text)


class TestSplitExtension:
    """Tests for split_extension."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("report.txt", ("report", ".txt")),
            ("report.tar.gz", ("report", ".tar.gz")),
            (".profile", (".profile", "")),
            (".config.yml", (".config", ".yml")),
            ("README", ("README", "")),
            ("trailing.", ("trailing", ".")),
            ("", ("", "")),
        ],
    )
    def test_split(self, name, expected):
        assert split_extension(name) == expected


class TestStrategyLookup:
    """Tests for strategy_for."""

    def test_units(self):
        assert strategy_for(LengthUnit.BYTES) is BYTES
        assert strategy_for(LengthUnit.UTF16_CODE_UNITS) is UTF16_CODE_UNITS


class TestUtf16CodeUnits:
    """Tests for the UTF-16 code unit strategy."""

    def test_measure(self):
        assert UTF16_CODE_UNITS.measure("abc") == 3
        assert UTF16_CODE_UNITS.measure(GRINNING) == 2
        assert UTF16_CODE_UNITS.measure(NI_HAO_MA) == 3

    def test_charset_ignored(self):
        assert UTF16_CODE_UNITS.measure(NI_HAO_MA, "ascii") == 3

    def test_fitting_name_unchanged(self):
        assert UTF16_CODE_UNITS.truncate("abc", 3) == "abc"

    def test_keeps_extension(self):
        assert UTF16_CODE_UNITS.truncate("averylongname.ext", 10) == "averyl.ext"

    def test_never_splits_surrogate_pair(self):
        name = "ab" + GRINNING + "cd"
        result = UTF16_CODE_UNITS.truncate(name, 3)
        assert result == "ab"
        assert not has_lone_surrogate(result)

    def test_surrogate_pair_kept_when_it_fits(self):
        assert UTF16_CODE_UNITS.truncate("ab" + GRINNING + "cd", 4) == "ab" + GRINNING

    def test_explicit_surrogate_pair_not_split(self):
        name = "ab\ud83d\ude00cd"
        assert UTF16_CODE_UNITS.measure(name) == 6
        assert UTF16_CODE_UNITS.truncate(name, 3) == "ab"
        assert UTF16_CODE_UNITS.truncate(name, 4) == "ab\ud83d\ude00"

    def test_surrogate_boundary_with_extension(self):
        name = GRINNING * 10 + ".txt"
        result = UTF16_CODE_UNITS.truncate(name, 9)
        assert result == GRINNING * 2 + ".txt"
        assert UTF16_CODE_UNITS.measure(result) <= 9

    def test_lone_surrogate_within_limit_unchanged(self):
        assert UTF16_CODE_UNITS.measure("a\ud800b") == 3
        assert UTF16_CODE_UNITS.truncate("a\ud800b", 3) == "a\ud800b"

    def test_lone_surrogate_counts_one_unit(self):
        assert UTF16_CODE_UNITS.truncate("ab\ud83dxyz", 3) == "ab\ud83d"
        assert UTF16_CODE_UNITS.truncate("\udc00" * 300, 255) == "\udc00" * 255

    def test_extension_fills_limit(self):
        assert UTF16_CODE_UNITS.truncate("abcdef.txt", 4) == ".txt"

    def test_extension_too_long(self):
        with pytest.raises(InvalidFileNameError, match="extension"):
            UTF16_CODE_UNITS.truncate("abcdef.txt", 3)

    def test_leading_dot_is_not_extension(self):
        assert UTF16_CODE_UNITS.truncate(".hidden_file_name", 5) == ".hidd"

    def test_idempotent(self):
        once = UTF16_CODE_UNITS.truncate("x" * 300 + ".log", 255)
        assert len(once) == 255
        assert UTF16_CODE_UNITS.truncate(once, 255) == once


class TestBytes:
    """Tests for the encoded byte length strategy."""

    def test_measure(self):
        assert BYTES.measure("abc") == 3
        assert BYTES.measure(NI_HAO_MA) == 9
        assert BYTES.measure(GRINNING) == 4
        assert BYTES.measure(NI_HAO_MA, "utf-16-le") == 6

    def test_unencodable_is_infinite(self):
        assert BYTES.measure(NI_HAO_MA, "ascii") == math.inf

    def test_unknown_charset_is_infinite(self):
        assert BYTES.measure("abc", "no-such-charset") == math.inf

    def test_fitting_name_unchanged(self):
        assert BYTES.truncate(NI_HAO_MA, 9) == NI_HAO_MA

    def test_never_splits_multibyte_sequence(self):
        result = BYTES.truncate(NI_HAO_MA + ".txt", 10)
        assert result == "你好.txt"
        assert BYTES.measure(result) == 10

    def test_four_byte_characters(self):
        result = BYTES.truncate(GRINNING * 70, 255)
        assert result == GRINNING * 63
        assert not has_lone_surrogate(result)

    def test_single_byte_charset(self):
        assert BYTES.truncate("café-menu", 5, "latin-1") == "café-"

    def test_extension_fills_limit(self):
        assert BYTES.truncate("abcdef.txt", 4) == ".txt"
        assert BYTES.truncate("name.你好", 7) == ".你好"

    def test_extension_too_long(self):
        with pytest.raises(InvalidFileNameError, match="extension"):
            BYTES.truncate("abcdef.txt", 3)
        with pytest.raises(InvalidFileNameError, match="extension"):
            BYTES.truncate("name.你好", 6)

    def test_first_character_does_not_fit(self):
        assert BYTES.truncate(GRINNING * 2, 3) == ""
        assert BYTES.truncate(GRINNING * 2 + ".md", 5) == ".md"

    def test_bom_counted_once(self):
        # two BOM bytes, then two bytes per character
        result = BYTES.truncate("abcdefgh.txt", 16, "utf-16")
        assert result == "abc.txt"
        assert BYTES.measure(result, "utf-16") == 16

    def test_unencodable_rejected(self):
        with pytest.raises(InvalidFileNameError, match="cannot be encoded"):
            BYTES.truncate(NI_HAO_MA, 2, "ascii")

    def test_unknown_charset_rejected(self):
        with pytest.raises(InvalidFileNameError, match="Unknown charset"):
            BYTES.truncate("abc", 2, "no-such-charset")

    def test_idempotent(self):
        once = BYTES.truncate(NI_HAO_MA * 100 + ".md", 255)
        assert BYTES.measure(once) <= 255
        assert once.endswith(".md")
        assert BYTES.truncate(once, 255) == once
