"""Unit tests for the path prefix grammar."""

import pytest

from portpath.errors import UnsanitizedInputError
from portpath.paths.prefix import NOT_FOUND, Prefix, PrefixKind, get_prefix, parse_prefix, prefix_length


class TestPrefixLength:
    """Tests for prefix_length."""

    @pytest.mark.parametrize(
        "path",
        [
            ":",
            ":foo",
            "1:\\a\\b\\c.txt",
            "1:",
            "1:a",
            "\\\\\\a\\b\\c.txt",
            "\\\\a",
            "///a/b/c.txt",
            "\\\\-server\\a\\b\\c.txt",
            "//../a",
        ],
    )
    def test_invalid(self, path):
        assert prefix_length(path) == NOT_FOUND

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("", 0),
            ("\\", 1),
            ("/", 1),
            ("a", 0),
            ("C:", 2),
            ("C:\\", 3),
            ("//server/", 9),
            ("~", 2),
            ("~/", 2),
            ("~user", 6),
            ("~user/", 6),
            ("a\\b\\c.txt", 0),
            ("\\a\\b\\c.txt", 1),
            ("C:a\\b\\c.txt", 2),
            ("C:\\a\\b\\c.txt", 3),
            ("c:/a/b/c.txt", 3),
            ("\\\\server\\a\\b\\c.txt", 9),
            ("a/b/c.txt", 0),
            ("/a/b/c.txt", 1),
            ("C:/a/b/c.txt", 3),
            ("//server/a/b/c.txt", 9),
            ("~/a/b/c.txt", 2),
            ("~user/a/b/c.txt", 6),
            ("~\\a\\b\\c.txt", 2),
            ("~user\\a\\b\\c.txt", 6),
            ("/:foo", 1),
            ("/:::::::.txt", 1),
            ("\\\\127.0.0.1\\a\\b\\c.txt", 12),
            ("\\\\::1\\a\\b\\c.txt", 6),
            ("\\\\server.example.org\\a\\b\\c.txt", 21),
            ("\\\\server.\\a\\b\\c.txt", 10),
        ],
    )
    def test_length(self, path, expected):
        assert prefix_length(path) == expected

    def test_virtual_length_exceeds_input(self):
        assert prefix_length("~") > len("~")
        assert prefix_length("~user/x") == 6

    def test_non_ascii_drive_letter_is_invalid(self):
        assert prefix_length("\u00e9:\\a") == NOT_FOUND


class TestParsePrefix:
    """Tests for prefix classification."""

    @pytest.mark.parametrize(
        "path,kind",
        [
            ("a/b", PrefixKind.RELATIVE),
            ("", PrefixKind.RELATIVE),
            ("/a", PrefixKind.ROOT_ABSOLUTE),
            ("\\a", PrefixKind.ROOT_ABSOLUTE),
            ("C:a", PrefixKind.DRIVE_RELATIVE),
            ("C:", PrefixKind.DRIVE_RELATIVE),
            ("C:\\a", PrefixKind.DRIVE_ABSOLUTE),
            ("//server/a", PrefixKind.UNC),
            ("~", PrefixKind.HOME_CURRENT_USER),
            ("~/a", PrefixKind.HOME_CURRENT_USER),
            ("~user", PrefixKind.HOME_NAMED_USER),
            ("~user\\a", PrefixKind.HOME_NAMED_USER),
        ],
    )
    def test_kind(self, path, kind):
        assert parse_prefix(path).kind is kind

    def test_invalid_is_none(self):
        assert parse_prefix("\\\\a") is None

    def test_is_virtual(self):
        assert parse_prefix("~user").is_virtual("~user")
        assert not parse_prefix("~user/").is_virtual("~user/")

    def test_prefix_is_tuple(self):
        assert parse_prefix("C:\\a") == Prefix(PrefixKind.DRIVE_ABSOLUTE, 3)


class TestGetPrefix:
    """Tests for get_prefix."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("", ""),
            ("\\", "\\"),
            ("C:\\", "C:\\"),
            ("//server/", "//server/"),
            ("~", "~/"),
            ("~/", "~/"),
            ("~user", "~user/"),
            ("~user/", "~user/"),
            ("a\\b\\c.txt", ""),
            ("C:\\a\\b\\c.txt", "C:\\"),
            ("\\\\server\\a\\b\\c.txt", "\\\\server\\"),
            ("C:/a/b/c.txt", "C:/"),
            ("~\\a\\b\\c.txt", "~\\"),
            ("~user\\a\\b\\c.txt", "~user\\"),
        ],
    )
    def test_prefix(self, path, expected):
        assert get_prefix(path) == expected

    @pytest.mark.parametrize("path", [":", "1:\\a\\b\\c.txt", "\\\\\\a\\b\\c.txt", "\\\\a"])
    def test_invalid(self, path):
        assert get_prefix(path) is None

    def test_nul_rejected(self):
        with pytest.raises(UnsanitizedInputError):
            get_prefix("~u\0ser\\a\\b\\c.txt")
