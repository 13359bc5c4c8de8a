"""Unit tests for host platform helpers."""

import os

import pytest

from portpath import platform


class TestSeparators:
    """Tests for separator helpers."""

    def test_system_separator(self):
        assert platform.SYSTEM_SEPARATOR == os.sep
        assert platform.OTHER_SEPARATOR != platform.SYSTEM_SEPARATOR
        assert platform.is_separator(platform.OTHER_SEPARATOR)

    @pytest.mark.parametrize("ch,expected", [("/", True), ("\\", True), (":", False), ("a", False)])
    def test_is_separator(self, ch, expected):
        assert platform.is_separator(ch) is expected

    def test_flip_separator(self):
        assert platform.flip_separator("/") == "\\"
        assert platform.flip_separator("\\") == "/"

    def test_flip_non_separator(self):
        with pytest.raises(ValueError, match="Not a name separator"):
            platform.flip_separator(":")

    def test_is_system_windows(self):
        assert platform.is_system_windows() is (os.sep == "\\")

    def test_os_name(self):
        assert isinstance(platform.os_name(), str)

    def test_os_name_read_at_call_time(self, monkeypatch):
        monkeypatch.setattr(platform._platform, "system", lambda: "Darwin")
        assert platform.os_name() == "Darwin"

    def test_no_import_time_host_flags(self):
        assert [name for name in vars(platform) if name.startswith("IS_")] == []
