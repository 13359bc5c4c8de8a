"""Unit tests for UNC host name validation."""

import pytest

from portpath.paths import hosts


class TestIPv4:
    """Tests for dotted-quad addresses."""

    @pytest.mark.parametrize("name", ["127.0.0.1", "0.0.0.0", "255.255.255.255", "10.1.20.3"])
    def test_valid(self, name):
        assert hosts.is_ipv4_address(name)

    @pytest.mark.parametrize(
        "name",
        ["127.0.0.256", "127.0.0.01", "127.0..1", "1.2.3", "1.2.3.4.5", "a.b.c.d", "1.2.3.4\n"],
    )
    def test_invalid(self, name):
        assert not hosts.is_ipv4_address(name)


class TestIPv6:
    """Tests for IPv6 addresses and :: compression."""

    @pytest.mark.parametrize(
        "address",
        [
            "::1",
            "1::",
            "::",
            "1::127.0.0.1",
            "fe80::1",
            "2001:db8:0:0:0:0:2:1",
            "2001:DB8::FFFF",
            "::ffff:192.168.0.1",
        ],
    )
    def test_valid(self, address):
        assert hosts.is_ipv6_address(address)

    @pytest.mark.parametrize(
        "address",
        [
            ":1",
            "1:",
            "::1::2",
            "1:2",
            "1:2:3:4:5:6:7:8:9",
            "12345::1",
            "g::1",
            "1::127.0.0.256",
            "1:::2",
        ],
    )
    def test_invalid(self, address):
        assert not hosts.is_ipv6_address(address)


class TestRegName:
    """Tests for dot-separated host names."""

    @pytest.mark.parametrize(
        "name", ["server", "server.example.org", "server.sub.example.org", "server.", "a-b", "127.0.0.256"]
    )
    def test_valid(self, name):
        assert hosts.is_reg_name(name)

    @pytest.mark.parametrize("name", ["-server", ".", "..", "a..b", ".server", "serv_er", "ser ver"])
    def test_invalid(self, name):
        assert not hosts.is_reg_name(name)


class TestValidHostName:
    """Tests for the combined UNC host check."""

    @pytest.mark.parametrize("name", ["server", "127.0.0.1", "::1", "1::127.0.0.1", "server."])
    def test_accepts(self, name):
        assert hosts.is_valid_host_name(name)

    @pytest.mark.parametrize("name", ["-server", "127.0..1", "::1::2", ":1", ".."])
    def test_rejects(self, name):
        assert not hosts.is_valid_host_name(name)
