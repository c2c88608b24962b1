#!/usr/bin/env python3
"""
lldp-netcfg - Field validator tests
"""

import pytest

from lldpnetcfg.core.validation import (
    valid_ip_addr,
    valid_mac_addr,
    valid_mtu,
    valid_number,
    valid_octet,
    valid_ttl,
)


@pytest.mark.parametrize("value", ["0", "7", "9000", "0042", "4294967296"])
def test_valid_number_accepts_digits(value):
    assert valid_number(value) is True


@pytest.mark.parametrize("value", ["", "-1", "+1", " 1", "1 ", "12a", "0x10", "1.5", "abc"])
def test_valid_number_rejects_garbage(value):
    assert valid_number(value) is False


def test_valid_octet_returns_position_after_terminator():
    assert valid_octet("10.1.2.3/24", 0, 10, ".") == 3
    assert valid_octet("10.1.2.3/24", 3, 10, ".") == 5


def test_valid_octet_end_of_string_terminator():
    assert valid_octet("aa:ff", 3, 16, None) == 5
    assert valid_octet("aa:ffx", 3, 16, None) is None


def test_valid_octet_rejects_out_of_range_and_wrong_terminator():
    assert valid_octet("256.", 0, 10, ".") is None
    assert valid_octet("100:", 0, 16, ":") is None
    assert valid_octet("12/", 0, 10, ".") is None
    assert valid_octet(".", 0, 10, ".") is None
    assert valid_octet("", 0, 10, ".") is None


@pytest.mark.parametrize(
    "mac",
    ["aa:00:cc:dd:ee:ff", "02:00:00:00:04:51", "AA:BB:CC:DD:EE:FF", "0:0:0:0:0:0"],
)
def test_valid_mac_addr_accepts(mac):
    assert valid_mac_addr(mac) is True


@pytest.mark.parametrize(
    "mac",
    [
        "",
        "aa:bb:cc:dd:ee",
        "aa:bb:cc:dd:ee:ff:00",
        "aa:bb:cc:dd:ee:ff:",
        "aa:bb:cc:dd:eeff",
        "aa:bb:cc:dd:ee:fg",
        "aa-bb-cc-dd-ee-ff",
        "aa:bb:cc:dd:ee:ff ",
        "aa:bb:cc:dd:ee:100",
    ],
)
def test_valid_mac_addr_rejects(mac):
    assert valid_mac_addr(mac) is False


@pytest.mark.parametrize(
    "ip", ["10.1.2.3/24", "0.0.0.0/0", "255.255.255.255/32", "192.168.001.010/16"]
)
def test_valid_ip_addr_accepts(ip):
    assert valid_ip_addr(ip) is True


@pytest.mark.parametrize(
    "ip",
    [
        "",
        "10.1.2.3",
        "10.1.2.3/",
        "10.1.2.3/33",
        "10.1.2.256/24",
        "10.1.2/24",
        "10.1.2.3.4/24",
        "10.1.2.3/24x",
        "10.1.2.3/24 ",
        "a.b.c.d/24",
        "10.1.2.3/-1",
    ],
)
def test_valid_ip_addr_rejects(ip):
    assert valid_ip_addr(ip) is False


def test_valid_mtu_is_valid_number():
    assert valid_mtu("9000") is True
    assert valid_mtu("") is False
    assert valid_mtu("-1500") is False


def test_valid_ttl():
    assert valid_ttl("forever") is True
    assert valid_ttl("3600") is True
    assert valid_ttl("-1") is False
    assert valid_ttl("Forever") is False
    assert valid_ttl("") is False


def test_validators_handle_very_long_digit_runs():
    assert valid_number("1" * 5000) is True
    assert valid_mtu("9" * 5000) is True
    assert valid_ttl("9" * 5000) is True
    assert valid_number("1" * 5000 + "x") is False


def test_long_octets_and_prefixes():
    assert valid_ip_addr("10.1.2." + "0" * 5000 + "3/24") is True
    assert valid_ip_addr("10.1.2." + "1" * 5000 + "/24") is False
    assert valid_ip_addr("10.1.2.3/" + "9" * 5000) is False
    assert valid_mac_addr("aa:bb:cc:dd:ee:" + "f" * 5000) is False
    assert valid_octet("0000ff:", 0, 16, ":") == 7
