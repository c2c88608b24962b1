#!/usr/bin/env python3
"""
lldp-netcfg - Field Validators
Copyright (C) 2025  Dorin Badea
GPLv3 License

Syntactic checks for the values carried in the fabric TLV: MAC address,
IPv4 address with prefix length, MTU and TTL. Every validator is a pure
``str -> bool`` function; partial matches are failures.
"""

from __future__ import annotations

import string
from typing import Optional

from lldpnetcfg.utils.constants import (
    BASE_DEC,
    BASE_HEX,
    IP_PREFIX_MAX,
    IP_PREFIX_MIN,
    OCTET_MAX,
    OCTET_MIN,
    TTL_FOREVER,
)

_DIGITS = {
    BASE_DEC: frozenset(string.digits),
    BASE_HEX: frozenset(string.hexdigits),
}

# Significant digits that can still fit an octet or prefix in each base
_MAX_DIGITS = {BASE_DEC: 3, BASE_HEX: 2}

MAC_TERMINATORS = (":", ":", ":", ":", ":", None)
IP_TERMINATORS = (".", ".", ".", "/")


def _scan_int(value: str, pos: int, base: int) -> tuple[Optional[int], int]:
    """
    Scan the longest run of `base` digits starting at `pos`.

    Runs with more significant digits than an octet or prefix can hold are
    not converted.

    Returns:
        (parsed value, or None when no digit was consumed or the run is too
        long, index after the run)
    """
    digits = _DIGITS[base]
    end = pos
    while end < len(value) and value[end] in digits:
        end += 1
    if end == pos:
        return None, pos
    significant = value[pos:end].lstrip("0") or "0"
    if len(significant) > _MAX_DIGITS[base]:
        return None, end
    return int(significant, base), end


def valid_number(value: str) -> bool:
    """True iff `value` is entirely a non-negative base-10 integer."""
    if not isinstance(value, str) or not value:
        return False
    return all(c in _DIGITS[BASE_DEC] for c in value)


def valid_octet(value: str, pos: int, base: int, terminator: Optional[str]) -> Optional[int]:
    """
    Validate one octet token of `value` starting at `pos`.

    The token must be in [0, 255] and be followed immediately by `terminator`
    (None means end of string).

    Returns:
        The position just past the terminator, or None when invalid.
    """
    parsed, end = _scan_int(value, pos, base)
    if parsed is None or not (OCTET_MIN <= parsed <= OCTET_MAX):
        return None
    if terminator is None:
        return end if end == len(value) else None
    if value[end:end + 1] != terminator:
        return None
    return end + 1


def valid_mac_addr(mac_addr: str) -> bool:
    """True iff `mac_addr` is six colon-separated hex octets."""
    if not isinstance(mac_addr, str):
        return False
    pos: Optional[int] = 0
    for term in MAC_TERMINATORS:
        pos = valid_octet(mac_addr, pos, BASE_HEX, term)
        if pos is None:
            return False
    return True


def valid_ip_addr(ip_addr: str) -> bool:
    """True iff `ip_addr` is a dotted-quad IPv4 address with a /0-32 prefix."""
    if not isinstance(ip_addr, str):
        return False
    pos: Optional[int] = 0
    for term in IP_TERMINATORS:
        pos = valid_octet(ip_addr, pos, BASE_DEC, term)
        if pos is None:
            return False

    prefix, end = _scan_int(ip_addr, pos, BASE_DEC)
    if prefix is None or end != len(ip_addr):
        return False
    return IP_PREFIX_MIN <= prefix <= IP_PREFIX_MAX


def valid_mtu(mtu: str) -> bool:
    return valid_number(mtu)


def valid_ttl(ttl: str) -> bool:
    if ttl == TTL_FOREVER:
        return True
    return valid_number(ttl)
