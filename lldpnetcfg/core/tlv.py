#!/usr/bin/env python3
"""
lldp-netcfg - TLV Decoder

Extracts the link MAC address from the Chassis ID / Port ID lines of
``lldptool get-tlv -n`` output and decodes the hex payload of the fabric
organizational TLV into its JSON text.
"""

from __future__ import annotations

import string

from lldpnetcfg.core.errors import TlvDecodeError
from lldpnetcfg.utils.constants import (
    MAC_ADDR_SIZE,
    MAC_TLV_PREFIX,
    ORG_TLV_HEADER,
    TLV_BUFFER_SIZE,
)

_HEX = frozenset(string.hexdigits)


def parse_mac_addr(line: str) -> str:
    """
    Return the MAC address carried by a ``\\tMAC: <addr>`` line.

    The second octet is masked to ``00`` so both directions of a link yield the
    same address. The grammar is not checked here; see validation.valid_mac_addr.
    """
    # Same address is reported in both the Chassis ID and the Port ID TLV.
    mac_addr = line[len(MAC_TLV_PREFIX):][: MAC_ADDR_SIZE - 1]
    if len(mac_addr) < 5:
        return mac_addr
    return mac_addr[:3] + "00" + mac_addr[5:]


def hex_to_byte(pair: str) -> int:
    """Decode exactly two hex digits into one byte value."""
    if len(pair) != 2 or not all(c in _HEX for c in pair):
        raise TlvDecodeError(pair, f"invalid hex pair {pair!r}")
    return int(pair, 16)


def hex_to_ascii(pair: str) -> str:
    """Decode exactly two hex digits into one ASCII character."""
    return chr(hex_to_byte(pair))


def parse_org_tlv(line: str) -> str:
    """
    Decode the payload that follows ORG_TLV_HEADER on an org TLV line.

    Raises:
        TlvDecodeError: odd-length payload, non-hex characters, a payload
            larger than the TLV buffer, or bytes that are not UTF-8.
    """
    payload = line[len(ORG_TLV_HEADER):]
    if len(payload) % 2:
        raise TlvDecodeError(payload, "odd payload length")
    if len(payload) // 2 > TLV_BUFFER_SIZE - 1:
        raise TlvDecodeError(payload, "payload exceeds TLV buffer")
    data = bytes(hex_to_byte(payload[i:i + 2]) for i in range(0, len(payload), 2))
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TlvDecodeError(payload, "payload is not valid UTF-8") from exc
