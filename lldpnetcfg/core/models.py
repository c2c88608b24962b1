#!/usr/bin/env python3
"""
lldp-netcfg - Core Data Models
Copyright (C) 2025  Dorin Badea
GPLv3 License

The fabric configuration record that flows from the TLV parser to the applier.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Tuple

from lldpnetcfg.core.validation import valid_ip_addr, valid_mac_addr, valid_mtu, valid_ttl

# Validation order also decides which field is reported first.
FIELD_VALIDATORS: Tuple[Tuple[str, str, Callable[[str], bool]], ...] = (
    ("mac_address", "MAC addr", valid_mac_addr),
    ("ip_address", "IP addr", valid_ip_addr),
    ("mtu", "MTU", valid_mtu),
    ("ttl", "TTL", valid_ttl),
)


@dataclass(frozen=True)
class FabricConfig:
    """MAC/IP/MTU/TTL tuple advertised by the fabric neighbor for one interface."""

    interface_name: str
    mac_address: str = ""
    ip_address: str = ""
    mtu: str = ""
    ttl: str = ""

    def invalid_fields(self) -> List[Tuple[str, str]]:
        """Return (label, value) for every field that fails its validator."""
        return [
            (label, getattr(self, attr))
            for attr, label, check in FIELD_VALIDATORS
            if not check(getattr(self, attr))
        ]

    def is_valid(self) -> bool:
        return not self.invalid_fields()
