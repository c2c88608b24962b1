#!/usr/bin/env python3
"""
lldp-netcfg - Error taxonomy

Every failure that stops a run derives from NetcfgError and carries the
operator-facing remediation hints that distinguish a local fault (adapter
down, lldpad misconfigured) from a neighbor fault (switch not advertising,
malformed advertisement).
"""

from __future__ import annotations

from typing import Iterable, Tuple


class NetcfgError(Exception):
    """Base class for run-terminating failures."""

    def __init__(self, message: str, diagnostics: Iterable[str] = ()):
        super().__init__(message)
        self.message = message
        self.diagnostics: Tuple[str, ...] = tuple(diagnostics)


class AcquisitionError(NetcfgError):
    """The LLDP line source was unavailable or the query failed."""


class DeviceInactiveError(AcquisitionError):
    """lldptool reported the interface as missing or inactive."""

    def __init__(self, interface: str = ""):
        super().__init__(
            "device not found or inactive according to lldp",
            (
                "check local adapter state. The adapter may be down",
                "carrier signal may also be absent.",
            ),
        )
        self.interface = interface


class MissingDataError(NetcfgError):
    """A required TLV never appeared in the LLDP output."""


class MalformedFieldError(NetcfgError):
    """A fabric configuration field failed its validator."""

    def __init__(self, field: str, value: str, diagnostics: Iterable[str] = ()):
        super().__init__(f"Invalid {field}: '{value}'", diagnostics)
        self.field = field
        self.value = value


class TlvDecodeError(MalformedFieldError):
    """The organizational TLV payload was not a well-formed hex string."""

    def __init__(self, value: str, reason: str):
        super().__init__(
            "org TLV payload",
            value,
            (
                f"fabric TLV payload could not be decoded ({reason})",
                "Check switch LLDP configuration",
            ),
        )
        self.reason = reason
