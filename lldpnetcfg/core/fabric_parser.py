#!/usr/bin/env python3
"""
lldp-netcfg - Fabric Config Parser
Copyright (C) 2025  Dorin Badea
GPLv3 License

Scans lldptool neighbor output for the link MAC address and the fabric
organizational TLV, decodes the TLV's JSON payload and assembles a validated
FabricConfig.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from lldpnetcfg.core.errors import (
    AcquisitionError,
    DeviceInactiveError,
    MalformedFieldError,
    MissingDataError,
)
from lldpnetcfg.core.line_source import open_line_source
from lldpnetcfg.core.models import FabricConfig
from lldpnetcfg.core.tlv import parse_mac_addr, parse_org_tlv
from lldpnetcfg.utils.constants import DEVICE_NOT_UP, MAC_TLV_PREFIX, ORG_TLV_HEADER

logger = logging.getLogger(__name__)

# Remediation hints keyed by the field label used in FabricConfig.invalid_fields()
FIELD_DIAGNOSTICS: Dict[str, Tuple[str, ...]] = {
    "MAC addr": ("MAC address is malformed. Check LLDP output",),
    "IP addr": (
        "fabric TLV is malformed. Expected a valid IP address",
        "Check switch LLDP configuration",
    ),
    "MTU": (
        "fabric TLV is malformed. Expected a valid MTU",
        "Check switch LLDP configuration",
    ),
    "TTL": (
        "fabric TLV is malformed. Expected a valid TTL",
        "Check switch LLDP configuration",
    ),
}

NO_LLDP_DATA_HINTS = (
    "check local LLDPAD configuration for administrative status",
    "check the switch to see if it is advertising TLVs on other adapters",
)
NO_ORG_TLV_HINTS = (
    "check switch configuration for LLDP. Fabric TLV not advertised.",
    "Fabric configuration is not active or not advertised",
)


def scan_lldp_lines(lines: Iterable[str], log: Any = None) -> Tuple[str, str]:
    """
    Pull the MAC address and decoded org TLV out of lldptool output.

    The first matching line wins for each; later duplicates are ignored.

    Returns:
        (mac_address, org_tlv_json); either may be "" when never seen

    Raises:
        DeviceInactiveError: lldptool reported the device as down, raised as
            soon as the line is seen
        TlvDecodeError: the org TLV payload was not valid hex
    """
    log = log or logger
    mac_addr = ""
    org_tlv = ""
    for line in lines:
        log.debug("%s", line)

        if not mac_addr and line.startswith(MAC_TLV_PREFIX):
            mac_addr = parse_mac_addr(line)

        if not org_tlv and line.startswith(ORG_TLV_HEADER):
            org_tlv = parse_org_tlv(line)

        if line.startswith(DEVICE_NOT_UP):
            raise DeviceInactiveError()
    return mac_addr, org_tlv


def _json_scalar(value: Any, *, allow_number: bool) -> str:
    # bool is an int subclass; JSON true/false are not numbers here.
    if allow_number and isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return str(int(value))
        except (OverflowError, ValueError):
            # Infinity / NaN
            return ""
    if isinstance(value, str):
        return value
    return ""


def decode_fabric_fields(org_tlv: str, log: Any = None) -> Dict[str, str]:
    """
    Read ip_addr / mtu / ttl from the org TLV JSON text.

    Missing or mistyped keys (and an unparsable payload) leave the field "".
    """
    log = log or logger
    log.debug("Org TLV json: '%s'", org_tlv)
    try:
        payload = json.loads(org_tlv)
    except ValueError:
        log.warning("Org TLV payload is not valid JSON")
        payload = None
    if not isinstance(payload, dict):
        payload = {}

    return {
        "ip_address": _json_scalar(payload.get("ip_addr"), allow_number=False),
        "mtu": _json_scalar(payload.get("mtu"), allow_number=True),
        "ttl": _json_scalar(payload.get("ttl"), allow_number=True),
    }


def validate_fabric_config(fc: FabricConfig, log: Any = None) -> FabricConfig:
    """Raise MalformedFieldError for the first field that fails validation."""
    log = log or logger
    log.info("Parsed:")
    log.info("ifname:   %s", fc.interface_name)
    log.info("mac_addr: %s", fc.mac_address)
    log.info("ip_addr:  %s", fc.ip_address)
    log.info("MTU:      %s", fc.mtu)
    log.info("TTL:      %s", fc.ttl)

    invalid = fc.invalid_fields()
    if invalid:
        label, value = invalid[0]
        raise MalformedFieldError(label, value, FIELD_DIAGNOSTICS.get(label, ()))
    return fc


def parse_fabric_config(
    interface: str,
    line_source: Iterable[str],
    log: Any = None,
) -> FabricConfig:
    """
    Build a validated FabricConfig for `interface` from lldptool output.

    Args:
        interface: Target interface name
        line_source: Iterable of lldptool output lines. When it has a
            ``close()`` method, a non-zero close status fails the parse.
        log: Optional logger (defaults to the module logger)

    Raises:
        AcquisitionError, MissingDataError, MalformedFieldError
    """
    log = log or logger
    log.info("Begin parse_tlv")

    mac_addr, org_tlv = scan_lldp_lines(line_source, log)

    close = getattr(line_source, "close", None)
    status = close() if callable(close) else 0
    if status:
        raise AcquisitionError(
            "lldptool exited with error status",
            (f"lldptool returned {status}; check that lldpad is running",),
        )

    if not mac_addr:
        raise MissingDataError("lldpad not receiving any data from switch", NO_LLDP_DATA_HINTS)

    if not org_tlv:
        raise MissingDataError("Missing Org TLV in lldptool output", NO_ORG_TLV_HINTS)

    fc = FabricConfig(
        interface_name=interface,
        mac_address=mac_addr,
        **decode_fabric_fields(org_tlv, log),
    )
    return validate_fabric_config(fc, log)


def fetch_fabric_config(config, log: Any = None) -> FabricConfig:
    """Open the configured line source and parse it; the source is always released."""
    log = log or logger
    source = open_line_source(config, logger=log)
    log.debug("options.input_file: %s", config.input_file or "")
    with source:
        return parse_fabric_config(config.interface, source, log)
