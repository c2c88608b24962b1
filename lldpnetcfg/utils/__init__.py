#!/usr/bin/env python3
"""lldp-netcfg utilities subpackage."""

from lldpnetcfg.utils.constants import (
    VERSION,
    PROG_NAME,
    DEFAULT_IFCFG_DIR,
    ORG_TLV_HEADER,
)
from lldpnetcfg.utils.dry_run import is_dry_run

__all__ = [
    "VERSION",
    "PROG_NAME",
    "DEFAULT_IFCFG_DIR",
    "ORG_TLV_HEADER",
    "is_dry_run",
]
