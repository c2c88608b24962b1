#!/usr/bin/env python3
"""lldp-netcfg core subpackage."""

from lldpnetcfg.core.applier import ConfigApplier
from lldpnetcfg.core.fabric_parser import fetch_fabric_config, parse_fabric_config
from lldpnetcfg.core.models import FabricConfig

__all__ = ["ConfigApplier", "FabricConfig", "fetch_fabric_config", "parse_fabric_config"]
