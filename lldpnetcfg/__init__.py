#!/usr/bin/env python3
"""
lldp-netcfg - LLDP-driven fabric interface configuration
Copyright (C) 2025  Dorin Badea

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

lldp-netcfg package initialization.
"""

from lldpnetcfg.core.models import FabricConfig
from lldpnetcfg.utils.constants import VERSION

__all__ = ["FabricConfig", "VERSION", "__version__"]
__version__ = VERSION
