#!/usr/bin/env python3
"""
lldp-netcfg - Dry-run helpers

Centralizes dry-run detection so the applier and command runner consistently
honor --dry-run via the LLDP_NETCFG_DRY_RUN environment variable and/or
explicit parameters.
"""

from __future__ import annotations

import os
from typing import Optional

from lldpnetcfg.utils.constants import ENV_DRY_RUN

_TRUTHY = {"1", "true", "yes", "y", "on"}


def is_dry_run(dry_run: Optional[bool] = None) -> bool:
    """
    Determine whether dry-run mode is enabled.

    Precedence:
    - Explicit `dry_run` argument (if not None)
    - Environment variable `LLDP_NETCFG_DRY_RUN` (truthy tokens)
    """
    if dry_run is not None:
        return bool(dry_run)
    token = os.environ.get(ENV_DRY_RUN, "")
    return token.strip().lower() in _TRUTHY
