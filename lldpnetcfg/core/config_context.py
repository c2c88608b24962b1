"""
lldp-netcfg - Run Configuration Context

Typed wrapper around the per-run options dictionary. Built once by the CLI
and passed explicitly to the parser, the applier and the command runner.
"""

from __future__ import annotations

import logging
import os
from collections.abc import MutableMapping
from typing import Any, Dict, Iterator, Optional

from lldpnetcfg.utils.constants import (
    DEFAULT_COMMAND_TIMEOUT,
    DEFAULT_IFCFG_DIR,
    ENV_IFCFG_DIR,
    ENV_LLDPTOOL,
    IFCFG_FILE_PREFIX,
    LLDPTOOL_BINARY,
)
from lldpnetcfg.utils.dry_run import is_dry_run


class RunConfig(MutableMapping):
    """
    Typed wrapper for lldp-netcfg run options.

    Provides type-safe access to option values with defaults, enabling easier
    testing and IDE autocompletion.
    """

    def __init__(self, raw_config: Optional[Dict[str, Any]] = None):
        """
        Initialize configuration context.

        Args:
            raw_config: Optional raw option dict. Missing keys use defaults.
        """
        self._config = self._defaults()
        if raw_config:
            self._config.update(raw_config)

    @staticmethod
    def _defaults() -> Dict[str, Any]:
        """Get default configuration (environment overrides applied)."""
        return {
            "interface": "",
            "create_ifcfg": False,
            "dry_run": is_dry_run(),
            "remove_ip_addrs": False,
            "skip_reload": False,
            "input_file": None,
            "ifcfg_dir": os.environ.get(ENV_IFCFG_DIR) or DEFAULT_IFCFG_DIR,
            "lldptool": os.environ.get(ENV_LLDPTOOL) or LLDPTOOL_BINARY,
            "command_timeout": DEFAULT_COMMAND_TIMEOUT,
            "log_level": logging.ERROR,
            "no_color": False,
        }

    # -------------------------------------------------------------------------
    # Raw dict access
    # -------------------------------------------------------------------------

    def __getitem__(self, key: str) -> Any:
        return self._config[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._config[key] = value

    def __delitem__(self, key: str) -> None:
        del self._config[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._config)

    def __len__(self) -> int:
        return len(self._config)

    def __repr__(self) -> str:
        return f"RunConfig({self._config!r})"

    # -------------------------------------------------------------------------
    # Typed Properties
    # -------------------------------------------------------------------------

    @property
    def interface(self) -> str:
        return str(self._config.get("interface") or "")

    @property
    def create_ifcfg(self) -> bool:
        return bool(self._config.get("create_ifcfg"))

    @property
    def dry_run(self) -> bool:
        return bool(self._config.get("dry_run"))

    @property
    def remove_ip_addrs(self) -> bool:
        return bool(self._config.get("remove_ip_addrs"))

    @property
    def skip_reload(self) -> bool:
        return bool(self._config.get("skip_reload"))

    @property
    def input_file(self) -> Optional[str]:
        value = self._config.get("input_file")
        return str(value) if value else None

    @property
    def ifcfg_dir(self) -> str:
        return str(self._config.get("ifcfg_dir") or DEFAULT_IFCFG_DIR)

    @property
    def ifcfg_path(self) -> str:
        return os.path.join(self.ifcfg_dir, f"{IFCFG_FILE_PREFIX}{self.interface}")

    @property
    def lldptool(self) -> str:
        return str(self._config.get("lldptool") or LLDPTOOL_BINARY)

    @property
    def command_timeout(self) -> Optional[float]:
        value = self._config.get("command_timeout")
        return float(value) if value else None

    @property
    def log_level(self) -> int:
        value = self._config.get("log_level")
        return value if isinstance(value, int) else logging.ERROR

    @property
    def no_color(self) -> bool:
        return bool(self._config.get("no_color"))

    def to_dict(self) -> Dict[str, Any]:
        """Return a copy of the underlying option dictionary."""
        return dict(self._config)
