#!/usr/bin/env python3
"""
lldp-netcfg - Configuration Applier
Copyright (C) 2025  Dorin Badea
GPLv3 License

Applies a validated FabricConfig to the local interface, either as a
persisted wicked ifcfg file (followed by an interface reload) or as a live
sequence of ``ip`` commands.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional, TextIO

from lldpnetcfg.core.command_runner import CommandRunner
from lldpnetcfg.core.errors import MalformedFieldError
from lldpnetcfg.core.fabric_parser import FIELD_DIAGNOSTICS
from lldpnetcfg.core.models import FabricConfig
from lldpnetcfg.utils.constants import POST_UP_SCRIPT


def render_ifcfg(fc: FabricConfig) -> str:
    """Render the wicked/sysconfig ifcfg document for `fc`."""
    # TTL has no ifcfg key; the address lifetime only exists in live mode.
    lines = [
        f"NAME={fc.interface_name}",
        "STARTMODE=auto",
        "BOOTPROTO=static",
        f"LLADDR={fc.mac_address}",
        f"IPADDR={fc.ip_address}",
        f"MTU={fc.mtu}",
        f"POST_UP_SCRIPT={POST_UP_SCRIPT}",
    ]
    return "\n".join(lines) + "\n"


class ConfigApplier:
    """Turn a FabricConfig into system state according to the run options."""

    def __init__(
        self,
        config,
        runner: Optional[CommandRunner] = None,
        *,
        output: Optional[TextIO] = None,
        logger: Any = None,
    ):
        """
        Args:
            config: RunConfig for this run
            runner: Command runner (defaults to one honoring config.dry_run)
            output: Destination for the ifcfg document under dry-run (stdout)
            logger: Optional logger (defaults to the module logger)
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.runner = runner or CommandRunner(
            logger=self.logger,
            dry_run=config.dry_run,
            default_timeout=config.command_timeout,
        )
        self.output = output

    def apply(self, fc: FabricConfig) -> bool:
        invalid = fc.invalid_fields()
        if invalid:
            label, value = invalid[0]
            raise MalformedFieldError(label, value, FIELD_DIAGNOSTICS.get(label, ()))
        if self.config.create_ifcfg:
            return self.write_ifcfg(fc)
        return self.apply_ip_config(fc)

    # -------------------------------------------------------------------------
    # Persisted-file mode
    # -------------------------------------------------------------------------

    def write_ifcfg(self, fc: FabricConfig) -> bool:
        path = self.config.ifcfg_path
        document = render_ifcfg(fc)

        if self.config.dry_run:
            self.logger.info("open '%s' for writing", path)
            stream = self.output or sys.stdout
            stream.write(document)
            stream.flush()
            self.logger.info("close")
        else:
            try:
                with open(path, "w", encoding="utf-8") as fh:
                    fh.write(document)
            except OSError as exc:
                self.logger.error("Unable to create ifcfg file %s: %s", path, exc.strerror or exc)
                return False
            self.logger.info("wrote %s", path)

        if self.config.skip_reload:
            return True
        return self.reload_interface(fc)

    def reload_commands(self, fc: FabricConfig) -> List[List[str]]:
        return [
            ["wicked", "ifdown", fc.interface_name],
            ["wicked", "ifup", fc.interface_name],
        ]

    def reload_interface(self, fc: FabricConfig) -> bool:
        """Cycle the interface through wicked so it picks up the ifcfg file."""
        ok = self.runner.run_sequence(self.reload_commands(fc))
        if not ok:
            self.logger.error("a command in the queue failed")
        return ok

    # -------------------------------------------------------------------------
    # Live-command mode
    # -------------------------------------------------------------------------

    def ip_commands(self, fc: FabricConfig) -> List[List[str]]:
        """Ordered ``ip`` commands that reconfigure the link in place."""
        ifname = fc.interface_name
        commands: List[List[str]] = []
        if self.config.remove_ip_addrs:
            commands.append(["ip", "addr", "flush", "dev", ifname])
        if not self.config.skip_reload:
            commands.append(["ip", "link", "set", "dev", ifname, "down"])
        commands.append(["ip", "link", "set", "dev", ifname, "addr", fc.mac_address])
        if not self.config.skip_reload:
            commands.append(["ip", "link", "set", "dev", ifname, "up"])
        # TODO: preferred_lft receives the MTU value, matching deployed
        # behavior; confirm with the switch-side TLV owners before changing.
        commands.append(
            [
                "ip", "addr", "add", fc.ip_address, "dev", ifname,
                "valid_lft", fc.ttl, "preferred_lft", fc.mtu,
            ]
        )
        commands.append(["ip", "link", "set", "dev", ifname, "mtu", fc.mtu])
        return commands

    def apply_ip_config(self, fc: FabricConfig) -> bool:
        ok = self.runner.run_sequence(self.ip_commands(fc))
        if not ok:
            self.logger.error("a command in the queue failed")
        return ok
