#!/usr/bin/env python3
"""
lldp-netcfg - CLI Module
Copyright (C) 2025  Dorin Badea
GPLv3 License

Command-line interface and argument parsing.
"""

import os
import sys
import argparse

from lldpnetcfg.utils.constants import PROG_NAME, VERSION
from lldpnetcfg.utils.logging_setup import level_from_flags, setup_logging

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def parse_arguments(argv=None):
    """
    Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description=(
            f"{PROG_NAME} v{VERSION} - Configure a fabric interface from the "
            "MAC/IP/MTU/TTL advertised by its LLDP neighbor"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Apply the advertised configuration with ip commands
  sudo lldp-netcfg hsn0

  # Write /etc/sysconfig/network/ifcfg-hsn0 and reload it with wicked
  sudo lldp-netcfg --create-ifcfg hsn0

  # Show what would be done using a captured lldptool output
  lldp-netcfg --dry-run --input-file lldptool.out hsn0
""",
    )
    parser.add_argument(
        "--create-ifcfg",
        "-c",
        action="store_true",
        help="Create the corresponding ifcfg file instead of running ip commands",
    )
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")
    parser.add_argument(
        "--dry-run",
        "-n",
        action="store_true",
        help="Show the commands to be run but do not run them",
    )
    parser.add_argument(
        "--input-file",
        "-f",
        type=str,
        metavar="FILE",
        default=None,
        help="Read lldptool output from FILE instead of querying lldptool",
    )
    parser.add_argument(
        "--remove-ip-addrs",
        "-r",
        action="store_true",
        help="Remove any existing IP addresses before adding the fabric address",
    )
    parser.add_argument(
        "--skip-reload",
        "-s",
        action="store_true",
        help="Do not cycle (link down, then link up) the interface to apply configuration",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output (auto-detected for non-TTY)",
    )
    parser.add_argument("--version", "-V", action="version", version=f"{PROG_NAME} v{VERSION}")
    parser.add_argument("interface", help="The name of the interface to configure")

    args = parser.parse_args(argv)
    if not args.interface.strip():
        parser.error("interface name must not be empty")
    return args


def build_config(args):
    """
    Build the run configuration from parsed arguments.

    Args:
        args: Parsed arguments

    Returns:
        RunConfig for this invocation
    """
    from lldpnetcfg.core.config_context import RunConfig

    config = RunConfig(
        {
            "interface": args.interface.strip(),
            "create_ifcfg": bool(args.create_ifcfg),
            "remove_ip_addrs": bool(args.remove_ip_addrs),
            "skip_reload": bool(args.skip_reload),
            "input_file": args.input_file,
            "log_level": level_from_flags(
                debug=bool(getattr(args, "debug", False)),
                verbose=bool(getattr(args, "verbose", False)),
            ),
            "no_color": bool(getattr(args, "no_color", False)),
        }
    )
    # --dry-run forces it on; otherwise LLDP_NETCFG_DRY_RUN (read by RunConfig) applies.
    if getattr(args, "dry_run", False):
        config["dry_run"] = True
    return config


def run(config, *, ui, logger, runner=None, output=None) -> int:
    """
    Fetch, validate and apply the fabric configuration for config.interface.

    Returns:
        Process exit status
    """
    from lldpnetcfg.core.applier import ConfigApplier
    from lldpnetcfg.core.errors import NetcfgError
    from lldpnetcfg.core.fabric_parser import fetch_fabric_config

    if config.dry_run:
        ui.print_status("Dry-run: no changes will be made to the system", "INFO")
    elif hasattr(os, "geteuid") and os.geteuid() != 0 and not config.input_file:
        ui.print_status("Running without root: interface changes will likely fail", "WARNING")

    try:
        fc = fetch_fabric_config(config, logger)
    except NetcfgError as exc:
        logger.debug("TLV parse failed: %s", exc.message, exc_info=True)
        ui.print_failure(exc.message, exc.diagnostics)
        ui.print_status("failed to parse TLV provided by LLDP", "FAIL")
        return EXIT_FAILURE

    applier = ConfigApplier(config, runner, output=output, logger=logger)
    try:
        ok = applier.apply(fc)
    except NetcfgError as exc:
        ui.print_failure(exc.message, exc.diagnostics)
        return EXIT_FAILURE

    if not ok:
        ui.print_status(f"failed to apply fabric configuration to {config.interface}", "FAIL")
        return EXIT_FAILURE

    mode = "ifcfg" if config.create_ifcfg else "ip commands"
    ui.print_status(
        f"{config.interface}: {fc.mac_address} {fc.ip_address} mtu {fc.mtu} ({mode})", "OK"
    )
    return EXIT_SUCCESS


def main(argv=None):
    """Main entry point for the lldp-netcfg CLI."""
    from lldpnetcfg.core.ui_manager import UIManager

    args = parse_arguments(argv)
    config = build_config(args)
    logger = setup_logging(config.log_level)
    ui = UIManager(no_color=config.no_color, logger=logger)

    sys.exit(run(config, ui=ui, logger=logger))


if __name__ == "__main__":
    main()
