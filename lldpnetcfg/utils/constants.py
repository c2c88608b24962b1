#!/usr/bin/env python3
"""
lldp-netcfg - Constants and Configuration
Copyright (C) 2025  Dorin Badea
GPLv3 License
"""

# Version
VERSION = "1.0.0"

# Program name (used for log files and the user config directory)
PROG_NAME = "lldp-netcfg"

# lldptool output markers
LLDPTOOL_BINARY = "lldptool"
MAC_TLV_PREFIX = "\tMAC: "
# OUI is the manufacturer id; subtype changes only if the payload format does.
ORG_TLV_HEADER = "\tOUI: 0x000eab, Subtype: 1, Info: "
DEVICE_NOT_UP = "Device not found or inactive"

# Buffer bounds inherited from the lldptool-facing wire format
MAC_ADDR_SIZE = 24
TLV_BUFFER_SIZE = 1000

# Validation bounds
BASE_DEC = 10
BASE_HEX = 16
OCTET_MIN = 0
OCTET_MAX = 255
IP_PREFIX_MIN = 0
IP_PREFIX_MAX = 32
TTL_FOREVER = "forever"

# Persisted interface configuration (wicked/sysconfig)
DEFAULT_IFCFG_DIR = "/etc/sysconfig/network"
IFCFG_FILE_PREFIX = "ifcfg-"
POST_UP_SCRIPT = "wicked:/etc/sysconfig/network/if-up.d"

# Command execution
DEFAULT_COMMAND_TIMEOUT = 60.0
LINE_SOURCE_STOP_TIMEOUT = 2.0

# Logging
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5
DEFAULT_LOG_DIR = "~/.lldp-netcfg/logs"

# Environment overrides
ENV_DRY_RUN = "LLDP_NETCFG_DRY_RUN"
ENV_IFCFG_DIR = "LLDP_NETCFG_IFCFG_DIR"
ENV_LLDPTOOL = "LLDP_NETCFG_LLDPTOOL"
ENV_LOG_DIR = "LLDP_NETCFG_LOG_DIR"
ENV_NO_FILE_LOG = "LLDP_NETCFG_NO_FILE_LOG"

