"""
Centralized pytest fixtures for the lldp-netcfg test suite.
"""

import logging
import os
from unittest.mock import MagicMock

import pytest

from lldpnetcfg.core.config_context import RunConfig
from lldpnetcfg.core.models import FabricConfig

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")

# {"ip_addr":"10.1.2.3/24","mtu":9000,"ttl":3600}
FABRIC_TLV_HEX = (
    "7b2269705f61646472223a2231302e312e322e332f3234222c226d7475223a39303030"
    "2c2274746c223a333630307d"
)


def org_tlv_line(payload_hex: str) -> str:
    return f"\tOUI: 0x000eab, Subtype: 1, Info: {payload_hex}"


def encode_tlv(text: str) -> str:
    return text.encode("ascii").hex()


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Keep tests independent of the caller's environment and home directory."""
    for var in (
        "LLDP_NETCFG_DRY_RUN",
        "LLDP_NETCFG_IFCFG_DIR",
        "LLDP_NETCFG_LLDPTOOL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LLDP_NETCFG_NO_FILE_LOG", "1")
    monkeypatch.setenv("LLDP_NETCFG_LOG_DIR", str(tmp_path / "logs"))


@pytest.fixture
def fixture_path():
    def _path(name):
        return os.path.join(FIXTURES_DIR, name)

    return _path


@pytest.fixture
def mock_logger():
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def make_config(tmp_path):
    def _make(**overrides):
        raw = {"interface": "hsn0", "ifcfg_dir": str(tmp_path)}
        raw.update(overrides)
        return RunConfig(raw)

    return _make


@pytest.fixture
def fabric_config():
    return FabricConfig(
        interface_name="hsn0",
        mac_address="02:00:00:00:04:51",
        ip_address="10.1.2.3/24",
        mtu="9000",
        ttl="3600",
    )


@pytest.fixture
def fabric_lines():
    return [
        "Chassis ID TLV",
        "\tMAC: aa:bb:cc:dd:ee:ff",
        "Port ID TLV",
        "\tMAC: aa:bb:cc:dd:ee:ff",
        "Unidentified Organizational Specific TLV",
        org_tlv_line(FABRIC_TLV_HEX),
        "End of LLDPDU TLV",
    ]
