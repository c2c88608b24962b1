#!/usr/bin/env python3
"""
Tests for the lldp-netcfg command-line interface.
"""

import io
import logging
from unittest.mock import MagicMock, patch

import pytest

from lldpnetcfg import cli
from lldpnetcfg.core.ui_manager import UIManager


def _ui():
    stream = io.StringIO()
    return UIManager(stream=stream), stream


def test_parse_arguments_defaults():
    args = cli.parse_arguments(["hsn0"])
    assert args.interface == "hsn0"
    assert not args.create_ifcfg
    assert not args.dry_run
    assert args.input_file is None


def test_parse_arguments_short_flags():
    args = cli.parse_arguments(["-c", "-d", "-v", "-n", "-r", "-s", "-f", "cap.txt", "hsn1"])
    assert args.create_ifcfg and args.debug and args.verbose
    assert args.dry_run and args.remove_ip_addrs and args.skip_reload
    assert args.input_file == "cap.txt"
    assert args.interface == "hsn1"


def test_parse_arguments_requires_interface():
    with pytest.raises(SystemExit) as excinfo:
        cli.parse_arguments([])
    assert excinfo.value.code == 2


def test_parse_arguments_rejects_blank_interface():
    with pytest.raises(SystemExit) as excinfo:
        cli.parse_arguments(["  "])
    assert excinfo.value.code == 2


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.parse_arguments(["-V"])
    assert excinfo.value.code == 0
    assert "lldp-netcfg v" in capsys.readouterr().out


def test_build_config():
    config = cli.build_config(cli.parse_arguments(["-n", "-v", "-c", "hsn0"]))
    assert config.interface == "hsn0"
    assert config.dry_run is True
    assert config.create_ifcfg is True
    assert config.log_level == logging.INFO


def test_build_config_env_dry_run(monkeypatch):
    monkeypatch.setenv("LLDP_NETCFG_DRY_RUN", "1")
    config = cli.build_config(cli.parse_arguments(["hsn0"]))
    assert config.dry_run is True


def test_run_dry_run_from_capture(fixture_path, mock_logger, capsys):
    args = cli.parse_arguments(["-n", "-f", fixture_path("lldptool_fabric.txt"), "hsn0"])
    ui, stream = _ui()
    status = cli.run(cli.build_config(args), ui=ui, logger=mock_logger)
    assert status == cli.EXIT_SUCCESS
    echoed = capsys.readouterr().out
    assert "[dry-run] ip link set dev hsn0 addr 02:00:00:00:04:51" in echoed
    assert "[dry-run] ip link set dev hsn0 mtu 9000" in echoed
    assert "[OK] hsn0: 02:00:00:00:04:51 10.1.2.3/24 mtu 9000 (ip commands)" in stream.getvalue()


def test_run_ifcfg_dry_run(fixture_path, mock_logger):
    args = cli.parse_arguments(["-n", "-c", "-s", "-f", fixture_path("lldptool_fabric.txt"), "hsn0"])
    ui, _stream = _ui()
    out = io.StringIO()
    status = cli.run(cli.build_config(args), ui=ui, logger=mock_logger, output=out)
    assert status == cli.EXIT_SUCCESS
    assert "IPADDR=10.1.2.3/24" in out.getvalue()


def test_run_reports_parse_failure(fixture_path, mock_logger):
    args = cli.parse_arguments(["-n", "-f", fixture_path("lldptool_no_org_tlv.txt"), "hsn0"])
    ui, stream = _ui()
    status = cli.run(cli.build_config(args), ui=ui, logger=mock_logger)
    assert status == cli.EXIT_FAILURE
    output = stream.getvalue()
    assert "[FAIL] Missing Org TLV in lldptool output" in output
    assert "[HINT]" in output
    assert "[FAIL] failed to parse TLV provided by LLDP" in output


def test_run_reports_apply_failure(fixture_path, mock_logger):
    args = cli.parse_arguments(["-f", fixture_path("lldptool_fabric.txt"), "hsn0"])
    runner = MagicMock()
    runner.run_sequence.return_value = False
    ui, stream = _ui()
    status = cli.run(cli.build_config(args), ui=ui, logger=mock_logger, runner=runner)
    assert status == cli.EXIT_FAILURE
    assert "failed to apply fabric configuration to hsn0" in stream.getvalue()


def test_main_exit_codes(fixture_path, tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-n", "-f", fixture_path("lldptool_fabric.txt"), "hsn0"])
    assert excinfo.value.code == 0

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-n", "-f", str(tmp_path / "missing.txt"), "hsn0"])
    assert excinfo.value.code == 1
    assert "unable to open input file" in capsys.readouterr().err


@patch("lldpnetcfg.cli.run", return_value=0)
def test_main_builds_logging_and_ui(mock_run):
    with pytest.raises(SystemExit):
        cli.main(["--no-color", "-d", "hsn0"])
    kwargs = mock_run.call_args.kwargs
    assert kwargs["ui"].use_color is False
    assert kwargs["logger"].name == "lldpnetcfg"
