"""
lldp-netcfg - UI Manager

Operator-facing status lines. Errors and their remediation hints are printed
as separate, distinctly styled lines so an operator can tell a local fault
from a neighbor fault at a glance.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Any, Iterable, Optional, TextIO

from rich.console import Console
from rich.text import Text


class UIManager:
    """
    Standalone status printer for lldp-netcfg.

    Uses Rich styling when writing to a terminal with colors enabled and
    plain ``[HH:MM:SS] [STATUS] message`` lines otherwise.
    """

    STATUS_MAP = {
        "INFO": "INFO",
        "OK": "OK",
        "WARNING": "WARN",
        "WARN": "WARN",
        "FAIL": "FAIL",
        "ERROR": "FAIL",
        "DIAG": "HINT",
        "HINT": "HINT",
    }
    STYLE_MAP = {
        "OK": "bright_green",
        "INFO": "bright_blue",
        "WARN": "bright_yellow",
        "FAIL": "bright_red",
        "HINT": "bright_magenta",
    }

    def __init__(
        self,
        *,
        stream: Optional[TextIO] = None,
        no_color: bool = False,
        logger: Optional[Any] = None,
    ):
        self.stream = stream or sys.stderr
        self.logger = logger
        self.use_color = not no_color and _isatty(self.stream)
        self._console = Console(
            file=self.stream,
            highlight=False,
            no_color=not self.use_color,
            force_terminal=self.use_color,
        )

    def resolve_status(self, status: str) -> tuple[str, str]:
        display = self.STATUS_MAP.get(status.upper(), status.upper())
        return display, self.STYLE_MAP.get(display, "bright_blue")

    def print_status(self, message: str, status: str = "INFO") -> None:
        """Print status message with timestamp and style."""
        ts = datetime.now().strftime("%H:%M:%S")
        display, style = self.resolve_status(status)
        msg = "" if message is None else str(message)
        lines = msg.splitlines() or [""]

        if self.use_color:
            prefix = Text()
            prefix.append(f"[{ts}] [{display}] ", style=style)
            prefix.append(lines[0])
            self._console.print(prefix)
            for line in lines[1:]:
                self._console.print(Text(f"  {line}"))
        else:
            print(f"[{ts}] [{display}] {lines[0]}", file=self.stream)
            for line in lines[1:]:
                print(f"  {line}", file=self.stream)
        self.stream.flush()

    def print_failure(self, message: str, diagnostics: Iterable[str] = ()) -> None:
        """Print an error line followed by each remediation hint."""
        self.print_status(message, "FAIL")
        for hint in diagnostics:
            self.print_status(hint, "HINT")


def _isatty(stream: Any) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False
