#!/usr/bin/env python3
"""
lldp-netcfg - Centralized Command Runner

Single entry point for system command execution (ip, wicked).
"""

from __future__ import annotations

import shlex
import subprocess
import sys
import time
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, TextIO, Tuple

from lldpnetcfg.utils.constants import DEFAULT_COMMAND_TIMEOUT


@dataclass(frozen=True)
class CommandResult:
    args: List[str]
    returncode: int
    stdout: Optional[str]
    stderr: Optional[str]
    duration_s: float
    timed_out: bool
    executed: bool = True

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and not self.timed_out


class CommandRunner:
    def __init__(
        self,
        *,
        logger: Any = None,
        dry_run: bool = False,
        default_timeout: Optional[float] = DEFAULT_COMMAND_TIMEOUT,
        echo_stream: Optional[TextIO] = None,
    ):
        self._logger = logger
        self._dry_run = bool(dry_run)
        self._default_timeout = default_timeout
        self._echo_stream = echo_stream

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def run(
        self,
        args: Sequence[str],
        *,
        timeout: Optional[float] = None,
    ) -> CommandResult:
        cmd = self._validate_args(args)
        formatted = self._format_cmd(cmd)

        self._log("INFO", f"Command to execute: {formatted}")
        if self._dry_run:
            self._log("INFO", f"[dry-run] {formatted}")
            self._echo(f"[dry-run] {formatted}")
            return CommandResult(
                args=list(cmd),
                returncode=0,
                stdout="",
                stderr="",
                duration_s=0.0,
                timed_out=False,
                executed=False,
            )

        timeout_val = timeout if timeout is not None else self._default_timeout
        start = time.monotonic()
        try:
            completed = subprocess.run(
                list(cmd),
                timeout=timeout_val,
                capture_output=True,
                text=True,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            self._log("WARNING", f"timeout: {formatted}")
            return CommandResult(
                args=list(cmd),
                returncode=124,
                stdout=_as_text(exc.stdout),
                stderr=_as_text(exc.stderr),
                duration_s=time.monotonic() - start,
                timed_out=True,
            )
        except FileNotFoundError as exc:
            self._log("FAIL", f"command not found: {formatted}")
            return CommandResult(
                args=list(cmd),
                returncode=127,
                stdout=None,
                stderr=str(exc),
                duration_s=time.monotonic() - start,
                timed_out=False,
            )
        except OSError as exc:
            self._log("FAIL", f"cannot execute: {formatted}: {exc}")
            return CommandResult(
                args=list(cmd),
                returncode=126,
                stdout=None,
                stderr=str(exc),
                duration_s=time.monotonic() - start,
                timed_out=False,
            )

        result = CommandResult(
            args=list(cmd),
            returncode=int(completed.returncode),
            stdout=completed.stdout,
            stderr=completed.stderr,
            duration_s=time.monotonic() - start,
            timed_out=False,
        )
        if not result.ok:
            detail = (result.stderr or "").strip()
            self._log(
                "FAIL",
                f"'{formatted}' exited with error status {result.returncode}"
                + (f": {detail}" if detail else ""),
            )
        return result

    def run_sequence(self, commands: Sequence[Sequence[str]]) -> bool:
        """
        Run `commands` strictly in order, stopping at the first failure.

        Commands already applied are not undone when a later one fails.

        Returns:
            True only if every command succeeded (always True under dry-run)
        """
        for index, cmd in enumerate(commands):
            result = self.run(cmd)
            if not result.ok:
                skipped = len(commands) - index - 1
                if skipped:
                    self._log("DEBUG", f"skipping {skipped} queued command(s)")
                return False
        return True

    def _validate_args(self, args: Sequence[str]) -> Tuple[str, ...]:
        if isinstance(args, (str, bytes)):
            raise TypeError("CommandRunner expects args as a list/tuple of strings (shell=False)")
        cmd = tuple(a if isinstance(a, str) else str(a) for a in args)
        if not cmd or not cmd[0].strip():
            raise ValueError("Empty command")
        return cmd

    def _format_cmd(self, args: Sequence[str]) -> str:
        return " ".join(shlex.quote(a) for a in args)

    def _echo(self, line: str) -> None:
        stream = self._echo_stream or sys.stdout
        print(line, file=stream, flush=True)

    def _log(self, level: str, message: str) -> None:
        if not self._logger:
            return
        if level == "DEBUG":
            self._logger.debug(message)
        elif level in {"WARNING", "WARN"}:
            self._logger.warning(message)
        elif level == "FAIL":
            self._logger.error(message)
        else:
            self._logger.info(message)


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return bytes(value).decode("utf-8", errors="replace")
