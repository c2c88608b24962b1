#!/usr/bin/env python3
"""
lldp-netcfg - LLDP Line Sources

Lazy, finite sequences of ``lldptool get-tlv -n`` output lines, either from a
live lldptool process or from a captured file. Both are context managers so
the pipe, child process or file handle is released on every exit path.
"""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from typing import IO, Any, Iterator, List, Optional

from lldpnetcfg.core.errors import AcquisitionError
from lldpnetcfg.utils.constants import LINE_SOURCE_STOP_TIMEOUT, LLDPTOOL_BINARY


def chomp(line: str) -> str:
    """Strip one trailing newline (and its carriage return, if any)."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class LineSource(ABC):
    """Common iteration/close protocol shared by the concrete sources."""

    def __init__(self, *, logger: Any = None):
        self._logger = logger
        self._stream: Optional[IO[str]] = None
        self.returncode: Optional[int] = None

    @property
    def description(self) -> str:
        return "line source"

    @abstractmethod
    def open(self) -> "LineSource":
        """Acquire the underlying stream; idempotent."""

    @abstractmethod
    def close(self) -> int:
        """Release the stream and return the source exit status."""

    def __iter__(self) -> Iterator[str]:
        if self._stream is None:
            self.open()
        for raw in self._stream or ():
            yield chomp(raw)

    def __enter__(self) -> "LineSource":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class LldptoolLineSource(LineSource):
    """Neighbor TLVs for `interface` as reported by a live lldptool query."""

    def __init__(self, interface: str, *, lldptool: str = LLDPTOOL_BINARY, logger: Any = None):
        super().__init__(logger=logger)
        self.interface = interface
        self.lldptool = lldptool
        self._proc: Optional[subprocess.Popen] = None

    @property
    def description(self) -> str:
        return " ".join(self.command)

    @property
    def command(self) -> List[str]:
        return [self.lldptool, "get-tlv", "-i", self.interface, "-n"]

    def open(self) -> "LldptoolLineSource":
        if self._proc is not None:
            return self
        try:
            self._proc = subprocess.Popen(
                self.command,
                stdout=subprocess.PIPE,
                stdin=subprocess.DEVNULL,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            raise AcquisitionError(
                f"opening pipe to lldptool failed: {exc}",
                (
                    "check that lldpad/lldptool is installed and lldpad is running",
                    f"'{self.lldptool}' must be executable",
                ),
            ) from exc
        self._stream = self._proc.stdout
        if self._logger:
            self._logger.debug("started: %s (pid %s)", self.description, self._proc.pid)
        return self

    def close(self) -> int:
        """
        Release the pipe and reap lldptool.

        A child still running (early abort) is terminated, then killed if it
        does not exit in time.

        Returns:
            lldptool exit status (non-zero when the query failed or was cut short)
        """
        proc = self._proc
        if proc is None:
            return self.returncode if self.returncode is not None else 0
        self._proc = None
        self._stream = None
        if proc.stdout is not None:
            try:
                proc.stdout.close()
            except OSError:
                pass
        try:
            returncode = proc.wait(timeout=LINE_SOURCE_STOP_TIMEOUT)
        except subprocess.TimeoutExpired:
            proc.terminate()
            try:
                returncode = proc.wait(timeout=LINE_SOURCE_STOP_TIMEOUT)
            except subprocess.TimeoutExpired:
                proc.kill()
                returncode = proc.wait()
        self.returncode = returncode
        if self._logger:
            self._logger.debug("%s exited with status %s", self.description, returncode)
        return returncode


class FileLineSource(LineSource):
    """A captured lldptool output file (``--input-file``)."""

    def __init__(self, path: str, *, logger: Any = None):
        super().__init__(logger=logger)
        self.path = path

    @property
    def description(self) -> str:
        return self.path

    def open(self) -> "FileLineSource":
        if self._stream is not None:
            return self
        try:
            self._stream = open(self.path, "r", encoding="utf-8", errors="replace")
        except OSError as exc:
            raise AcquisitionError(
                f"unable to open input file {self.path}: {exc.strerror or exc}",
                ("check the --input-file path",),
            ) from exc
        return self

    def close(self) -> int:
        stream = self._stream
        self._stream = None
        if stream is not None:
            stream.close()
            self.returncode = 0
        return self.returncode if self.returncode is not None else 0


def open_line_source(config, *, logger: Any = None) -> LineSource:
    """
    Select the line source for a run: the --input-file capture when given,
    otherwise a live lldptool query against config.interface.

    The returned source is not opened yet; use it in a ``with`` block.
    """
    if config.input_file:
        return FileLineSource(config.input_file, logger=logger)
    return LldptoolLineSource(config.interface, lldptool=config.lldptool, logger=logger)
