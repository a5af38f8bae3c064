from __future__ import annotations

import logging
import os
import subprocess
from typing import IO, Protocol, Sequence

from .errors import LaunchError, WriteFailure

LOGGER = logging.getLogger(__name__)
DEFAULT_GNUPLOT_PATH = "gnuplot"


class Channel(Protocol):
    def write(self, data: bytes) -> None:
        ...

    def close(self) -> None:
        ...


class ProcessChannel:
    """Write-only pipe into a gnuplot process's stdin.

    gnuplot's own stdout/stderr are inherited and never read back. Closing the
    channel closes stdin, which makes gnuplot exit on its own; the process is
    neither waited on nor killed.
    """

    def __init__(self, proc: subprocess.Popen[bytes]) -> None:
        self._proc: subprocess.Popen[bytes] | None = proc

    @classmethod
    def spawn(
        cls,
        path: str | None = None,
        args: Sequence[str] = (),
        *,
        env: dict[str, str] | None = None,
    ) -> "ProcessChannel":
        command = [path or DEFAULT_GNUPLOT_PATH, *args]
        try:
            proc = subprocess.Popen(
                command,
                stdin=subprocess.PIPE,
                env=None if env is None else {**os.environ, **env},
            )
        except (OSError, ValueError) as exc:
            raise LaunchError(f"failed to start {command[0]!r}: {exc}") from exc
        LOGGER.info("started gnuplot process pid=%s command=%s", proc.pid, command)
        return cls(proc)

    @property
    def pid(self) -> int | None:
        return None if self._proc is None else self._proc.pid

    @property
    def closed(self) -> bool:
        return self._proc is None

    def write(self, data: bytes) -> None:
        stdin = self._require_stdin()
        try:
            stdin.write(data)
            stdin.flush()
        except (BrokenPipeError, OSError, ValueError) as exc:
            raise WriteFailure(f"write to gnuplot process failed: {exc}") from exc

    def close(self) -> None:
        proc = self._proc
        if proc is None:
            return
        self._proc = None
        if proc.stdin is None:
            return
        try:
            proc.stdin.close()
        except (BrokenPipeError, OSError) as exc:
            # Buffered bytes could not be flushed because gnuplot already exited.
            LOGGER.warning("closing gnuplot stdin failed: %s", exc)

    def _require_stdin(self) -> IO[bytes]:
        if self._proc is None:
            raise WriteFailure("process channel is closed")
        if self._proc.stdin is None:
            raise WriteFailure("process stdin unavailable")
        return self._proc.stdin


class MemoryChannel:
    """In-memory channel that records every write; ``fail_with`` simulates a broken pipe."""

    def __init__(self, *, fail_with: Exception | None = None) -> None:
        self.chunks: list[bytes] = []
        self.closed = False
        self.close_calls = 0
        self.fail_with = fail_with

    def write(self, data: bytes) -> None:
        if self.closed:
            raise WriteFailure("memory channel is closed")
        if self.fail_with is not None:
            raise WriteFailure(f"memory channel write failed: {self.fail_with}") from self.fail_with
        self.chunks.append(bytes(data))

    def close(self) -> None:
        self.close_calls += 1
        self.closed = True

    @property
    def text(self) -> str:
        return b"".join(self.chunks).decode("utf-8")
