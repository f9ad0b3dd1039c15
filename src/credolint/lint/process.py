"""Process invocation for the external linter."""

from __future__ import annotations

import asyncio
import contextlib
import time
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

import structlog

from credolint.core.errors import ProcessFailure, ProcessTimeoutError

logger = structlog.get_logger()


@dataclass(frozen=True)
class ProcessResult:
    """Captured output of a finished process. Exit code is informational only."""

    command: list[str]
    stdout: str
    stderr: str
    returncode: int | None
    duration_seconds: float


# Signature shared by run() and the fakes injected in tests
Runner = Callable[..., Awaitable[ProcessResult]]


async def _kill(proc: asyncio.subprocess.Process) -> None:
    """Kill a child and reap it so no zombie outlives the lint run."""
    if proc.returncode is None:
        with contextlib.suppress(ProcessLookupError):
            proc.kill()
    await proc.wait()


async def run(
    executable: str,
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    stdin: str | None = None,
    timeout: float | None = None,
) -> ProcessResult:
    """Run an executable to completion and collect its output.

    When ``stdin`` is given it is written in full and the stream closed before
    waiting for the process, so the child sees end of input.

    Raises:
        ProcessFailure: If the executable cannot be started.
        ProcessTimeoutError: If ``timeout`` elapses first; the child is killed.
    """
    cmd = [executable, *args]
    start_time = time.monotonic()

    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdin=asyncio.subprocess.PIPE if stdin is not None else asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=cwd,
        )
    except OSError as e:
        logger.debug("process_spawn_failed", command=cmd, error=str(e))
        raise ProcessFailure.spawn_failed(cmd, e.strerror or str(e)) from e

    payload = stdin.encode() if stdin is not None else None
    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            proc.communicate(payload), timeout=timeout
        )
    except asyncio.TimeoutError:
        await _kill(proc)
        logger.warning("process_timed_out", command=cmd, timeout_sec=timeout)
        raise ProcessTimeoutError.timed_out(cmd, timeout or 0.0) from None
    except asyncio.CancelledError:
        await _kill(proc)
        raise

    duration = time.monotonic() - start_time
    logger.debug(
        "process_finished",
        command=cmd,
        returncode=proc.returncode,
        duration_seconds=round(duration, 3),
    )
    return ProcessResult(
        command=cmd,
        stdout=stdout_bytes.decode(errors="replace"),
        stderr=stderr_bytes.decode(errors="replace"),
        returncode=proc.returncode,
        duration_seconds=duration,
    )
