"""Tests for the process invoker. These spawn the current interpreter."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import pytest

from credolint.core.errors import ErrorCode, ProcessFailure, ProcessTimeoutError
from credolint.lint.process import run

pytestmark = pytest.mark.slow


class TestRun:
    @pytest.mark.asyncio
    async def test_collects_stdout(self, tmp_path: Path) -> None:
        result = await run(sys.executable, ["-c", "print('hello')"], cwd=tmp_path)
        assert result.stdout.strip() == "hello"
        assert result.returncode == 0
        assert result.command == [sys.executable, "-c", "print('hello')"]

    @pytest.mark.asyncio
    async def test_stdin_is_written_and_closed(self, tmp_path: Path) -> None:
        script = "import sys; data = sys.stdin.read(); print(len(data)); print(data.upper())"
        result = await run(sys.executable, ["-c", script], cwd=tmp_path, stdin="defmodule Foo")
        lines = result.stdout.splitlines()
        assert lines[0] == "13"
        assert lines[1] == "DEFMODULE FOO"

    @pytest.mark.asyncio
    async def test_without_stdin_child_sees_eof(self, tmp_path: Path) -> None:
        script = "import sys; print(repr(sys.stdin.read()))"
        result = await run(sys.executable, ["-c", script], cwd=tmp_path)
        assert result.stdout.strip() == "''"

    @pytest.mark.asyncio
    async def test_nonzero_exit_is_not_failure(self, tmp_path: Path) -> None:
        script = "import sys; print('finding'); sys.exit(3)"
        result = await run(sys.executable, ["-c", script], cwd=tmp_path)
        assert result.returncode == 3
        assert result.stdout.strip() == "finding"

    @pytest.mark.asyncio
    async def test_runs_in_working_directory(self, tmp_path: Path) -> None:
        result = await run(sys.executable, ["-c", "import os; print(os.getcwd())"], cwd=tmp_path)
        assert Path(result.stdout.strip()).resolve() == tmp_path.resolve()

    @pytest.mark.asyncio
    async def test_missing_executable_raises_process_failure(self, tmp_path: Path) -> None:
        with pytest.raises(ProcessFailure) as exc_info:
            await run("credolint-no-such-executable", ["credo", "info"], cwd=tmp_path)
        err = exc_info.value
        assert err.code == ErrorCode.PROCESS_SPAWN_FAILED
        assert err.command == ["credolint-no-such-executable", "credo", "info"]

    @pytest.mark.asyncio
    async def test_timeout_kills_process(self, tmp_path: Path) -> None:
        with pytest.raises(ProcessTimeoutError) as exc_info:
            await run(
                sys.executable,
                ["-c", "import time; time.sleep(30)"],
                cwd=tmp_path,
                timeout=0.5,
            )
        assert exc_info.value.code == ErrorCode.PROCESS_TIMEOUT
        assert isinstance(exc_info.value, ProcessFailure)

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, tmp_path: Path) -> None:
        task = asyncio.create_task(
            run(sys.executable, ["-c", "import time; time.sleep(30)"], cwd=tmp_path)
        )
        await asyncio.sleep(0.3)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    @pytest.mark.asyncio
    async def test_undecodable_output_is_replaced(self, tmp_path: Path) -> None:
        script = "import sys; sys.stdout.buffer.write(b'ok\\xff\\n')"
        result = await run(sys.executable, ["-c", script], cwd=tmp_path)
        assert result.stdout.startswith("ok")
