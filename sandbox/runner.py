"""
Bounded process runner.

Spawns an interpreter against a materialized script, feeds it the request
input on stdin and waits for it with a wall-clock deadline. Children are
started in their own process group so a timed out run can be killed along
with anything it spawned.
"""

import asyncio
import logging
import os
import signal
import time
from collections.abc import Sequence
from pathlib import Path

from core.config import settings
from schemas.code import CodeResult
from sandbox.errors import (
    DecodeError,
    ExecutionTimeout,
    InputWriteError,
    SpawnError,
    UnexpectedExecutionError,
)

logger = logging.getLogger(__name__)


async def _spawn(argv: list[str]) -> asyncio.subprocess.Process:
    try:
        return await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=os.name != "nt",
        )
    except OSError as exc:
        logger.error("Could not spawn %s: %s", argv[0], exc)
        raise SpawnError() from exc


async def _feed_input(process: asyncio.subprocess.Process, data: bytes) -> bool:
    """Write ``data`` to the child's stdin and close it. False on a broken pipe."""
    try:
        if data:
            process.stdin.write(data)
            await process.stdin.drain()
    except (BrokenPipeError, ConnectionResetError) as exc:
        logger.warning("Child %s closed stdin early: %s", process.pid, exc)
        return False
    finally:
        process.stdin.close()
    return True


def _kill_tree(process: asyncio.subprocess.Process) -> None:
    try:
        if os.name != "nt":
            os.killpg(process.pid, signal.SIGKILL)
        else:
            process.kill()
    except (ProcessLookupError, PermissionError):
        # group already gone, or only zombies left in it
        pass


def _decode(data: bytes, stream: str) -> str:
    try:
        return data.decode(settings.STREAM_ENCODING)
    except UnicodeDecodeError as exc:
        raise DecodeError(stream) from exc


async def run(
    executable: str,
    extra_args: Sequence[str],
    script_path: Path,
    input_text: str,
    timeout: float,
) -> CodeResult:
    """
    Run ``executable [extra_args] script_path`` and classify its outcome.

    Exit code 0 yields a successful result carrying stdout; any other exit
    code (signals included) yields a failed result carrying stderr. Spawn,
    stdin, deadline and decoding failures raise the matching ``RunnerError``.
    """
    try:
        data = input_text.encode(settings.STREAM_ENCODING)
    except UnicodeEncodeError as exc:
        logger.warning("Input is not encodable as %s: %s", settings.STREAM_ENCODING, exc)
        raise InputWriteError() from exc

    argv = [executable, *extra_args, str(script_path)]
    start = time.perf_counter()
    process = await _spawn(argv)
    logger.debug("Spawned pid %s: %s", process.pid, argv)

    try:
        input_ok, stdout, stderr, returncode = await asyncio.wait_for(
            asyncio.gather(
                _feed_input(process, data),
                process.stdout.read(),
                process.stderr.read(),
                process.wait(),
            ),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        logger.info("pid %s exceeded %ss deadline, killing", process.pid, timeout)
        _kill_tree(process)
        raise ExecutionTimeout() from None
    except OSError as exc:
        logger.exception("Waiting on pid %s failed", process.pid)
        raise UnexpectedExecutionError() from exc
    finally:
        if process.returncode is None:
            _kill_tree(process)
            await process.wait()

    execution_time = round(time.perf_counter() - start, 4)

    if not input_ok:
        if stderr:
            logger.info("stderr of pid %s: %r", process.pid, stderr[:500])
        raise InputWriteError()

    if returncode == 0:
        return CodeResult(
            success=True,
            output=_decode(stdout, "stdout"),
            exit_code=returncode,
            execution_time=execution_time,
        )

    return CodeResult(
        success=False,
        output=_decode(stderr, "stderr"),
        error_type="runtime",
        exit_code=returncode,
        execution_time=execution_time,
    )
