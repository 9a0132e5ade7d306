"""Subprocess execution for clasp commands."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Mapping, Sequence

from .commands import format_command
from .exceptions import ClaspCommandError
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

WARNING_MARKER = "Warning"


def classify_output(stdout: str, stderr: str) -> str:
    """Return trimmed stdout, or raise when stderr carries a real diagnostic.

    Any stderr text without the ``Warning`` marker is treated as fatal even if
    the process exited zero.
    """
    if stderr and WARNING_MARKER not in stderr:
        raise ClaspCommandError.diagnostic(stderr, stdout=stdout)
    return stdout.strip()


class ClaspExecutor:
    """Runs clasp as a child process and buffers both output streams."""

    def __init__(
        self,
        *,
        binary: str = "clasp",
        extra_env: Mapping[str, str] | None = None,
        timeout_seconds: float | None = None,
    ):
        self.binary = binary
        self.extra_env = dict(extra_env or {})
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ClaspExecutor":
        settings = settings or get_settings()
        return cls(
            binary=settings.clasp_binary,
            extra_env=settings.extra_env,
            timeout_seconds=settings.command_timeout_seconds,
        )

    def build_env(self, overrides: Mapping[str, str] | None = None) -> dict[str, str]:
        env = dict(os.environ)
        env.update(self.extra_env)
        if overrides:
            env.update(overrides)
        return env

    async def run(
        self,
        argv: Sequence[str],
        *,
        cwd: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> str:
        """Execute ``binary *argv`` and return its classified stdout."""
        cmd = [self.binary, *argv]
        display = format_command(cmd)
        workdir = cwd or os.getcwd()
        logger.info("clasp command started cmd=%s cwd=%s", display, workdir)
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                cwd=workdir,
                env=self.build_env(env),
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (OSError, ValueError) as exc:
            # ValueError: embedded NUL or unencodable text in argv, cwd or env
            logger.warning("clasp command could not start cmd=%s error=%s", display, exc)
            raise ClaspCommandError.spawn_failure(str(exc)) from exc

        try:
            if self.timeout_seconds:
                raw_out, raw_err = await asyncio.wait_for(
                    process.communicate(), timeout=self.timeout_seconds
                )
            else:
                raw_out, raw_err = await process.communicate()
        except asyncio.TimeoutError as exc:
            await _terminate(process)
            logger.warning(
                "clasp command timed out cmd=%s timeout=%s", display, self.timeout_seconds
            )
            raise ClaspCommandError.spawn_failure(
                f"Command '{display}' timed out after {self.timeout_seconds:g} seconds"
            ) from exc
        except asyncio.CancelledError:
            await _terminate(process)
            logger.info("clasp command cancelled cmd=%s", display)
            raise

        stdout = raw_out.decode("utf-8", errors="replace")
        stderr = raw_err.decode("utf-8", errors="replace")
        if process.returncode != 0:
            detail = f"Command '{display}' returned non-zero exit status {process.returncode}"
            if stderr.strip():
                detail = f"{detail}\n{stderr.strip()}"
            logger.warning(
                "clasp command exited cmd=%s returncode=%s", display, process.returncode
            )
            raise ClaspCommandError.spawn_failure(detail, stdout=stdout, stderr=stderr)

        output = classify_output(stdout, stderr)
        logger.info("clasp command completed cmd=%s bytes=%s", display, len(output))
        return output


async def _terminate(process: asyncio.subprocess.Process) -> None:
    if process.returncode is not None:
        return
    try:
        process.kill()
    except ProcessLookupError:
        pass
    await process.wait()


__all__ = ["ClaspExecutor", "WARNING_MARKER", "classify_output"]
