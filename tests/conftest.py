"""Shared pytest fixtures for the clasp MCP server tests."""

from __future__ import annotations

import sys
from typing import Mapping, Sequence

import pytest

from clasp_mcp.executor import ClaspExecutor
from clasp_mcp.settings import Settings, reset_settings


class RecordingExecutor(ClaspExecutor):
    """Executor double that records argv instead of spawning clasp."""

    def __init__(self, output: str = "", error: Exception | None = None):
        super().__init__(binary="clasp")
        self.output = output
        self.error = error
        self.calls: list[dict[str, object]] = []

    async def run(
        self,
        argv: Sequence[str],
        *,
        cwd: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> str:
        self.calls.append({"argv": list(argv), "cwd": cwd, "env": env})
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep settings isolated from the developer's environment."""
    for name in (
        "CLASP_BINARY",
        "CLASP_MCP_STRICT_PARAMETERS",
        "CLASP_MCP_COMMAND_TIMEOUT_SECONDS",
        "CLASP_MCP_EXTRA_ENV",
        "CLASP_MCP_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def recorder():
    return RecordingExecutor()


@pytest.fixture
def python_executor():
    """Executor whose binary is the running interpreter, driven with ``-c``."""
    return ClaspExecutor(binary=sys.executable)
