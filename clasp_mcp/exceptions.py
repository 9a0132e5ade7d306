"""Exception types shared across the dispatcher and executor."""

from __future__ import annotations

from typing import Sequence


class ClaspMCPError(Exception):
    """Base class for failures surfaced as error responses."""

    kind = "InternalError"


class UnknownOperationError(ClaspMCPError):
    """Raised when a caller names an operation that is not registered."""

    kind = "UnknownOperation"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class MissingParameterError(ClaspMCPError):
    """Raised in strict mode when required arguments are absent."""

    kind = "MissingParameter"

    def __init__(self, operation: str, missing: Sequence[str]):
        if not missing:
            raise ValueError("MissingParameterError requires at least one parameter name")
        self.operation = operation
        self.missing = tuple(missing)
        super().__init__(f"Missing required parameter(s): {', '.join(self.missing)}")


class ClaspCommandError(ClaspMCPError):
    """Raised by the executor when clasp cannot run or reports a failure."""

    def __init__(self, message: str, *, kind: str, stdout: str = "", stderr: str = ""):
        self.kind = kind
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(message)

    @classmethod
    def spawn_failure(cls, detail: str, *, stdout: str = "", stderr: str = "") -> "ClaspCommandError":
        return cls(f"Clasp command failed: {detail}", kind="SpawnFailure", stdout=stdout, stderr=stderr)

    @classmethod
    def diagnostic(cls, stderr: str, *, stdout: str = "") -> "ClaspCommandError":
        return cls(stderr, kind="DiagnosticOutput", stdout=stdout, stderr=stderr)


__all__ = [
    "ClaspCommandError",
    "ClaspMCPError",
    "MissingParameterError",
    "UnknownOperationError",
]
