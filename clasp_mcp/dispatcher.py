"""Dispatch an invocation request to its command rule and executor."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .exceptions import ClaspMCPError, MissingParameterError, UnknownOperationError
from .executor import ClaspExecutor
from .operations import OperationRegistry, OperationSpec, REGISTRY
from .schema import Failure, InvocationRequest, InvocationResult, Success
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def resolve_working_directory(
    spec: OperationSpec, arguments: Mapping[str, Any], working_directory: str | None = None
) -> str | None:
    """Pick the directory clasp runs in; ``None`` means the process cwd."""
    if working_directory:
        return working_directory
    if spec.uses_root_dir:
        root_dir = arguments.get("rootDir")
        if isinstance(root_dir, str) and root_dir:
            return root_dir
    return None


def render(
    operation_name: str,
    arguments: Mapping[str, Any] | None = None,
    *,
    registry: OperationRegistry = REGISTRY,
) -> list[str]:
    """Render the clasp argv for an operation without executing it."""
    spec = registry.get(operation_name)
    if spec is None:
        raise UnknownOperationError(operation_name)
    return spec.render(arguments or {})


async def invoke(
    operation_name: str,
    arguments: Mapping[str, Any] | None = None,
    working_directory: str | None = None,
    *,
    executor: ClaspExecutor | None = None,
    settings: Settings | None = None,
    registry: OperationRegistry = REGISTRY,
    env: Mapping[str, str] | None = None,
) -> InvocationResult:
    """Run one operation and return its classified result.

    Never raises for operation-level failures; cancellation still propagates.
    """
    settings = settings or get_settings()
    arguments = {} if arguments is None else arguments
    spec = registry.get(operation_name)
    if spec is None:
        logger.warning("unknown operation requested name=%s", operation_name)
        error = UnknownOperationError(operation_name)
        return Failure(kind=error.kind, message=str(error))

    try:
        if settings.strict_parameters:
            missing = spec.descriptor.missing_required(dict(arguments))
            if missing:
                raise MissingParameterError(operation_name, missing)
        argv = spec.render(arguments)
        cwd = resolve_working_directory(spec, arguments, working_directory)
    except ClaspMCPError as exc:
        logger.info("operation rejected name=%s kind=%s", operation_name, exc.kind)
        return Failure(kind=exc.kind, message=str(exc))
    except Exception as exc:
        logger.exception("failed to render operation name=%s", operation_name)
        return Failure(kind="InternalError", message=str(exc))

    executor = executor or ClaspExecutor.from_settings(settings)
    try:
        output = await executor.run(argv, cwd=cwd, env=env)
    except ClaspMCPError as exc:
        return Failure(kind=exc.kind, message=str(exc))
    except Exception as exc:
        logger.exception("clasp execution failed name=%s", operation_name)
        return Failure(kind="InternalError", message=str(exc))
    return Success(text=output)


async def invoke_request(request: InvocationRequest, **kwargs: Any) -> InvocationResult:
    return await invoke(request.operation_name, request.arguments, **kwargs)


__all__ = ["invoke", "invoke_request", "render", "resolve_working_directory"]
