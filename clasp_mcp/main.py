"""Console entry point for the clasp MCP server."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Sequence

from .env import load_dotenv_if_present
from .server import ClaspMCPServer, run_stdio
from .settings import Settings, configure_settings, get_settings


class _OperationFilter(logging.Filter):
    """Ensure every log record has an operation attribute."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "operation"):
            record.operation = "-"
        return True


def _configure_logging(level: str) -> None:
    # stdout carries the protocol stream
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [operation=%(operation)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    root_logger = logging.getLogger()
    operation_filter = _OperationFilter()
    for handler in root_logger.handlers:
        handler.addFilter(operation_filter)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Serve clasp project-management operations over MCP stdio."
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for stderr output (default: CLASP_MCP_LOG_LEVEL or INFO).",
    )
    parser.add_argument(
        "--clasp-binary",
        default=None,
        help="clasp executable to invoke (default: CLASP_BINARY or clasp).",
    )
    parser.add_argument(
        "--strict-parameters",
        action="store_true",
        default=None,
        help="Reject calls missing required parameters before running clasp.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-command timeout in seconds; 0 disables it (default: no timeout).",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def build_settings(args: argparse.Namespace) -> Settings:
    return get_settings().with_overrides(
        log_level=args.log_level.upper() if args.log_level else None,
        clasp_binary=args.clasp_binary,
        strict_parameters=args.strict_parameters,
        command_timeout_seconds=args.timeout,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    load_dotenv_if_present()
    settings = build_settings(args)
    configure_settings(settings)
    _configure_logging(settings.log_level)

    try:
        asyncio.run(run_stdio(ClaspMCPServer(settings=settings)))
    except KeyboardInterrupt:
        return 130
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
