"""MCP server wrapping the clasp command-line tool for Apps Script projects."""

from .dispatcher import invoke, render
from .operations import REGISTRY, get_operation, list_operations
from .schema import Failure, OperationDescriptor, ParameterSpec, Success
from .server import ClaspMCPServer, run_stdio

__all__ = [
    "ClaspMCPServer",
    "Failure",
    "OperationDescriptor",
    "ParameterSpec",
    "REGISTRY",
    "Success",
    "get_operation",
    "invoke",
    "list_operations",
    "render",
    "run_stdio",
]

__version__ = "1.0.0"
