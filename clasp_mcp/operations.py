"""Operation registry: the static catalog of clasp operations."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from . import commands
from .commands import CommandRule
from .schema import OperationDescriptor, ParameterKind, ParameterSpec


@dataclass(frozen=True)
class OperationSpec:
    """Declarative definition of an operation and how it renders to clasp."""

    descriptor: OperationDescriptor
    render: CommandRule
    empty_output_message: str = ""

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def uses_root_dir(self) -> bool:
        return any(param.name == "rootDir" for param in self.descriptor.parameters)


class OperationRegistry:
    """Ordered, read-only mapping of operation name to spec."""

    def __init__(self, specs: Iterable[OperationSpec]):
        ordered: dict[str, OperationSpec] = {}
        for spec in specs:
            if spec.name in ordered:
                raise ValueError(f"duplicate operation name {spec.name}")
            ordered[spec.name] = spec
        self._specs: Mapping[str, OperationSpec] = MappingProxyType(ordered)
        self._descriptors = tuple(spec.descriptor for spec in ordered.values())

    def get(self, name: str) -> OperationSpec | None:
        return self._specs.get(name)

    def descriptors(self) -> tuple[OperationDescriptor, ...]:
        return self._descriptors

    def names(self) -> tuple[str, ...]:
        return tuple(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)


# ----- Parameter helpers ---------------------------------------------------


def _string(name: str, description: str, *, required: bool = False, default: str | None = None) -> ParameterSpec:
    return ParameterSpec(
        name=name,
        kind=ParameterKind.STRING,
        description=description,
        required=required,
        default=default,
    )


def _flag(name: str, description: str, *, default: bool = False) -> ParameterSpec:
    return ParameterSpec(name=name, kind=ParameterKind.BOOLEAN, description=description, default=default)


def _number(name: str, description: str) -> ParameterSpec:
    return ParameterSpec(name=name, kind=ParameterKind.NUMBER, description=description)


def _root_dir(description: str = "Root directory of the project") -> ParameterSpec:
    return _string("rootDir", description, default=".")


def _operation(
    name: str,
    description: str,
    render: CommandRule,
    *parameters: ParameterSpec,
    empty_output_message: str = "",
) -> OperationSpec:
    return OperationSpec(
        descriptor=OperationDescriptor(name=name, description=description, parameters=parameters),
        render=render,
        empty_output_message=empty_output_message,
    )


PROJECT_TYPES = ("standalone", "docs", "sheets", "slides", "forms", "webapp", "api")


# ----- Catalog -------------------------------------------------------------


REGISTRY = OperationRegistry(
    [
        _operation(
            "clasp_login",
            "Login to Google account for clasp",
            commands.login,
            _string("creds", "Optional path to credentials file"),
            _flag("global", "Save credentials globally", default=True),
            empty_output_message="Login initiated. Follow the browser prompt.",
        ),
        _operation(
            "clasp_logout",
            "Logout from Google account",
            commands.logout,
            empty_output_message="Logged out successfully.",
        ),
        _operation(
            "clasp_create",
            "Create a new Google Apps Script project",
            commands.create,
            _string("title", "Title of the project", required=True),
            ParameterSpec(
                name="type",
                kind=ParameterKind.ENUM,
                description="Type of project",
                allowed_values=PROJECT_TYPES,
                default="standalone",
            ),
            _root_dir("Root directory for the project"),
            _string("parentId", "Drive folder ID for the project"),
        ),
        _operation(
            "clasp_clone",
            "Clone an existing Google Apps Script project",
            commands.clone,
            _string("scriptId", "Script ID to clone", required=True),
            _number("versionNumber", "Specific version to clone (optional)"),
            _root_dir("Directory to clone into"),
        ),
        _operation(
            "clasp_pull",
            "Pull changes from Google Apps Script",
            commands.pull,
            _number("versionNumber", "Specific version to pull"),
            _root_dir(),
        ),
        _operation(
            "clasp_push",
            "Push changes to Google Apps Script",
            commands.push,
            _flag("watch", "Watch for changes"),
            _flag("force", "Force push without confirmation"),
            _root_dir(),
        ),
        _operation(
            "clasp_status",
            "Check clasp project status",
            commands.status,
            _flag("json", "Output as JSON"),
            _root_dir(),
        ),
        _operation(
            "clasp_open",
            "Open the project in the Apps Script editor",
            commands.open_project,
            _flag("webapp", "Open web app URL"),
            _string("deploymentId", "Deployment ID to open"),
            _root_dir(),
            empty_output_message="Opening in browser...",
        ),
        _operation(
            "clasp_deployments",
            "List deployments",
            commands.deployments,
            _root_dir(),
        ),
        _operation(
            "clasp_deploy",
            "Create a new deployment",
            commands.deploy,
            _number("versionNumber", "Version to deploy"),
            _string("description", "Deployment description"),
            _string("deploymentId", "ID to update existing deployment"),
            _root_dir(),
        ),
        _operation(
            "clasp_undeploy",
            "Remove a deployment",
            commands.undeploy,
            _string("deploymentId", "Deployment ID to remove"),
            _flag("all", "Remove all deployments"),
            _root_dir(),
        ),
        _operation(
            "clasp_version",
            "Create a new version",
            commands.version,
            _string("description", "Version description"),
            _root_dir(),
        ),
        _operation(
            "clasp_versions",
            "List versions",
            commands.versions,
            _root_dir(),
        ),
        _operation(
            "clasp_list",
            "List your Google Apps Script projects",
            commands.list_projects,
        ),
        _operation(
            "clasp_logs",
            "View project logs",
            commands.logs,
            _flag("json", "Output as JSON"),
            _flag("open", "Open logs in browser"),
            _flag("setup", "Setup logs"),
            _flag("watch", "Watch for new logs"),
            _flag("simplified", "Simplified output"),
            _root_dir(),
        ),
        _operation(
            "clasp_run",
            "Run a function in the Apps Script project",
            commands.run,
            _string("functionName", "Function name to run", required=True),
            _flag("nondev", "Run with production (non-development) deployment"),
            _string("params", "Parameters as JSON string"),
            _root_dir(),
        ),
        _operation(
            "clasp_apis",
            "List or enable/disable APIs",
            commands.apis,
            _flag("list", "List enabled APIs"),
            _string("enable", "API to enable"),
            _string("disable", "API to disable"),
            _flag("open", "Open API console"),
            _root_dir(),
        ),
        _operation(
            "clasp_setting",
            "Manage project settings",
            commands.setting,
            _string("key", "Setting key (e.g., scriptId, rootDir)"),
            _string("value", "Setting value"),
            _root_dir(),
        ),
    ]
)


def list_operations() -> tuple[OperationDescriptor, ...]:
    """Return the full catalog in registration order."""
    return REGISTRY.descriptors()


def get_operation(name: str) -> OperationSpec | None:
    return REGISTRY.get(name)


__all__ = [
    "OperationRegistry",
    "OperationSpec",
    "PROJECT_TYPES",
    "REGISTRY",
    "get_operation",
    "list_operations",
]
