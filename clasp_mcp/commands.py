"""Command-construction rules mapping operation arguments to clasp argv.

Each rule is a pure function from the caller's argument mapping to the
argument vector that follows the ``clasp`` binary. Optional fragments are
appended in a fixed order and omitted when their argument is absent or falsy.
Nothing here touches a shell, so values are passed through verbatim.
"""

from __future__ import annotations

import shlex
from typing import Any, Callable, Mapping, Sequence

Arguments = Mapping[str, Any]
CommandRule = Callable[[Arguments], list[str]]


def _value(value: Any) -> str:
    # absent required values are passed through empty for clasp to reject
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _option(argv: list[str], args: Arguments, key: str, flag: str | None = None) -> None:
    value = args.get(key)
    if value:
        argv.extend([flag or f"--{key}", _value(value)])


def _switch(argv: list[str], args: Arguments, key: str, flag: str | None = None) -> None:
    if args.get(key):
        argv.append(flag or f"--{key}")


def login(args: Arguments) -> list[str]:
    argv = ["login"]
    _option(argv, args, "creds")
    if not args.get("global"):
        argv.append("--no-localhost")
    return argv


def logout(args: Arguments) -> list[str]:
    return ["logout"]


def create(args: Arguments) -> list[str]:
    argv = ["create", "--title", _value(args.get("title"))]
    _option(argv, args, "type")
    _option(argv, args, "parentId")
    return argv


def clone(args: Arguments) -> list[str]:
    argv = ["clone", _value(args.get("scriptId"))]
    if args.get("versionNumber"):
        argv.append(_value(args["versionNumber"]))
    return argv


def pull(args: Arguments) -> list[str]:
    argv = ["pull"]
    _option(argv, args, "versionNumber")
    return argv


def push(args: Arguments) -> list[str]:
    argv = ["push"]
    _switch(argv, args, "watch")
    _switch(argv, args, "force")
    return argv


def status(args: Arguments) -> list[str]:
    argv = ["status"]
    _switch(argv, args, "json")
    return argv


def open_project(args: Arguments) -> list[str]:
    argv = ["open"]
    _switch(argv, args, "webapp")
    _option(argv, args, "deploymentId")
    return argv


def deployments(args: Arguments) -> list[str]:
    return ["deployments"]


def deploy(args: Arguments) -> list[str]:
    argv = ["deploy"]
    _option(argv, args, "versionNumber")
    _option(argv, args, "description")
    _option(argv, args, "deploymentId")
    return argv


def undeploy(args: Arguments) -> list[str]:
    argv = ["undeploy"]
    if args.get("all"):
        argv.append("--all")
    elif args.get("deploymentId"):
        argv.append(_value(args["deploymentId"]))
    return argv


def version(args: Arguments) -> list[str]:
    argv = ["version"]
    if args.get("description"):
        argv.append(_value(args["description"]))
    return argv


def versions(args: Arguments) -> list[str]:
    return ["versions"]


def list_projects(args: Arguments) -> list[str]:
    return ["list"]


def logs(args: Arguments) -> list[str]:
    argv = ["logs"]
    for key in ("json", "open", "setup", "watch", "simplified"):
        _switch(argv, args, key)
    return argv


def run(args: Arguments) -> list[str]:
    argv = ["run", _value(args.get("functionName"))]
    _switch(argv, args, "nondev")
    _option(argv, args, "params")
    return argv


def apis(args: Arguments) -> list[str]:
    argv = ["apis"]
    _switch(argv, args, "list", flag="list")
    if args.get("enable"):
        argv.extend(["enable", _value(args["enable"])])
    if args.get("disable"):
        argv.extend(["disable", _value(args["disable"])])
    _switch(argv, args, "open")
    return argv


def setting(args: Arguments) -> list[str]:
    argv = ["setting"]
    key = args.get("key")
    value = args.get("value")
    if key and value:
        argv.extend([_value(key), _value(value)])
    elif key:
        argv.append(_value(key))
    return argv


def format_command(argv: Sequence[str]) -> str:
    """Render an argument vector as a shell-quoted string for display."""
    return shlex.join(argv)


__all__ = [
    "Arguments",
    "CommandRule",
    "apis",
    "clone",
    "create",
    "deploy",
    "deployments",
    "format_command",
    "list_projects",
    "login",
    "logout",
    "logs",
    "open_project",
    "pull",
    "push",
    "run",
    "setting",
    "status",
    "undeploy",
    "version",
    "versions",
]
