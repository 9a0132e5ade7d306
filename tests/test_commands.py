import pytest

from clasp_mcp import commands
from clasp_mcp.dispatcher import render
from clasp_mcp.exceptions import UnknownOperationError


@pytest.mark.parametrize(
    ("operation", "arguments", "expected"),
    [
        ("clasp_login", {}, ["login", "--no-localhost"]),
        (
            "clasp_login",
            {"creds": "creds.json", "global": True},
            ["login", "--creds", "creds.json"],
        ),
        (
            "clasp_login",
            {"creds": "creds.json"},
            ["login", "--creds", "creds.json", "--no-localhost"],
        ),
        ("clasp_login", {"global": False}, ["login", "--no-localhost"]),
        ("clasp_logout", {}, ["logout"]),
        (
            "clasp_create",
            {"title": "My Project", "type": "sheets"},
            ["create", "--title", "My Project", "--type", "sheets"],
        ),
        (
            "clasp_create",
            {"title": "Doc", "parentId": "folder1"},
            ["create", "--title", "Doc", "--parentId", "folder1"],
        ),
        ("clasp_clone", {"scriptId": "abc123"}, ["clone", "abc123"]),
        ("clasp_clone", {"scriptId": "abc123", "versionNumber": 4}, ["clone", "abc123", "4"]),
        ("clasp_pull", {}, ["pull"]),
        ("clasp_pull", {"versionNumber": 2.0}, ["pull", "--versionNumber", "2"]),
        ("clasp_push", {}, ["push"]),
        ("clasp_push", {"watch": True, "force": True}, ["push", "--watch", "--force"]),
        ("clasp_status", {"json": True}, ["status", "--json"]),
        ("clasp_open", {}, ["open"]),
        (
            "clasp_open",
            {"webapp": True, "deploymentId": "AKfy1"},
            ["open", "--webapp", "--deploymentId", "AKfy1"],
        ),
        ("clasp_deployments", {"rootDir": "proj"}, ["deployments"]),
        (
            "clasp_deploy",
            {"versionNumber": 3, "description": "release \"v3\"", "deploymentId": "AKfy1"},
            [
                "deploy",
                "--versionNumber",
                "3",
                "--description",
                "release \"v3\"",
                "--deploymentId",
                "AKfy1",
            ],
        ),
        ("clasp_undeploy", {"deploymentId": "AKfy123"}, ["undeploy", "AKfy123"]),
        ("clasp_undeploy", {"all": True, "deploymentId": "AKfy123"}, ["undeploy", "--all"]),
        ("clasp_undeploy", {}, ["undeploy"]),
        ("clasp_version", {"description": "First cut"}, ["version", "First cut"]),
        ("clasp_versions", {}, ["versions"]),
        ("clasp_list", {}, ["list"]),
        (
            "clasp_logs",
            {"json": True, "open": True, "setup": True, "watch": True, "simplified": True},
            ["logs", "--json", "--open", "--setup", "--watch", "--simplified"],
        ),
        ("clasp_logs", {"watch": True}, ["logs", "--watch"]),
        ("clasp_run", {"functionName": "main"}, ["run", "main"]),
        (
            "clasp_run",
            {"functionName": "main", "nondev": True, "params": "[1, \"two\"]"},
            ["run", "main", "--nondev", "--params", "[1, \"two\"]"],
        ),
        ("clasp_apis", {"list": True}, ["apis", "list"]),
        (
            "clasp_apis",
            {"enable": "drive", "disable": "gmail", "open": True},
            ["apis", "enable", "drive", "disable", "gmail", "--open"],
        ),
        ("clasp_setting", {"key": "scriptId"}, ["setting", "scriptId"]),
        ("clasp_setting", {"key": "rootDir", "value": "src"}, ["setting", "rootDir", "src"]),
        ("clasp_setting", {"value": "orphan"}, ["setting"]),
    ],
)
def test_render_matches_command_table(operation, arguments, expected):
    assert render(operation, arguments) == expected


def test_false_and_empty_values_are_omitted():
    assert commands.push({"watch": False, "force": None}) == ["push"]
    assert commands.pull({"versionNumber": 0}) == ["pull"]
    assert commands.deploy({"description": ""}) == ["deploy"]


def test_login_adds_no_localhost_unless_global_is_truthy():
    assert commands.login({}) == ["login", "--no-localhost"]
    assert commands.login({"global": None}) == ["login", "--no-localhost"]
    assert commands.login({"global": True}) == ["login"]


def test_missing_required_value_passes_through_empty():
    assert commands.create({}) == ["create", "--title", ""]
    assert commands.run({}) == ["run", ""]


def test_values_with_shell_metacharacters_stay_single_arguments():
    argv = commands.create({"title": "x\"; rm -rf / #"})
    assert argv == ["create", "--title", "x\"; rm -rf / #"]


def test_render_is_deterministic():
    arguments = {"versionNumber": 7, "description": "d"}
    assert render("clasp_deploy", arguments) == render("clasp_deploy", arguments)


def test_render_unknown_operation_raises():
    with pytest.raises(UnknownOperationError, match="Unknown tool: clasp_nope"):
        render("clasp_nope", {})


def test_format_command_quotes_for_display():
    assert (
        commands.format_command(["clasp", "create", "--title", "My Project"])
        == "clasp create --title 'My Project'"
    )
