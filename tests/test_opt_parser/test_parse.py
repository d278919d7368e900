import sys

import pytest

from posixopt import Input, OptParser
from posixopt.exceptions import DefinitionError, UsageError, ValidationError
from posixopt.value_types import ValueType


@pytest.fixture
def parser():
    return (
        OptParser("user-manager", "Manage user accounts", "2.1.0")
        .add_command("add", "Add a new user")
        .add_command(["delete", "del"], "Delete a user")
        .add_term("username", "STRING", "Username of the user")
        .add_param(["password", "p"], "STRING", "Password", required=True)
        .add_param(["email", "e"], "EMAIL", "Email address")
        .add_flag(["verbose", "v"], "Verbose output")
        .add_usage("add", ["username", "password", "email", "verbose"])
        .add_usage("del", ["username", "V"])
    )


def test_end_to_end(parser):
    args = parser.parse(["add", "alice", "-p", "secret", "-v"])
    assert isinstance(args, Input)
    assert args.command == "add"
    assert args.get("username") == "alice"
    assert args.get("password") == "secret"
    assert args.get("verbose") is True
    assert args.has("email")
    assert args.get("email") is None
    assert args.has("add")
    assert args.get("add") is None
    assert args.get("delete") is None
    assert args.non_options == ()


def test_missing_required(parser):
    with pytest.raises(UsageError, match="password") as exc_info:
        parser.parse(["add", "alice"])
    assert exc_info.value.exit_code == 2
    assert exc_info.value.is_client_error


def test_required_out_of_scope(parser):
    args = parser.parse(["delete", "bob"])
    assert args.command == "delete"
    assert args.get("username") == "bob"
    assert args.get("password") is None
    assert args.get("verbose") is False


def test_usage_aliases_resolve_to_primary_names(parser):
    assert parser.usage_definition.get_allowed("delete") == ["username", "verbose"]
    with pytest.raises(UsageError, match="not allowed with command 'delete'"):
        parser.parse(["del", "bob", "-p", "x"])


def test_invalid_value(parser):
    with pytest.raises(ValidationError, match="Invalid email") as exc_info:
        parser.parse(["add", "alice", "-p", "x", "--email=nope"])
    assert exc_info.value.exit_code == 1
    assert not exc_info.value.is_client_error


def test_non_options(parser):
    args = parser.parse(["add", "alice", "-p", "x", "--", "extra", "-v"])
    assert args.non_options == ("extra", "-v")
    assert args.get("verbose") is False


def test_parse_defaults_to_sys_argv(parser, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["user-manager", "add", "carol", "-psecret"])
    args = parser.parse()
    assert args.get("username") == "carol"
    assert args.get("password") == "secret"


def test_parse_rejects_plain_string(parser):
    with pytest.raises(TypeError):
        parser.parse("add alice")


def test_parse_is_repeatable(parser):
    first = parser.parse(["add", "alice", "-p", "a"])
    second = parser.parse(["delete", "bob"])
    assert first.command == "add"
    assert second.command == "delete"
    assert second.get("username") == "bob"


def test_custom_type():
    def parse_port(value):
        port = int(value)
        if not 0 < port < 65536:
            raise ValueError("port out of range")
        return port

    parser = (
        OptParser("server")
        .register_type(ValueType("PORT", parse_port))
        .add_param(["port", "P"], "port", "Port to listen on", default=8080)
    )
    assert parser.parse([]).get("port") == 8080
    assert parser.parse(["-P", "9000"]).get("port") == 9000
    with pytest.raises(ValidationError, match="port out of range"):
        parser.parse(["--port=70000"])


def test_filter():
    parser = OptParser("tool").add_param(
        "name", "STRING", "Name", filter=lambda value: value.strip().title()
    )
    assert parser.parse(["--name", " ada lovelace "]).get("name") == "Ada Lovelace"


def test_definition_errors():
    parser = OptParser("tool").add_flag(["verbose", "v"], "Verbose")
    with pytest.raises(DefinitionError, match="already used"):
        parser.add_param(["value", "v"], "STRING", "Value")
    with pytest.raises(DefinitionError, match="Unknown type 'PORT'"):
        parser.add_param("port", "PORT", "Port")
    with pytest.raises(DefinitionError, match="unknown command 'run'"):
        parser.add_usage("run", ["verbose"])
    with pytest.raises(DefinitionError, match="unknown command 'verbose'"):
        parser.add_usage("verbose", [])
    parser.add_command("run", "Run")
    with pytest.raises(DefinitionError, match="unknown option 'missing'"):
        parser.add_usage("run", ["verbose", "missing"])


def test_to_definition_list(parser):
    definitions = parser.to_definition_list()
    assert definitions[0] == {
        "kind": "command",
        "names": ["add"],
        "description": "Add a new user",
        "usage": ["username", "password", "email", "verbose"],
    }
    password = next(d for d in definitions if d["names"][0] == "password")
    assert password["type"] == "STRING"
    assert password["required"] is True


def test_accessors(parser):
    assert [command.primary_name for command in parser.commands] == ["add", "delete"]
    assert parser.get_option("P").primary_name == "password"
    assert parser.get_option("nothing") is None
    assert "user-manager" in str(parser)
