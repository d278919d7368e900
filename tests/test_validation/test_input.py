import pytest

from posixopt.input import Input


def test_input_access():
    args = Input(command="add", options={"name": "alice", "email": None})
    assert args.command == "add"
    assert args.get("name") == "alice"
    assert args["name"] == "alice"
    assert args.get("missing", "fallback") == "fallback"
    assert args.non_options == ()


def test_input_distinguishes_absent_from_none():
    args = Input(options={"email": None})
    assert args.has("email")
    assert "email" in args
    assert args.get("email") is None
    assert not args.has("phone")
    assert "phone" not in args


def test_input_is_immutable():
    source = {"name": "alice"}
    args = Input(options=source, non_options=["extra"])
    source["name"] = "bob"
    assert args["name"] == "alice"
    with pytest.raises(TypeError):
        args.options["name"] = "mallory"
    with pytest.raises(AttributeError):
        args.command = "delete"
    assert args.non_options == ("extra",)


def test_input_iteration_and_dict():
    args = Input(options={"a": 1, "b": 2})
    assert list(args) == ["a", "b"]
    assert len(args) == 2
    copy = args.to_dict()
    copy["c"] = 3
    assert "c" not in args
