import pytest

from posixopt.exceptions import UsageError
from posixopt.option import Option, OptionRegistry
from posixopt.parser import OVERFLOW_KEY, SyntaxParser, Tokenizer


@pytest.fixture
def registry():
    registry = OptionRegistry()
    registry.register(Option.command("add", "Add a user"))
    registry.register(Option.command(["delete", "del"], "Delete a user"))
    registry.register(Option.flag(["verbose", "v"]))
    registry.register(Option.flag(["recursive", "r"]))
    registry.register(Option.flag(["force", "f"]))
    registry.register(Option.param(["output", "o"], "STRING"))
    registry.register(Option.param(["count", "c"], "INT"))
    registry.register(Option.term("username", "STRING"))
    registry.register(Option.term("email", "EMAIL", required=False))
    return registry


def parse(registry, args):
    return SyntaxParser(registry).parse(Tokenizer().tokenize(args))


def test_flags_and_params(registry):
    result = parse(registry, ["-v", "--output", "result.txt"])
    assert result.command is None
    assert result.raw_values == {"verbose": "true", "output": "result.txt"}
    assert result.mapped_options["verbose"] is True


@pytest.mark.parametrize(
    "args",
    [
        ["--output=result.txt"],
        ["--output", "result.txt"],
        ["-oresult.txt"],
        ["-o", "result.txt"],
        ["--OUTPUT=result.txt"],
    ],
)
def test_param_value_forms(registry, args):
    result = parse(registry, args)
    assert result.raw_values == {"output": "result.txt"}


def test_long_param_with_empty_attached_value(registry):
    result = parse(registry, ["--output="])
    assert result.raw_values == {"output": ""}


def test_flag_cluster(registry):
    result = parse(registry, ["-vrf"])
    assert result.mapped_options == {"verbose": True, "recursive": True, "force": True}


def test_cluster_ending_with_param_takes_next_argument(registry):
    result = parse(registry, ["-vo", "out.txt"])
    assert result.mapped_options == {"verbose": True, "output": "out.txt"}


def test_cluster_with_param_and_attached_value(registry):
    result = parse(registry, ["-vrofile.txt"])
    assert result.raw_values == {
        "verbose": "true",
        "recursive": "true",
        "output": "file.txt",
    }


def test_param_with_digit_tail_is_a_cluster(registry):
    with pytest.raises(UsageError, match="Option 'count' requires a value"):
        parse(registry, ["-c10"])


@pytest.mark.parametrize(
    "args, message",
    [
        (["--nope"], "Unknown option '--nope'"),
        (["-z"], "Unknown option '-z'"),
        (["-vz"], "Unknown option '-z'"),
    ],
)
def test_unknown_option(registry, args, message):
    with pytest.raises(UsageError, match=message):
        parse(registry, args)


@pytest.mark.parametrize(
    "args",
    [
        ["--output"],
        ["-o"],
        ["-o", "-v"],
        ["--output", "--"],
    ],
)
def test_missing_value(registry, args):
    with pytest.raises(UsageError, match="Option 'output' requires a value"):
        parse(registry, args)


def test_flag_with_attached_value_is_rejected(registry):
    with pytest.raises(UsageError, match="does not accept a value"):
        parse(registry, ["--verbose=yes"])


def test_command_from_operand(registry):
    result = parse(registry, ["add", "alice"])
    assert result.command == "add"
    assert result.raw_values == {"username": "alice"}


def test_command_alias_resolves_to_primary_name(registry):
    result = parse(registry, ["DEL", "alice"])
    assert result.command == "delete"


def test_command_as_option(registry):
    result = parse(registry, ["--add", "alice"])
    assert result.command == "add"
    assert result.raw_values == {"username": "alice"}


def test_multiple_commands(registry):
    with pytest.raises(UsageError, match="Multiple commands specified"):
        parse(registry, ["add", "--delete"])


def test_second_command_word_is_an_operand(registry):
    result = parse(registry, ["add", "delete"])
    assert result.command == "add"
    assert result.raw_values == {"username": "delete"}


def test_terms_bind_in_order_with_overflow(registry):
    result = parse(registry, ["alice", "alice@example.com", "extra1", "extra2"])
    assert result.raw_values == {"username": "alice", "email": "alice@example.com"}
    assert result.mapped_options[OVERFLOW_KEY] == ["extra1", "extra2"]
    assert result.overflow == ["extra1", "extra2"]
    assert OVERFLOW_KEY not in result.provided_names()


def test_term_given_by_name_is_skipped_for_operands(registry):
    result = parse(registry, ["--username", "bob", "bob@example.com"])
    assert result.raw_values == {"username": "bob", "email": "bob@example.com"}
    assert result.overflow == []


def test_terminator_turns_options_into_operands(registry):
    result = parse(registry, ["-v", "--", "-name", "--output=x"])
    assert result.raw_values == {
        "verbose": "true",
        "username": "-name",
        "email": "--output=x",
    }


def test_parser_is_reusable(registry):
    parser = SyntaxParser(registry)
    first = parser.parse(Tokenizer().tokenize(["add", "alice"]))
    second = parser.parse(Tokenizer().tokenize(["-v"]))
    assert first.command == "add"
    assert second.command is None
    assert second.raw_values == {"verbose": "true"}
