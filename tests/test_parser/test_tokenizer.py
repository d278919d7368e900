import pytest

from posixopt.parser import Token, TokenType, Tokenizer


def short(value, attached=None):
    return Token(TokenType.SHORT_OPTION, value, attached)


def long(value, attached=None):
    return Token(TokenType.LONG_OPTION, value, attached)


def operand(value):
    return Token(TokenType.OPERAND, value)


TERMINATOR = Token(TokenType.TERMINATOR, "--")


@pytest.mark.parametrize(
    "args, expected",
    [
        ([], []),
        (["-v"], [short("v")]),
        (["-ofile.txt"], [short("o", "file.txt")]),
        (["-vrf"], [short("v", "rf")]),
        (["-o123"], [short("o"), short("1"), short("2"), short("3")]),
        (["-123"], [short("1"), short("2"), short("3")]),
        (["-1"], [short("1")]),
        (["--verbose"], [long("verbose")]),
        (["--output=out.txt"], [long("output", "out.txt")]),
        (["--output="], [long("output", "")]),
        (["--expr=a=b"], [long("expr", "a=b")]),
        (["-"], [operand("-")]),
        (["file.txt"], [operand("file.txt")]),
        (["--"], [TERMINATOR]),
        (
            ["-v", "--", "-x", "--", "--long"],
            [short("v"), TERMINATOR, operand("-x"), operand("--"), operand("--long")],
        ),
    ],
)
def test_tokenize(args, expected):
    assert Tokenizer().tokenize(args) == expected


def test_tokenize_does_not_mutate_input():
    args = ["-v", "--out=x", "file"]
    Tokenizer().tokenize(args)
    assert args == ["-v", "--out=x", "file"]


def test_is_terminated_tracks_last_call():
    tokenizer = Tokenizer()
    assert tokenizer.is_terminated is False

    tokenizer.tokenize(["a", "--", "b"])
    assert tokenizer.is_terminated is True

    tokenizer.tokenize(["a", "b"])
    assert tokenizer.is_terminated is False


def test_tokenize_is_repeatable():
    tokenizer = Tokenizer()
    first = tokenizer.tokenize(["-v", "--", "-x"])
    second = tokenizer.tokenize(["-v", "--", "-x"])
    assert first == second
