from posixopt.parser import Token, TokenType


def test_token_is_option():
    assert Token(TokenType.SHORT_OPTION, "v").is_option
    assert Token(TokenType.LONG_OPTION, "verbose").is_option
    assert not Token(TokenType.OPERAND, "file").is_option
    assert not Token(TokenType.TERMINATOR, "--").is_option


def test_token_display_name():
    assert Token(TokenType.SHORT_OPTION, "o", "file").display_name() == "-o"
    assert Token(TokenType.LONG_OPTION, "output").display_name() == "--output"
    assert Token(TokenType.OPERAND, "file").display_name() == "file"


def test_token_defaults_and_str():
    token = Token(TokenType.OPERAND, "x")
    assert token.attached_value is None
    assert str(TokenType.LONG_OPTION) == "long_option"
