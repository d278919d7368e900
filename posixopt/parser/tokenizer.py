# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Converts a raw argument vector into a flat list of `Token` objects.

Rules, applied left to right:
- after `--`, every remaining argument is an operand, verbatim
- `--` itself is a terminator
- `--name` and `--name=value` are long options (split on the first `=`)
- `-x` is a short option; `-xvalue` is a short option with an attached value
- `-x123` (all-digit tail) is a cluster of single-character short options,
  one per character (`x`, `1`, `2`, `3`)
- anything else, including a bare `-`, is an operand

The tokenizer knows nothing about registered options. Whether `-abc` means
"flags a, b and c" or "option a with value bc" is settled later by the
`SyntaxParser`, which sees the option registry.
"""
from __future__ import annotations

from typing import Sequence

from posixopt.logger import logger
from posixopt.parser.token import Token, TokenType

TERMINATOR = "--"


class Tokenizer:
    """
    Lexical analyser for argument vectors.

    The `is_terminated` state belongs to the most recent `tokenize()` call and is
    reset at the start of every call. Use one instance per call path.
    """

    def __init__(self) -> None:
        self._terminated: bool = False

    @property
    def is_terminated(self) -> bool:
        """True if the last tokenized vector contained a `--` terminator."""
        return self._terminated

    def tokenize(self, args: Sequence[str]) -> list[Token]:
        """
        Tokenize `args` (program name already removed).

        Returns:
            list[Token]: Tokens in argument order.
        """
        self._terminated = False
        tokens: list[Token] = []
        for arg in args:
            if self._terminated:
                tokens.append(Token(TokenType.OPERAND, arg))
            elif arg == TERMINATOR:
                self._terminated = True
                tokens.append(Token(TokenType.TERMINATOR, arg))
            elif arg.startswith("--"):
                tokens.append(self._tokenize_long_option(arg))
            elif arg.startswith("-") and len(arg) > 1:
                tokens.extend(self._tokenize_short_option(arg))
            else:
                tokens.append(Token(TokenType.OPERAND, arg))
        logger.debug("Tokenized %d argument(s) into %d token(s)", len(args), len(tokens))
        return tokens

    def _tokenize_long_option(self, arg: str) -> Token:
        name, separator, value = arg[2:].partition("=")
        if not separator:
            return Token(TokenType.LONG_OPTION, name)
        return Token(TokenType.LONG_OPTION, name, value)

    def _tokenize_short_option(self, arg: str) -> list[Token]:
        chars = arg[1:]
        if len(chars) == 1:
            return [Token(TokenType.SHORT_OPTION, chars)]

        first, rest = chars[0], chars[1:]
        if not is_decimal(rest):
            return [Token(TokenType.SHORT_OPTION, first, rest)]
        # -123 and -o123 are clusters, not an option with a numeric value
        return [Token(TokenType.SHORT_OPTION, char) for char in chars]


def is_decimal(text: str) -> bool:
    """True if `text` is non-empty and made of ASCII digits only."""
    return bool(text) and all("0" <= char <= "9" for char in text)
