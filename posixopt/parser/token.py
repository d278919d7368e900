# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Lexical tokens produced by the `Tokenizer`.

A token records what kind of command-line element was seen and its text. Option
tokens may also carry a value that was attached to the option in the same
argument (`--output=file.txt` or `-ofile.txt`).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Kind of a lexical token."""

    SHORT_OPTION = "short_option"
    LONG_OPTION = "long_option"
    TERMINATOR = "terminator"
    OPERAND = "operand"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """
    One lexical token.

    Attributes:
        type (TokenType): Token classification.
        value (str): Option name without dashes, or the operand text.
        attached_value (str | None): Value given in the same argument, if any.
    """

    type: TokenType
    value: str
    attached_value: str | None = None

    @property
    def is_option(self) -> bool:
        return self.type in (TokenType.SHORT_OPTION, TokenType.LONG_OPTION)

    def display_name(self) -> str:
        """Render the option name as typed (`-v` or `--verbose`)."""
        if self.type == TokenType.SHORT_OPTION:
            return f"-{self.value}"
        if self.type == TokenType.LONG_OPTION:
            return f"--{self.value}"
        return self.value
