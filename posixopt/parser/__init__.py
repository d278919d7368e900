"""
posixopt POSIX Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .parser_types import OVERFLOW_KEY, ParsingResult
from .syntax_parser import SyntaxParser
from .token import Token, TokenType
from .tokenizer import Tokenizer

__all__ = [
    "OVERFLOW_KEY",
    "ParsingResult",
    "SyntaxParser",
    "Token",
    "TokenType",
    "Tokenizer",
]
