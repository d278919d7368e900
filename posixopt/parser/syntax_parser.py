# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `SyntaxParser`, which applies POSIX.1-2017 option syntax
(with GNU long options) to a token stream and produces a `ParsingResult`.

Responsibilities:
- Resolve option names against the `OptionRegistry` (case-insensitive, aliases)
- Consume option values, either attached (`--out=x`, `-ox`) or from the next token
- Expand short option clusters (`-vrf`) using registry knowledge
- Recognise the command, either as a bare word or as an explicit option
- Honour the `--` terminator
- Bind operands to terms in registration order, overflow going to `"_"`

Value types, defaults and required options are not checked here; that is the
job of value validation, which runs after this pass with the command known.

Example:
    registry = OptionRegistry()
    registry.register(Option.flag(["verbose", "v"]))
    registry.register(Option.param(["output", "o"], "STRING"))

    tokens = Tokenizer().tokenize(["-v", "--output", "result.txt"])
    result = SyntaxParser(registry).parse(tokens)
    # result.raw_values == {"verbose": "true", "output": "result.txt"}
"""
from __future__ import annotations

from typing import Sequence

from posixopt.exceptions import UsageError
from posixopt.logger import logger
from posixopt.option.option import Option
from posixopt.option.option_kind import OptionKind
from posixopt.option.option_registry import OptionRegistry
from posixopt.parser.parser_types import OVERFLOW_KEY, ParsingResult
from posixopt.parser.token import Token, TokenType


class SyntaxParser:
    """
    Single-pass syntax parser over tokens produced by `Tokenizer`.

    The parser holds no state between calls other than the (read-only) option
    registry, so one instance may parse any number of token lists.
    """

    def __init__(self, option_registry: OptionRegistry) -> None:
        self.option_registry = option_registry

    def parse(self, tokens: Sequence[Token]) -> ParsingResult:
        """
        Parse `tokens` into a `ParsingResult`.

        Raises:
            UsageError: On unknown options, missing option values or more than
                one command.
        """
        result = ParsingResult()
        pending: Option | None = None
        operand_only = False

        for token in tokens:
            if pending is not None:
                if token.type != TokenType.OPERAND:
                    raise UsageError(
                        f"Option '{pending.primary_name}' requires a value"
                    )
                result.record(pending.primary_name, token.value, token.value)
                pending = None
                continue

            if token.type == TokenType.TERMINATOR:
                operand_only = True
                continue

            if operand_only or token.type == TokenType.OPERAND:
                self._handle_operand(token.value, result)
            elif token.type == TokenType.LONG_OPTION:
                pending = self._handle_long_option(token, result)
            elif token.type == TokenType.SHORT_OPTION:
                pending = self._handle_short_option(token, result)

        if pending is not None:
            raise UsageError(f"Option '{pending.primary_name}' requires a value")

        self._assign_terms(result)
        logger.debug(
            "Syntax parsed: command=%s, options=%s, operands=%d",
            result.command,
            result.provided_names(),
            len(result.operands),
        )
        return result

    def _handle_operand(self, text: str, result: ParsingResult) -> None:
        if result.command is None:
            command = self.option_registry.find_command(text)
            if command is not None:
                result.command = command.primary_name
                return
        result.operands.append(text)

    def _handle_long_option(self, token: Token, result: ParsingResult) -> Option | None:
        option = self.option_registry.find(token.value)
        if option is None:
            raise UsageError(f"Unknown option '--{token.value}'")
        if not option.accepts_value and token.attached_value is not None:
            raise UsageError(f"Option '--{token.value}' does not accept a value")
        return self._apply_option(option, token.attached_value, result)

    def _handle_short_option(
        self, token: Token, result: ParsingResult
    ) -> Option | None:
        name = token.value
        rest = token.attached_value
        while True:
            option = self.option_registry.find(name)
            if option is None:
                raise UsageError(f"Unknown option '-{name}'")
            if option.accepts_value or not rest:
                return self._apply_option(option, rest or None, result)
            # -vrf: a valueless option followed by more short options
            self._apply_option(option, None, result)
            name, rest = rest[0], rest[1:]

    def _apply_option(
        self, option: Option, attached_value: str | None, result: ParsingResult
    ) -> Option | None:
        """Record `option`; return it when its value is in the next token."""
        if option.kind == OptionKind.COMMAND:
            self._select_command(option, result)
            return None
        if option.kind == OptionKind.FLAG:
            result.record(option.primary_name, True, "true")
            return None
        if attached_value is None:
            return option
        result.record(option.primary_name, attached_value, attached_value)
        return None

    def _select_command(self, command: Option, result: ParsingResult) -> None:
        if result.command is not None:
            raise UsageError("Multiple commands specified")
        result.command = command.primary_name

    def _assign_terms(self, result: ParsingResult) -> None:
        unfilled = (
            term
            for term in self.option_registry.terms
            if term.primary_name not in result.raw_values
        )
        for operand in result.operands:
            term = next(unfilled, None)
            if term is None:
                result.mapped_options.setdefault(OVERFLOW_KEY, []).append(operand)
            else:
                result.record(term.primary_name, operand, operand)
