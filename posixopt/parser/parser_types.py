# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Intermediate state produced by the `SyntaxParser`.

`ParsingResult` is built fresh for every parse and handed to value validation.
Nothing in it has been type checked yet: `raw_values` holds the exact strings
that still need to go through the type registry.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

OVERFLOW_KEY = "_"


@dataclass
class ParsingResult:
    """
    Syntactic result of one parse.

    Attributes:
        command (str | None): Primary name of the matched command.
        mapped_options (dict[str, Any]): Primary name to loosely typed value
            (True for flags, raw strings otherwise). Operands beyond the declared
            terms are collected as a list under `"_"`.
        raw_values (dict[str, str]): Primary name to unvalidated string.
        operands (list[str]): Positional strings before term assignment.
    """

    command: str | None = None
    mapped_options: dict[str, Any] = field(default_factory=dict)
    raw_values: dict[str, str] = field(default_factory=dict)
    operands: list[str] = field(default_factory=list)

    def record(self, name: str, mapped: Any, raw: str) -> None:
        """Record a user-provided value for the option `name`."""
        self.mapped_options[name] = mapped
        self.raw_values[name] = raw

    @property
    def overflow(self) -> list[str]:
        """Operands that did not bind to any term."""
        return list(self.mapped_options.get(OVERFLOW_KEY, []))

    def provided_names(self) -> list[str]:
        """Names of options the user actually supplied (excluding `"_"`)."""
        return [name for name in self.mapped_options if name != OVERFLOW_KEY]
