# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionKind`, the closed set of option variants understood by posixopt.

Every registered `Option` is tagged with exactly one kind, and the parsing
pipeline matches on it exhaustively: commands select a subcommand, flags record
presence, params take a value, terms bind operands by position.

Supports alias coercion for config-friendly values.

Example:
    OptionKind("flag")        → OptionKind.FLAG
    OptionKind("switch")      → OptionKind.FLAG (via alias)
    OptionKind("positional")  → OptionKind.TERM (via alias)
"""
from __future__ import annotations

from enum import Enum


class OptionKind(Enum):
    """
    Kind of a command-line option.

    Members:
        COMMAND: Named, mutually exclusive subcommand selector.
        FLAG: Named boolean switch without a value.
        PARAM: Named option that requires a value.
        TERM: Named positional argument bound to an operand by position.

    Aliases:
        - "cmd", "subcommand" → "command"
        - "switch" → "flag"
        - "option" → "param"
        - "positional", "operand" → "term"
    """

    COMMAND = "command"
    FLAG = "flag"
    PARAM = "param"
    TERM = "term"

    @property
    def accepts_value(self) -> bool:
        """True for kinds that consume a value argument."""
        return self in (OptionKind.PARAM, OptionKind.TERM)

    @classmethod
    def choices(cls) -> list[OptionKind]:
        """Return a list of all option kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "cmd": "command",
            "subcommand": "command",
            "switch": "flag",
            "option": "param",
            "positional": "term",
            "operand": "term",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the option kind."""
        return self.value
