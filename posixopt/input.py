# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Input`, the immutable result returned by `OptParser.parse()`.

`Input` holds the matched command, every option's validated value (defaults
filled in) and the operands that did not bind to a term. `has()` tells "option
absent" apart from "option present with a None value".

Example:
    args = parser.parse(["add", "alice", "-p", "secret", "-v"])
    args.command          # "add"
    args.get("username")  # "alice"
    "verbose" in args     # True
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping


@dataclass(frozen=True)
class Input:
    """
    Parsed and validated command-line input.

    Attributes:
        command (str | None): Primary name of the matched command, if any.
        options (Mapping[str, Any]): Read-only mapping of option name to value.
            Every registered command is listed with value None, the matched
            one included; use `command` to see which one matched.
        non_options (tuple[str, ...]): Operands left over after term binding.
    """

    command: str | None = None
    options: Mapping[str, Any] = field(default_factory=dict)
    non_options: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
        object.__setattr__(self, "non_options", tuple(self.non_options))

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value of option `name`, or `default` if it is absent."""
        return self.options.get(name, default)

    def has(self, name: str) -> bool:
        """True if `name` is present, even when its value is None."""
        return name in self.options

    def to_dict(self) -> dict[str, Any]:
        return dict(self.options)

    def __contains__(self, name: object) -> bool:
        return name in self.options

    def __getitem__(self, name: str) -> Any:
        return self.options[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)
