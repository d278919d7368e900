# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `OptionRegistry`, the central index of registered options.

Every option is indexed under all of its names. Lookups are case-insensitive,
so `--Verbose`, `--verbose` and `-V` resolve to the same option when `verbose`
and `v` were registered. Commands and terms are additionally kept in
registration order; term order defines which operand binds to which term.

Lookups come in two flavours:
- `find(name)` returns the option or None and never raises.
- `get(name)` raises `UsageError` for unknown names.

Example:
    registry = OptionRegistry()
    registry.register(Option.flag(["verbose", "v"], "Enable verbose output"))
    registry.get("V").primary_name   # "verbose"
"""
from __future__ import annotations

from typing import Iterator

from posixopt.exceptions import DefinitionError, UsageError
from posixopt.logger import logger
from posixopt.option.option import Option
from posixopt.option.option_kind import OptionKind
from posixopt.utils import CaseInsensitiveDict


class OptionRegistry:
    """Name and alias index over all registered options."""

    def __init__(self) -> None:
        self._options: CaseInsensitiveDict = CaseInsensitiveDict()
        self._ordered: list[Option] = []
        self._commands: list[Option] = []
        self._terms: list[Option] = []

    def register(self, option: Option) -> Option:
        """
        Register `option` under all of its names.

        Raises:
            DefinitionError: If any of the option's names is already taken.
        """
        if not isinstance(option, Option):
            raise DefinitionError(
                f"Expected an Option instance, got {type(option).__name__}"
            )
        for name in option.names:
            existing = self._options.get(name)
            if existing is not None:
                raise DefinitionError(
                    f"Option name conflict: '{name}' is already used by "
                    f"'{existing.primary_name}'"
                )

        for name in option.names:
            self._options[name] = option
        self._ordered.append(option)
        if option.kind == OptionKind.COMMAND:
            self._commands.append(option)
        elif option.kind == OptionKind.TERM:
            self._terms.append(option)
        logger.debug("Registered %s", option)
        return option

    def find(self, name: str) -> Option | None:
        """Return the option registered under `name` (or an alias), or None."""
        return self._options.get(name)

    def get(self, name: str) -> Option:
        """
        Return the option registered under `name` (or an alias).

        Raises:
            UsageError: If no option exists with the given name.
        """
        option = self.find(name)
        if option is None:
            raise UsageError(f"Unknown option: {name}")
        return option

    def find_command(self, name: str) -> Option | None:
        """Return the command registered under `name`, or None."""
        option = self.find(name)
        if option is not None and option.kind == OptionKind.COMMAND:
            return option
        return None

    def has(self, name: str) -> bool:
        return name in self._options

    def all(self) -> list[Option]:
        """Return every unique option in registration order."""
        return list(self._ordered)

    @property
    def commands(self) -> list[Option]:
        """Commands in registration order."""
        return list(self._commands)

    @property
    def terms(self) -> list[Option]:
        """Terms in registration order; this order drives positional binding."""
        return list(self._terms)

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __iter__(self) -> Iterator[Option]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __str__(self) -> str:
        kinds = [option.kind for option in self._ordered]
        return (
            f"OptionRegistry(options={len(self._ordered)}, names={len(self._options)}, "
            f"commands={kinds.count(OptionKind.COMMAND)}, "
            f"flags={kinds.count(OptionKind.FLAG)}, "
            f"params={kinds.count(OptionKind.PARAM)}, "
            f"terms={kinds.count(OptionKind.TERM)})"
        )

    def __repr__(self) -> str:
        return str(self)
