# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass, the single immutable record used for every
command, flag, param and term registered with posixopt.

Each `Option` is tagged with an `OptionKind` and exposes a uniform contract
used by the parsing pipeline:

- `names`: primary name first, then aliases (without leading dashes)
- `required` / `default`: requiredness and fallback value
- `accepts_value`: whether the option consumes a value argument
- `validate_value()`: type validation followed by the optional filter

Options are built through the `Option.command()`, `Option.flag()`,
`Option.param()` and `Option.term()` constructors, or through the `OptParser`
builder methods which wrap them. Invalid combinations (a required flag, a term
with aliases, a param without a type) raise `DefinitionError` at construction.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Iterable

from posixopt.exceptions import DefinitionError, ValidationError
from posixopt.option.option_kind import OptionKind

if TYPE_CHECKING:
    from posixopt.type_registry import TypeRegistry

NAME_PATTERN = re.compile(r"[^\s=-][^\s=]*")


def normalize_names(names: str | Iterable[str]) -> tuple[str, ...]:
    """Accept a single name or an iterable of names and return a tuple."""
    if isinstance(names, str):
        return (names,)
    try:
        return tuple(names)
    except TypeError:
        raise DefinitionError(
            f"Option names must be a string or an iterable of strings, got {names!r}"
        ) from None


@dataclass(frozen=True)
class Option:
    """
    Represents one registered command-line option.

    Attributes:
        names (tuple[str, ...]): Primary name followed by aliases.
        kind (OptionKind): Variant tag (command, flag, param or term).
        description (str): Help text for the option.
        type_name (str | None): Type registry key (params and terms only).
        required (bool): True if the option must be provided.
        default (Any): Value used when the option is not provided.
        filter (Callable[[Any], Any] | None): Transform applied after type validation.
    """

    names: tuple[str, ...]
    kind: OptionKind
    description: str = ""
    type_name: str | None = None
    required: bool = False
    default: Any = None
    filter: Callable[[Any], Any] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", normalize_names(self.names))
        if not isinstance(self.kind, OptionKind):
            try:
                object.__setattr__(self, "kind", OptionKind(self.kind))
            except ValueError as error:
                raise DefinitionError(str(error)) from error
        self._validate_names()
        if self.kind.accepts_value:
            self._validate_value_option()
        else:
            self._validate_valueless_option()

    def _validate_names(self) -> None:
        if not self.names:
            raise DefinitionError("Option must have at least one name")
        for name in self.names:
            if not isinstance(name, str):
                raise DefinitionError(f"Option name {name!r} must be a string")
            if not NAME_PATTERN.fullmatch(name):
                raise DefinitionError(
                    f"Invalid option name '{name}': names must be non-empty, "
                    "must not start with '-' and must not contain '=' or whitespace"
                )
        if len(set(name.lower() for name in self.names)) != len(self.names):
            raise DefinitionError(f"Duplicate names in {list(self.names)}")
        if self.kind == OptionKind.TERM and len(self.names) != 1:
            raise DefinitionError(
                f"Term '{self.names[0]}' must have exactly one name, got {list(self.names)}"
            )

    def _validate_value_option(self) -> None:
        if not self.type_name or not isinstance(self.type_name, str):
            raise DefinitionError(f"{self.kind} '{self.names[0]}' requires a type name")
        if self.filter is not None and not callable(self.filter):
            raise DefinitionError(f"Filter for '{self.names[0]}' must be callable")

    def _validate_valueless_option(self) -> None:
        if self.required:
            raise DefinitionError(f"{self.kind} '{self.names[0]}' cannot be required")
        if self.type_name is not None or self.filter is not None:
            raise DefinitionError(
                f"{self.kind} '{self.names[0]}' does not accept a type or filter"
            )
        if self.kind == OptionKind.FLAG:
            if self.default not in (None, False):
                raise DefinitionError(
                    f"Default value cannot be set for flag '{self.names[0]}'"
                )
            object.__setattr__(self, "default", False)
        elif self.default is not None:
            raise DefinitionError(
                f"Default value cannot be set for command '{self.names[0]}'"
            )

    @classmethod
    def command(cls, names: str | Iterable[str], description: str = "") -> Option:
        return cls(names=names, kind=OptionKind.COMMAND, description=description)

    @classmethod
    def flag(cls, names: str | Iterable[str], description: str = "") -> Option:
        return cls(names=names, kind=OptionKind.FLAG, description=description)

    @classmethod
    def param(
        cls,
        names: str | Iterable[str],
        type_name: str,
        description: str = "",
        required: bool = False,
        default: Any = None,
        filter: Callable[[Any], Any] | None = None,
    ) -> Option:
        return cls(
            names=names,
            kind=OptionKind.PARAM,
            description=description,
            type_name=type_name,
            required=required,
            default=default,
            filter=filter,
        )

    @classmethod
    def term(
        cls,
        name: str,
        type_name: str,
        description: str = "",
        required: bool = True,
        filter: Callable[[Any], Any] | None = None,
    ) -> Option:
        return cls(
            names=(name,),
            kind=OptionKind.TERM,
            description=description,
            type_name=type_name,
            required=required,
            filter=filter,
        )

    @property
    def primary_name(self) -> str:
        return self.names[0]

    @property
    def aliases(self) -> tuple[str, ...]:
        return self.names[1:]

    @property
    def accepts_value(self) -> bool:
        return self.kind.accepts_value

    def validate_value(self, value: str, type_registry: TypeRegistry) -> Any:
        """
        Validate a raw string and return the typed (and filtered) value.

        Commands return the raw string and flags always return True. Params and
        terms are validated by their registered type, then passed through the
        filter when one is configured.

        Raises:
            ValidationError: If the type is unknown, the value does not match
                the type, or the filter rejects it.
        """
        if self.kind == OptionKind.COMMAND:
            return value
        if self.kind == OptionKind.FLAG:
            return True

        assert self.type_name is not None, "type_name should not be None"
        typed_value = type_registry.get(self.type_name).validate(value)
        if self.filter is None:
            return typed_value
        try:
            return self.filter(typed_value)
        except Exception as error:
            raise ValidationError(
                f"Filter rejected value for '{self.primary_name}': {error}"
            ) from error

    def get_flag_text(self) -> str:
        """Get the help text for the option's names (e.g. `-v, --verbose`)."""
        if self.kind in (OptionKind.COMMAND, OptionKind.TERM):
            return ", ".join(self.names)
        return ", ".join(
            f"-{name}" if len(name) == 1 else f"--{name}" for name in self.names
        )

    def get_choice_text(self) -> str:
        """Get the value placeholder for the option (e.g. `<INT>`)."""
        if self.kind == OptionKind.PARAM:
            return f"<{self.type_name}>"
        if self.kind == OptionKind.TERM:
            text = f"<{self.primary_name}>"
            return text if self.required else f"[{text}]"
        return ""

    def __str__(self) -> str:
        return f"{self.kind.name.title()}({', '.join(self.names)})"
