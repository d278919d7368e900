# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Registry of value types keyed by name, with the built-in types pre-registered.

Type names are case-insensitive: `int`, `Int` and `INT` all resolve to the same
validator. Registering a type under an existing name replaces it, which allows
overriding a built-in type.

Example:
    registry = TypeRegistry()
    registry.get("INT").validate("42")        # 42
    registry.register(ValueType("PORT", parse_port))
"""
from __future__ import annotations

from typing import Any, Callable

from posixopt.exceptions import ValidationError
from posixopt.logger import logger
from posixopt.utils import CaseInsensitiveDict
from posixopt.value_types import BUILTIN_TYPES, ValueType


class TypeRegistry:
    """Maps type names to `ValueType` validators."""

    def __init__(self, include_builtins: bool = True) -> None:
        self._types: CaseInsensitiveDict = CaseInsensitiveDict()
        self._names: list[str] = []
        if include_builtins:
            for value_type in BUILTIN_TYPES:
                self.register(value_type)

    def register(self, value_type: ValueType) -> None:
        """Register `value_type`, replacing any type with the same name."""
        if not isinstance(value_type, ValueType):
            raise TypeError(
                f"value_type must be a ValueType, got {type(value_type).__name__}"
            )
        if value_type.name not in self._types:
            self._names.append(value_type.name)
        else:
            logger.debug("Replacing value type '%s'", value_type.name)
        self._types[value_type.name] = value_type

    def register_validator(
        self, name: str, validator: Callable[[str], Any], description: str = ""
    ) -> ValueType:
        """Shortcut for registering a plain validator function under `name`."""
        value_type = ValueType(name, validator, description)
        self.register(value_type)
        return value_type

    def find(self, name: str) -> ValueType | None:
        """Return the type registered under `name`, or None."""
        return self._types.get(name)

    def get(self, name: str) -> ValueType:
        """
        Return the type registered under `name`.

        Raises:
            ValidationError: If no type is registered under `name`.
        """
        value_type = self.find(name)
        if value_type is None:
            raise ValidationError(f"Unknown type: {name}")
        return value_type

    def has(self, name: str) -> bool:
        return name in self._types

    def available_types(self) -> list[str]:
        """Return registered type names in registration order."""
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._names)
