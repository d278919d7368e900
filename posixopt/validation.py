# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value validation: the last stage of the parsing pipeline.

`ValueValidator` turns a `ParsingResult` into the validated options mapping used
to build `Input`:

1. Every raw value goes through its option's type validator and filter.
2. Missing options receive their default. A missing required option is an
   error only where the requirement applies:
   - with a matched command, only if the command's usage allows the option
   - with no matched command but commands defined, never (the caller decides
     what a missing command means)
   - with no commands defined at all, always
3. With a matched command, every option the user supplied must be allowed by
   that command's usage definition.
"""
from __future__ import annotations

from copy import deepcopy
from typing import Any

from posixopt.exceptions import UsageError
from posixopt.logger import logger
from posixopt.option.option import Option
from posixopt.option.option_kind import OptionKind
from posixopt.option.option_registry import OptionRegistry
from posixopt.parser.parser_types import ParsingResult
from posixopt.type_registry import TypeRegistry
from posixopt.usage import UsageDefinition


class ValueValidator:
    """Applies types, filters, defaults, requiredness and usage restrictions."""

    def __init__(
        self,
        option_registry: OptionRegistry,
        type_registry: TypeRegistry,
        usage_definition: UsageDefinition,
    ) -> None:
        self.option_registry = option_registry
        self.type_registry = type_registry
        self.usage_definition = usage_definition

    def validate(self, result: ParsingResult) -> dict[str, Any]:
        """
        Validate `result` and return option values keyed by primary name.

        Raises:
            ValidationError: If a value fails its type or filter.
            UsageError: If a required option is missing or an option is not
                allowed with the matched command.
        """
        validated = self._validate_raw_values(result)
        self._apply_defaults(result.command, validated)
        if result.command is not None:
            self.usage_definition.validate(result.command, result.provided_names())
        logger.debug("Validated %d option value(s)", len(validated))
        return validated

    def _validate_raw_values(self, result: ParsingResult) -> dict[str, Any]:
        validated: dict[str, Any] = {}
        for name, raw_value in result.raw_values.items():
            option = self.option_registry.get(name)
            validated[option.primary_name] = option.validate_value(
                raw_value, self.type_registry
            )
        return validated

    def _apply_defaults(self, command: str | None, validated: dict[str, Any]) -> None:
        for option in self.option_registry:
            if option.primary_name in validated:
                continue
            if option.required and self.is_required_in_context(option, command):
                raise UsageError(f"Option '{option.primary_name}' is required")
            validated[option.primary_name] = deepcopy(option.default)

    def is_required_in_context(self, option: Option, command: str | None) -> bool:
        """True if `option`'s requirement applies for the matched `command`."""
        if not option.required or option.kind in (OptionKind.COMMAND, OptionKind.FLAG):
            return False
        if command is not None:
            return self.usage_definition.allows(command, option.primary_name)
        return not self.option_registry.commands
