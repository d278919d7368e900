# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Per-command allow-lists restricting which options may be combined with a command.

A command without an entry has no restriction. Once a command has an entry,
only the listed options may be supplied together with it, and required options
that are not listed are not required while that command runs.
"""
from __future__ import annotations

from typing import Iterable

from posixopt.exceptions import UsageError
from posixopt.logger import logger
from posixopt.parser.parser_types import OVERFLOW_KEY


class UsageDefinition:
    """Maps command names to the option names allowed with them."""

    def __init__(self) -> None:
        self._usages: dict[str, list[str]] = {}

    def add_usage(self, command: str, option_names: Iterable[str]) -> None:
        """Append `option_names` to the allow-list of `command`."""
        allowed = self._usages.setdefault(command, [])
        for name in option_names:
            if name not in allowed:
                allowed.append(name)
        logger.debug("Usage for '%s': %s", command, allowed)

    def has_usage(self, command: str) -> bool:
        return command in self._usages

    def get_allowed(self, command: str) -> list[str] | None:
        """Return the allow-list for `command`, or None when unrestricted."""
        allowed = self._usages.get(command)
        return None if allowed is None else list(allowed)

    def allows(self, command: str, option_name: str) -> bool:
        """True if `option_name` may be used with `command`."""
        allowed = self._usages.get(command)
        return allowed is None or option_name in allowed

    def validate(self, command: str, provided_names: Iterable[str]) -> None:
        """
        Check that every provided option is allowed with `command`.

        The overflow key `"_"` and the command's own name are always accepted.

        Raises:
            UsageError: If an option is not in the command's allow-list.
        """
        if command not in self._usages:
            return
        for name in provided_names:
            if name in (OVERFLOW_KEY, command):
                continue
            if not self.allows(command, name):
                raise UsageError(
                    f"Option '{name}' is not allowed with command '{command}'"
                )

    def commands(self) -> list[str]:
        return list(self._usages)

    def __contains__(self, command: object) -> bool:
        return command in self._usages

    def __len__(self) -> int:
        return len(self._usages)
