# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by posixopt.

Every error carries a human-readable message, a process exit code that the
caller may use when terminating, and a flag telling whether the problem was
caused by the person typing the command line.

Exception Hierarchy:
- OptParserError
    ├── UsageError        (exit 2, client error)
    ├── ValidationError   (exit 1)
    └── DefinitionError   (exit 1)

`UsageError` and `ValidationError` are raised while parsing an argument vector.
`DefinitionError` is raised while a program definition is being built, before
any parsing happens.
"""
from __future__ import annotations


class OptParserError(Exception):
    """Base exception for posixopt."""

    default_exit_code: int = 1
    client_error: bool = False

    def __init__(self, message: str = "", exit_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = self.default_exit_code if exit_code is None else exit_code

    @property
    def is_client_error(self) -> bool:
        """True when the error was caused by the command line itself."""
        return self.client_error


class UsageError(OptParserError):
    """Malformed invocation: unknown option, missing value, disallowed option."""

    default_exit_code = 2
    client_error = True


class ValidationError(OptParserError):
    """A provided value failed type or filter validation."""


class DefinitionError(OptParserError):
    """The program definition itself is invalid (conflicting names, bad usage)."""
