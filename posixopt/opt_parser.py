# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Main entry point for defining and parsing a command-line interface.

`OptParser` wires the whole pipeline together:

    argv → Tokenizer → SyntaxParser → ValueValidator → Input

and offers a chainable builder for registering commands, flags, params, terms
and per-command usage restrictions.

Key Features:
- POSIX short options, GNU long options, `--` terminator
- Attached values (`--out=x`, `-ox`) and flag clusters (`-vrf`)
- Typed values via a `TypeRegistry` of named validators, plus optional filters
- Subcommands, with per-command allow-lists and command-aware required options
- Rich-powered help and version output
- Process entry point (`run`) mapping errors to exit codes

Example:
    parser = (
        OptParser("user-manager", "Manage user accounts")
        .add_command("add", "Add a new user")
        .add_term("username", "STRING", "Username of the user")
        .add_param(["password", "p"], "STRING", "Password", required=True)
        .add_flag(["verbose", "v"], "Verbose output")
        .add_usage("add", ["username", "password", "verbose"])
    )
    args = parser.parse(["add", "alice", "-p", "secret", "-v"])
    args.command            # "add"
    args.get("password")    # "secret"
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Iterable, Sequence

from rich.console import Console

from posixopt.console import console as default_console
from posixopt.console import err_console
from posixopt.exceptions import DefinitionError, OptParserError
from posixopt.help import HELP_FLAGS, VERSION_FLAGS, HelpRenderer, HelpSections
from posixopt.input import Input
from posixopt.logger import logger
from posixopt.option.option import Option
from posixopt.option.option_kind import OptionKind
from posixopt.option.option_registry import OptionRegistry
from posixopt.parser.parser_types import OVERFLOW_KEY
from posixopt.parser.syntax_parser import SyntaxParser
from posixopt.parser.tokenizer import TERMINATOR, Tokenizer
from posixopt.signals import FlowSignal, HelpSignal, VersionSignal
from posixopt.type_registry import TypeRegistry
from posixopt.usage import UsageDefinition
from posixopt.utils import default_argv
from posixopt.validation import ValueValidator
from posixopt.value_types import ValueType

INTERRUPTED_EXIT_CODE = 130


class OptParser:
    """
    POSIX-compliant command-line parser.

    Args:
        program_name (str): Program name shown in usage and version output.
        description (str): Description shown in help output.
        version (str): Version shown by `--version`.
        console (Console | None): Rich console used for help/version output.
        type_registry (TypeRegistry | None): Registry of value types; the
            built-in types are used when omitted.
    """

    def __init__(
        self,
        program_name: str,
        description: str = "",
        version: str = "1.0.0",
        console: Console | None = None,
        type_registry: TypeRegistry | None = None,
    ) -> None:
        self.program_name: str = program_name
        self.description: str = description
        self.version: str = version
        self.console: Console = console or default_console
        self.option_registry: OptionRegistry = OptionRegistry()
        self.type_registry: TypeRegistry = type_registry or TypeRegistry()
        self.usage_definition: UsageDefinition = UsageDefinition()
        self.help_sections: HelpSections = HelpSections()

    def add_option(self, option: Option) -> OptParser:
        """Register a prebuilt `Option`."""
        if option.kind.accepts_value and option.type_name not in self.type_registry:
            raise DefinitionError(
                f"Unknown type '{option.type_name}' for '{option.primary_name}'. "
                f"Available types: {', '.join(self.type_registry.available_types())}"
            )
        self.option_registry.register(option)
        return self

    def add_command(self, names: str | Iterable[str], description: str) -> OptParser:
        return self.add_option(Option.command(names, description))

    def add_param(
        self,
        names: str | Iterable[str],
        type_name: str,
        description: str,
        filter: Callable[[Any], Any] | None = None,
        required: bool = False,
        default: Any = None,
    ) -> OptParser:
        return self.add_option(
            Option.param(
                names,
                type_name,
                description,
                required=required,
                default=default,
                filter=filter,
            )
        )

    def add_flag(self, names: str | Iterable[str], description: str) -> OptParser:
        return self.add_option(Option.flag(names, description))

    def add_term(
        self,
        name: str,
        type_name: str,
        description: str,
        required: bool = True,
        filter: Callable[[Any], Any] | None = None,
    ) -> OptParser:
        return self.add_option(
            Option.term(name, type_name, description, required=required, filter=filter)
        )

    def add_usage(self, command: str, option_names: Iterable[str]) -> OptParser:
        """
        Restrict `command` to the listed options.

        Names may be primary names or aliases; they are stored by primary name.

        Raises:
            DefinitionError: If `command` is not a registered command or an
                option name is unknown.
        """
        command_option = self.option_registry.find_command(command)
        if command_option is None:
            raise DefinitionError(f"Usage refers to unknown command '{command}'")
        if isinstance(option_names, str):
            option_names = [option_names]
        primary_names = []
        for name in option_names:
            option = self.option_registry.find(name)
            if option is None:
                raise DefinitionError(
                    f"Usage for '{command}' refers to unknown option '{name}'"
                )
            primary_names.append(option.primary_name)
        self.usage_definition.add_usage(command_option.primary_name, primary_names)
        return self

    def add_help_sections(
        self,
        examples: list[str] | None = None,
        exit_codes: dict[str, str] | None = None,
        environment: dict[str, str] | None = None,
        documentation: list[str] | None = None,
    ) -> OptParser:
        """Add extra sections printed at the end of the help output."""
        self.help_sections.extend(examples, exit_codes, environment, documentation)
        return self

    def register_type(self, value_type: ValueType) -> OptParser:
        """Register a custom value type (replacing a type of the same name)."""
        self.type_registry.register(value_type)
        return self

    @property
    def help_renderer(self) -> HelpRenderer:
        return HelpRenderer(
            console=self.console,
            program_name=self.program_name,
            description=self.description,
            version=self.version,
            option_registry=self.option_registry,
            usage_definition=self.usage_definition,
            sections=self.help_sections,
        )

    def render_help(self) -> None:
        self.help_renderer.render_help()

    def render_version(self) -> None:
        self.help_renderer.render_version()

    def get_usage(self, command: str | None = None) -> str:
        return self.help_renderer.get_usage(command)

    def _requested(self, args: Sequence[str], flags: Sequence[str]) -> bool:
        """True if one of `flags` appears before any `--` terminator."""
        for arg in args:
            if arg == TERMINATOR:
                return False
            if arg in flags:
                return True
        return False

    def parse(self, argv: Sequence[str] | None = None) -> Input:
        """
        Parse an argument vector into an `Input`.

        Args:
            argv (Sequence[str] | None): Arguments without the program name.
                `None` parses `sys.argv[1:]`.

        Returns:
            Input: The validated command, options and remaining operands.

        Raises:
            UsageError: On syntax errors, missing required options or options
                not allowed with the matched command.
            ValidationError: If a value fails its type or filter.
            HelpSignal: After rendering help for `--help` / `-h`.
            VersionSignal: After rendering the version for `--version`.
        """
        args = default_argv(argv)
        logger.debug("[%s] Parsing arguments: %s", self.program_name, args)

        if self._requested(args, HELP_FLAGS):
            self.render_help()
            raise HelpSignal()
        if self._requested(args, VERSION_FLAGS):
            self.render_version()
            raise VersionSignal()

        tokens = Tokenizer().tokenize(args)
        result = SyntaxParser(self.option_registry).parse(tokens)
        validator = ValueValidator(
            self.option_registry, self.type_registry, self.usage_definition
        )
        options = validator.validate(result)
        return Input(
            command=result.command,
            options=options,
            non_options=result.mapped_options.get(OVERFLOW_KEY, []),
        )

    def run(self, argv: Sequence[str] | None = None) -> Input:
        """
        Parse arguments as a program entry point.

        Help and version requests exit with 0. Parse errors are printed to
        stderr and exit with the error's exit code. Ctrl+C exits with 130.
        """
        try:
            return self.parse(argv)
        except FlowSignal as signal:
            sys.exit(signal.exit_code)
        except OptParserError as error:
            logger.debug("[%s] %s: %s", self.program_name, type(error).__name__, error)
            err_console.print(f"error: {error.message}", markup=False, highlight=False)
            sys.exit(error.exit_code)
        except KeyboardInterrupt:
            err_console.print("\nOperation interrupted", markup=False, highlight=False)
            sys.exit(INTERRUPTED_EXIT_CODE)

    @property
    def commands(self) -> list[Option]:
        return self.option_registry.commands

    def get_option(self, name: str) -> Option | None:
        return self.option_registry.find(name)

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert option metadata into a serializable list of dicts.

        Returns:
            List of definitions for introspection, documentation, or export.
        """
        definitions = []
        for option in self.option_registry:
            definition: dict[str, Any] = {
                "kind": str(option.kind),
                "names": list(option.names),
                "description": option.description,
            }
            if option.kind in (OptionKind.PARAM, OptionKind.TERM):
                definition["type"] = option.type_name
                definition["required"] = option.required
                definition["default"] = option.default
            if option.kind == OptionKind.COMMAND:
                definition["usage"] = self.usage_definition.get_allowed(
                    option.primary_name
                )
            definitions.append(definition)
        return definitions

    def __str__(self) -> str:
        return f"OptParser(program={self.program_name!r}, {self.option_registry})"

    def __repr__(self) -> str:
        return str(self)
