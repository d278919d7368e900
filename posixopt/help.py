# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help and version rendering for `OptParser`.

`HelpRenderer` prints a rich-styled help screen built from the registered
options: a usage line, the program description, then commands, arguments and
options, followed by any extra sections (examples, exit codes, environment,
documentation) supplied through `HelpSections`.

Rendering is kept outside the parsing pipeline; `OptParser.parse()` only calls
it when `--help`, `-h` or `--version` is requested.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console
from rich.markup import escape

from posixopt.option.option import Option
from posixopt.option.option_kind import OptionKind
from posixopt.option.option_registry import OptionRegistry
from posixopt.usage import UsageDefinition

HELP_FLAGS = ("--help", "-h")
VERSION_FLAGS = ("--version",)
COLUMN_WIDTH = 30


@dataclass
class HelpSections:
    """Optional help sections printed after the options list."""

    examples: list[str] = field(default_factory=list)
    exit_codes: dict[str, str] = field(default_factory=dict)
    environment: dict[str, str] = field(default_factory=dict)
    documentation: list[str] = field(default_factory=list)

    def extend(
        self,
        examples: list[str] | None = None,
        exit_codes: dict[str, str] | None = None,
        environment: dict[str, str] | None = None,
        documentation: list[str] | None = None,
    ) -> None:
        self.examples.extend(examples or [])
        self.exit_codes.update({str(k): v for k, v in (exit_codes or {}).items()})
        self.environment.update(environment or {})
        self.documentation.extend(documentation or [])


class HelpRenderer:
    """Renders help and version text for a program definition."""

    def __init__(
        self,
        console: Console,
        program_name: str,
        description: str,
        version: str,
        option_registry: OptionRegistry,
        usage_definition: UsageDefinition,
        sections: HelpSections,
    ) -> None:
        self.console = console
        self.program_name = program_name
        self.description = description
        self.version = version
        self.option_registry = option_registry
        self.usage_definition = usage_definition
        self.sections = sections

    def get_usage(self, command: str | None = None) -> str:
        """
        Return the usage line, optionally narrowed to one command.

        Example:
            "prog [options] {add,delete} <username> [<email>]"
        """
        parts = [self.program_name]
        named = [
            option
            for option in self.option_registry
            if option.kind in (OptionKind.FLAG, OptionKind.PARAM)
            and self._allowed(command, option)
        ]
        if named:
            parts.append("[options]")
        commands = self.option_registry.commands
        if command is not None:
            parts.append(command)
        elif commands:
            parts.append(f"{{{','.join(cmd.primary_name for cmd in commands)}}}")
        for term in self.option_registry.terms:
            if self._allowed(command, term):
                parts.append(term.get_choice_text())
        return " ".join(parts)

    def _allowed(self, command: str | None, option: Option) -> bool:
        return command is None or self.usage_definition.allows(
            command, option.primary_name
        )

    def _print_row(self, left: str, right: str) -> None:
        line = f"  {left:<{COLUMN_WIDTH}} "
        if right and len(left) > COLUMN_WIDTH:
            right = f"\n{'':<{COLUMN_WIDTH + 3}}{right}"
        self.console.print(escape(f"{line}{right}"), highlight=False)

    def _option_help(self, option: Option) -> str:
        help_text = option.description or ""
        if option.kind == OptionKind.PARAM:
            extras = []
            if option.required:
                extras.append("required")
            if option.default is not None:
                extras.append(f"default: {option.default}")
            if extras:
                help_text = f"{help_text} ({', '.join(extras)})".strip()
        return help_text

    def render_help(self) -> None:
        """Print formatted help text using Rich output."""
        self.console.print(f"[bold]Usage:[/bold] {escape(self.get_usage())}\n")

        if self.description:
            self.console.print(escape(self.description) + "\n")

        commands = self.option_registry.commands
        if commands:
            self.console.print("[bold]Commands:[/bold]")
            for command in commands:
                self._print_row(command.get_flag_text(), command.description)
            self.console.print()

        terms = self.option_registry.terms
        if terms:
            self.console.print("[bold]Arguments:[/bold]")
            for term in terms:
                help_text = f"{term.description} ({term.type_name})".strip()
                self._print_row(term.get_choice_text(), help_text)
            self.console.print()

        self.console.print("[bold]Options:[/bold]")
        for option in self.option_registry:
            if option.kind not in (OptionKind.FLAG, OptionKind.PARAM):
                continue
            flags = f"{option.get_flag_text()} {option.get_choice_text()}".strip()
            self._print_row(flags, self._option_help(option))
        self._print_row("-h, --help", "Display this help message")
        self._print_row("--version", "Display version information")

        self._render_sections()

    def _render_sections(self) -> None:
        if self.sections.examples:
            self.console.print("\n[bold]Examples:[/bold]")
            for example in self.sections.examples:
                self.console.print(f"  {escape(example)}", highlight=False)
        if self.sections.exit_codes:
            self.console.print("\n[bold]Exit codes:[/bold]")
            for code, meaning in self.sections.exit_codes.items():
                self._print_row(code, meaning)
        if self.sections.environment:
            self.console.print("\n[bold]Environment:[/bold]")
            for name, meaning in self.sections.environment.items():
                self._print_row(name, meaning)
        if self.sections.documentation:
            self.console.print("\n[bold]Documentation:[/bold]")
            for line in self.sections.documentation:
                self.console.print(f"  {escape(line)}", highlight=False)

    def render_version(self) -> None:
        self.console.print(
            escape(f"{self.program_name} {self.version}"), highlight=False
        )
