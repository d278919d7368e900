"""
posixopt POSIX Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Any, Sequence

from rich import box
from rich.markup import escape
from rich.table import Table

from posixopt.config import loader
from posixopt.console import console, err_console
from posixopt.exceptions import OptParserError
from posixopt.input import Input
from posixopt.logger import logger
from posixopt.opt_parser import OptParser
from posixopt.signals import FlowSignal
from posixopt.utils import get_program_invocation, setup_logging
from posixopt.version import __version__

LOG_MODES = ("cli", "json")


def log_mode(value: str) -> str:
    mode = value.lower()
    if mode not in LOG_MODES:
        raise ValueError(f"expected one of: {', '.join(LOG_MODES)}")
    return mode


def build_parser(program_name: str = "posixopt") -> OptParser:
    return (
        OptParser(
            program_name,
            "Check program definition files and try parsing arguments against them.",
            __version__,
        )
        .add_command("check", "Load a definition file and show its help")
        .add_command("parse", "Parse the arguments after '--' with a definition file")
        .add_term("definition", "INFILE", "Program definition file (YAML or TOML)")
        .add_flag("json", "Print the parsed input as JSON")
        .add_flag(["verbose", "v"], "Enable debug logging")
        .add_param("log-mode", "STRING", "Log format: cli or json", filter=log_mode)
        .add_usage("check", ["definition", "verbose", "log-mode"])
        .add_usage("parse", ["definition", "json", "verbose", "log-mode"])
        .add_help_sections(
            examples=[
                f"{program_name} check tool.yaml",
                f"{program_name} parse tool.yaml -- add alice -p secret -v",
                f"{program_name} parse tool.toml --json -- --output=report.txt",
            ],
            exit_codes={
                "0": "Success",
                "1": "Invalid definition or invalid value",
                "2": "Invalid command line",
            },
            environment={"POSIXOPT_LOG_MODE": "Default log format (cli or json)"},
        )
    )


def render_input(parsed: Input, as_json: bool = False) -> None:
    if as_json:
        console.print_json(
            data={
                "command": parsed.command,
                "options": parsed.to_dict(),
                "non_options": list(parsed.non_options),
            },
            default=str,
        )
        return

    table = Table(title=f"Command: {parsed.command or '-'}", box=box.SIMPLE)
    table.add_column("Option", style="bold cyan")
    table.add_column("Value", overflow="fold")
    table.add_column("Type", style="dim")
    for name, value in parsed.options.items():
        table.add_row(escape(name), escape(repr(value)), type(value).__name__)
    console.print(table)
    if parsed.non_options:
        console.print(f"Non-options: {escape(' '.join(parsed.non_options))}")


def run_definition(args: Input) -> int:
    definition = loader(args["definition"])
    if args.command == "check":
        definition.render_help()
        return 0
    try:
        parsed = definition.parse(list(args.non_options))
    except FlowSignal as signal:
        return signal.exit_code
    render_input(parsed, as_json=bool(args.get("json")))
    return 0


def main(argv: Sequence[str] | None = None) -> Any:
    parser = build_parser(get_program_invocation())
    args = parser.run(argv)

    setup_logging(
        mode=args.get("log-mode"),
        console_log_level=logging.DEBUG if args.get("verbose") else logging.WARNING,
    )

    if args.command is None:
        err_console.print(
            f"error: a command is required\nUsage: {parser.get_usage()}",
            markup=False,
            highlight=False,
        )
        sys.exit(2)

    try:
        return run_definition(args)
    except OptParserError as error:
        logger.debug("%s: %s", type(error).__name__, error)
        err_console.print(f"error: {error.message}", markup=False, highlight=False)
        sys.exit(error.exit_code)


if __name__ == "__main__":
    sys.exit(main())
