# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Program-definition loader for posixopt parsers.

A definition file (YAML or TOML) describes a complete `OptParser`: the program
metadata, its commands, flags, params and terms, per-command usage lists and
extra help sections. Filters are referenced by dotted import path.

Example (YAML):
    program: user-manager
    description: Manage user accounts
    commands:
      - names: [add]
        description: Add a new user
    terms:
      - name: username
        type: STRING
    params:
      - names: [password, p]
        type: STRING
        required: true
    flags:
      - names: [verbose, v]
    usage:
      add: [username, password, verbose]
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import pydantic
import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from posixopt.exceptions import DefinitionError
from posixopt.logger import logger
from posixopt.opt_parser import OptParser


def import_filter(dotted_path: str) -> Callable[[Any], Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise DefinitionError(f"Invalid filter path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise DefinitionError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        filter_ = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise DefinitionError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(filter_):
        raise DefinitionError(f"Filter '{dotted_path}' is not callable")
    return filter_


def _as_name_list(value: Any) -> Any:
    if isinstance(value, str):
        return [value]
    return value


class RawCommand(BaseModel):
    """Command entry of a program definition."""

    model_config = ConfigDict(extra="forbid")

    names: list[str]
    description: str = ""

    @field_validator("names", mode="before")
    @classmethod
    def coerce_names(cls, value: Any) -> Any:
        return _as_name_list(value)


class RawFlag(BaseModel):
    """Flag entry of a program definition."""

    model_config = ConfigDict(extra="forbid")

    names: list[str]
    description: str = ""

    @field_validator("names", mode="before")
    @classmethod
    def coerce_names(cls, value: Any) -> Any:
        return _as_name_list(value)


class RawParam(BaseModel):
    """Param entry of a program definition."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    names: list[str]
    type_name: str = Field(alias="type")
    description: str = ""
    required: bool = False
    default: Any = None
    filter: str | None = None

    @field_validator("names", mode="before")
    @classmethod
    def coerce_names(cls, value: Any) -> Any:
        return _as_name_list(value)


class RawTerm(BaseModel):
    """Term entry of a program definition."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    type_name: str = Field(alias="type")
    description: str = ""
    required: bool = True
    filter: str | None = None


class RawHelp(BaseModel):
    """Extra help sections of a program definition."""

    model_config = ConfigDict(extra="forbid")

    examples: list[str] = Field(default_factory=list)
    exit_codes: dict[str, str] = Field(default_factory=dict)
    environment: dict[str, str] = Field(default_factory=dict)
    documentation: list[str] = Field(default_factory=list)

    @field_validator("exit_codes", mode="before")
    @classmethod
    def stringify_exit_codes(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(code): meaning for code, meaning in value.items()}
        return value


class ProgramConfig(BaseModel):
    """Complete program definition."""

    model_config = ConfigDict(extra="forbid")

    program: str
    description: str = ""
    version: str = "1.0.0"
    commands: list[RawCommand] = Field(default_factory=list)
    flags: list[RawFlag] = Field(default_factory=list)
    params: list[RawParam] = Field(default_factory=list)
    terms: list[RawTerm] = Field(default_factory=list)
    usage: dict[str, list[str]] = Field(default_factory=dict)
    help: RawHelp = Field(default_factory=RawHelp)

    def to_parser(self) -> OptParser:
        parser = OptParser(self.program, self.description, self.version)
        for command in self.commands:
            parser.add_command(command.names, command.description)
        for term in self.terms:
            parser.add_term(
                term.name,
                term.type_name,
                term.description,
                required=term.required,
                filter=import_filter(term.filter) if term.filter else None,
            )
        for param in self.params:
            parser.add_param(
                param.names,
                param.type_name,
                param.description,
                filter=import_filter(param.filter) if param.filter else None,
                required=param.required,
                default=param.default,
            )
        for flag in self.flags:
            parser.add_flag(flag.names, flag.description)
        for command_name, option_names in self.usage.items():
            parser.add_usage(command_name, option_names)
        parser.add_help_sections(
            examples=self.help.examples,
            exit_codes=self.help.exit_codes,
            environment=self.help.environment,
            documentation=self.help.documentation,
        )
        return parser


def loader(file_path: Path | str) -> OptParser:
    """
    Load a program definition from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the definition file.

    Returns:
        OptParser: A parser configured from the file.

    Raises:
        DefinitionError: If the file is missing, has an unsupported format,
            cannot be parsed or describes an invalid program.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise DefinitionError(f"No such definition file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as definition_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(definition_file)
            elif suffix == ".toml":
                raw_config = toml.load(definition_file)
            else:
                raise DefinitionError(f"Unsupported definition format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise DefinitionError(f"Could not parse '{path}': {error}") from error

    if not isinstance(raw_config, dict):
        raise DefinitionError(
            "Definition file must contain a mapping.\n"
            "Example:\n"
            "program: 'my-tool'\n"
            "flags:\n"
            "  - names: ['verbose', 'v']\n"
            "    description: 'Verbose output'"
        )

    try:
        config = ProgramConfig.model_validate(raw_config)
    except pydantic.ValidationError as error:
        raise DefinitionError(f"Invalid definition in '{path}':\n{error}") from error

    logger.debug("Loaded program definition '%s' from %s", config.program, path)
    return config.to_parser()
