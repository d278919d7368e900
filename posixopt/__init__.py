"""
posixopt POSIX Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import DefinitionError, OptParserError, UsageError, ValidationError
from .input import Input
from .opt_parser import OptParser
from .option import Option, OptionKind
from .signals import FlowSignal, HelpSignal, VersionSignal
from .type_registry import TypeRegistry
from .usage import UsageDefinition
from .value_types import ValueType
from .version import __version__

logger = logging.getLogger("posixopt")


__all__ = [
    "DefinitionError",
    "FlowSignal",
    "HelpSignal",
    "Input",
    "OptParser",
    "OptParserError",
    "Option",
    "OptionKind",
    "TypeRegistry",
    "UsageDefinition",
    "UsageError",
    "ValidationError",
    "ValueType",
    "VersionSignal",
    "__version__",
]
