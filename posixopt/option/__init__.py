"""
posixopt POSIX Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .option import Option
from .option_kind import OptionKind
from .option_registry import OptionRegistry

__all__ = [
    "Option",
    "OptionKind",
    "OptionRegistry",
]
