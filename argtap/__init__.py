"""
Argtap CLI Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import TapError
from .logger import logger
from .parser import (
    Argument,
    ArgumentConstraint,
    ArgumentParser,
    ArgumentSet,
    ConstArgument,
    ConstraintType,
    MultiValueArgument,
    MultiVariableArgument,
    SwitchArgument,
    ValueArgument,
    ValueCell,
    VariableArgument,
)
from .syntax import Syntax

__all__ = [
    "Argument",
    "ArgumentConstraint",
    "ArgumentParser",
    "ArgumentSet",
    "ConstArgument",
    "ConstraintType",
    "MultiValueArgument",
    "MultiVariableArgument",
    "SwitchArgument",
    "Syntax",
    "TapError",
    "ValueArgument",
    "ValueCell",
    "VariableArgument",
    "logger",
]
