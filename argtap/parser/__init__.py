"""
Argtap CLI Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Argument
from .argument_parser import ArgumentParser
from .base_argument import BaseArgument
from .constraint import ArgumentConstraint, ArgumentSet
from .constraint_type import ConstraintType
from .parser_types import OccurrenceCell, ValueCell
from .typed_argument import (
    ConstArgument,
    MultiValueArgument,
    MultiVariableArgument,
    SwitchArgument,
    TypedArgument,
    ValueArgument,
    VariableArgument,
)

__all__ = [
    "Argument",
    "ArgumentConstraint",
    "ArgumentParser",
    "ArgumentSet",
    "BaseArgument",
    "ConstArgument",
    "ConstraintType",
    "MultiValueArgument",
    "MultiVariableArgument",
    "OccurrenceCell",
    "SwitchArgument",
    "TypedArgument",
    "ValueArgument",
    "ValueCell",
    "VariableArgument",
]
