# Argtap CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argtap.

These exceptions describe why a command line was rejected: a token that
matches no declared argument, an argument given the wrong number of times or
an undecodable value, a violated relation between arguments, or a misuse of
the declaration API itself.

All exceptions inherit from `TapError`, the base exception for the library.

Exception Hierarchy:
- TapError
    ├── CommandError
    │    └── UnknownArgumentError
    ├── ArgumentError
    │    ├── ArgumentCountMismatchError
    │    ├── InvalidValueError
    │    ├── MissingValueError
    │    └── UnexpectedValueError
    ├── ConstraintError
    └── LogicError

Every message is complete on its own, so callers can print `str(error)`
directly and exit.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from argtap.syntax import get_syntax

if TYPE_CHECKING:
    from argtap.parser.base_argument import BaseArgument


class TapError(Exception):
    """Base exception for all Argtap errors."""

    @property
    def message(self) -> str:
        return str(self)


class CommandError(TapError):
    """Exception raised when the command line itself cannot be interpreted."""


class UnknownArgumentError(CommandError):
    """Exception raised when a token does not resolve to any declared argument."""

    def __init__(self, flag: str | None = None, name: str | None = None) -> None:
        self.flag = flag
        self.name = name
        syntax = get_syntax()
        if flag is not None:
            message = f"The flag argument {syntax.flag_prefix}{flag} is unknown"
        elif name is not None:
            message = f"The named argument {syntax.name_prefix}{name} is unknown"
        else:
            message = "No positional arguments are supported"
        super().__init__(message)


class ArgumentError(TapError):
    """Exception raised when a declared argument is used incorrectly."""

    def __init__(self, argument: BaseArgument, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"Argument {argument.usage()} {reason}")


class ArgumentCountMismatchError(ArgumentError):
    """Exception raised when an argument occurs too few or too many times."""

    def __init__(self, argument: BaseArgument, count: int, expected: int) -> None:
        self.count = count
        self.expected = expected
        if count < expected:
            if expected == 1:
                reason = "is required"
            else:
                reason = f"is required to occur at least {expected} times"
        elif expected == 1:
            reason = "can only be set once"
        else:
            reason = f"can occur at most {expected} times"
        super().__init__(argument, reason)


class InvalidValueError(ArgumentError):
    """Exception raised when a value token cannot be decoded for an argument."""

    def __init__(self, argument: BaseArgument, value: str) -> None:
        self.value = value
        super().__init__(argument, f"does not accept the value {value}")


class MissingValueError(ArgumentError):
    """Exception raised when a value-taking argument ends the command line."""

    def __init__(self, argument: BaseArgument) -> None:
        super().__init__(argument, "requires a value")


class UnexpectedValueError(ArgumentError):
    """Exception raised when an inline value is given to a non-value argument."""

    def __init__(self, argument: BaseArgument) -> None:
        super().__init__(argument, "does not accept a value")


class ConstraintError(TapError):
    """Exception raised when a relation between arguments is violated."""

    def __init__(self, reason: str, arguments: Sequence[BaseArgument]) -> None:
        self.reason = reason
        self.arguments = list(arguments)
        usages = " ".join(argument.usage() for argument in self.arguments)
        super().__init__(f"{reason} {usages}" if usages else reason)


class LogicError(TapError):
    """Exception raised when the declaration API is misused by the program."""
