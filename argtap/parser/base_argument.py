# Argtap CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `BaseArgument`, the common interface of declared arguments and
constraint nodes.

Both leaves (`Argument` and its typed variants) and combinators
(`ArgumentConstraint`, `ArgumentSet`) can be children of a constraint, so they
share a small interface: a required flag, an occurrence count, validation,
usage rendering, cloning and argument collection.

The operator overloads live here so that any mix of arguments and constraints
can be combined:

    a ^ b    exactly one of a, b          (ConstraintType.ONE)
    a | b    any of a, b                  (ConstraintType.ANY)
    a & b    all or none of a, b          (ConstraintType.ALL)
    a > b    a requires b                 (ConstraintType.IMPLIES)
    ~a       a may not be set             (ConstraintType.NONE)
    +a / -a  mark a required / optional

Python turns `a > b > c` into `a > b and b > c`, so longer implication
chains must be parenthesized: `(a > b) > c`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argtap.parser.argument import Argument
    from argtap.parser.constraint import ArgumentConstraint


class BaseArgument(ABC):
    """Interface shared by declared arguments and constraint nodes."""

    def __init__(self, required: bool = False) -> None:
        self._required: bool = required

    @property
    def required(self) -> bool:
        return self._required

    def set_required(self, required: bool = True) -> BaseArgument:
        """Mark this node as required (or optional) and return it."""
        self._required = required
        return self

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of times this node counts as set."""

    def __bool__(self) -> bool:
        return self.count > 0

    @abstractmethod
    def check_valid(self) -> None:
        """Raise a `TapError` if the parsed state of this node is invalid."""

    @abstractmethod
    def usage(self) -> str:
        """Return the usage text of this node."""

    @abstractmethod
    def clone(self) -> BaseArgument:
        """Return a copy with independent structure and shared state cells."""

    @abstractmethod
    def find_all_arguments(self, collector: list[Argument]) -> None:
        """Append every argument contained in this node to `collector`."""

    def __pos__(self) -> BaseArgument:
        return self.set_required(True)

    def __neg__(self) -> BaseArgument:
        return self.set_required(False)

    def __xor__(self, other: BaseArgument) -> ArgumentConstraint:
        return self._combine("one", other)

    def __or__(self, other: BaseArgument) -> ArgumentConstraint:
        return self._combine("any", other)

    def __and__(self, other: BaseArgument) -> ArgumentConstraint:
        return self._combine("all", other)

    def __gt__(self, other: BaseArgument) -> ArgumentConstraint:
        return self._combine("implies", other)

    def __invert__(self) -> ArgumentConstraint:
        from argtap.parser.constraint import ArgumentConstraint

        return ArgumentConstraint("none", self)

    def _combine(self, kind: str, other: BaseArgument) -> ArgumentConstraint:
        if not isinstance(other, BaseArgument):
            return NotImplemented
        from argtap.parser.constraint import combine

        return combine(kind, self, other)
