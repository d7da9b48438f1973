# Argtap CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Constraint nodes relating several arguments to each other.

An `ArgumentConstraint` owns clones of its children, which may be arguments
or other constraints, and validates them with one `ConstraintType` policy.
The usage text of a node is built once, while children are added, so
rendering it repeatedly is cheap and always yields the same string.

Usage composition:
- `ONE` separates children with ` | `, every other type with a space.
- Children of a `NONE` node are negated: `!-a` or `!( -a -b )`.
- Optional children of an `ANY` node are bracketed: `[ -a ]`.
- A nested constraint with more than one child is parenthesized inside `ONE`,
  inside `ANY` unless it is an `ANY` itself, and inside `ALL`/`IMPLIES` when it
  is a `ONE` or `ANY`.

`ArgumentSet` is the named `ANY` node the parser uses to group arguments for
lookup and help output.
"""
from __future__ import annotations

import copy
from typing import Iterator, TypeGuard

from argtap.exceptions import ConstraintError, LogicError
from argtap.parser.argument import Argument
from argtap.parser.base_argument import BaseArgument
from argtap.parser.constraint_type import ConstraintType


class ArgumentConstraint(BaseArgument):
    """
    Combinator validating its children with a `ConstraintType` policy.

    Args:
        kind (ConstraintType | str): Validation policy.
        *children (BaseArgument): Arguments or constraints, stored by clone.
        required (bool | None): Defaults to True for `ONE` and False otherwise.
    """

    def __init__(
        self,
        kind: ConstraintType | str,
        *children: BaseArgument,
        required: bool | None = None,
    ) -> None:
        self.kind: ConstraintType = ConstraintType(kind)
        if required is None:
            required = self.kind is ConstraintType.ONE
        super().__init__(required)
        self._children: list[BaseArgument] = []
        self._usage: str = ""
        self.add(*children)

    def add(self, *children: BaseArgument) -> ArgumentConstraint:
        """Add clones of `children` and extend the usage text."""
        for child in children:
            if not isinstance(child, BaseArgument):
                raise LogicError(
                    f"Cannot add {type(child).__name__} to a {self.kind} constraint"
                )
            duplicate = child.clone()
            self._children.append(duplicate)
            text = self._child_usage(duplicate)
            if self._usage:
                self._usage = f"{self._usage}{self.kind.separator}{text}"
            else:
                self._usage = text
        return self

    def _child_usage(self, child: BaseArgument) -> str:
        usage = child.usage()
        if not isinstance(child, ArgumentConstraint):
            if self.kind is ConstraintType.NONE:
                return f"!{usage}"
            if self.kind is ConstraintType.ANY and not child.required:
                return f"[ {usage} ]"
            return usage

        nested = len(child) > 1
        if self.kind is ConstraintType.NONE:
            return f"!( {usage} )" if nested else f"!{usage}"
        if (
            self.kind is ConstraintType.ANY
            and child.kind is not ConstraintType.ANY
            and not child.required
        ):
            return f"[ {usage} ]"
        if nested and self._needs_parentheses(child):
            return f"( {usage} )"
        return usage

    def _needs_parentheses(self, child: ArgumentConstraint) -> bool:
        if self.kind is ConstraintType.ONE:
            return True
        if self.kind is ConstraintType.ANY:
            return child.kind is not ConstraintType.ANY
        return child.kind in (ConstraintType.ONE, ConstraintType.ANY)

    @property
    def children(self) -> tuple[BaseArgument, ...]:
        return tuple(self._children)

    @property
    def size(self) -> int:
        return len(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[BaseArgument]:
        return iter(self._children)

    @property
    def count(self) -> int:
        """Number of children currently set."""
        return sum(1 for child in self._children if child.count > 0)

    def usage(self) -> str:
        return self._usage

    def check_valid(self) -> None:
        for child in self._children:
            child.check_valid()

        set_children = [child for child in self._children if child.count > 0]
        counter = len(set_children)

        if self.kind is ConstraintType.NONE:
            if counter == 1:
                raise ConstraintError("Cannot set the argument", set_children)
            if counter > 1:
                raise ConstraintError(
                    "Not allowed to set the following arguments", set_children
                )
        elif self.kind is ConstraintType.ONE:
            if counter > 1 or (counter == 0 and self._required):
                raise ConstraintError(
                    "Must set exactly one argument from", self._children
                )
        elif self.kind is ConstraintType.ANY:
            if counter == 0 and self._required:
                raise ConstraintError(
                    "At least one of the following arguments must be set",
                    self._children,
                )
        elif self.kind is ConstraintType.ALL:
            if counter < len(self._children) and (counter != 0 or self._required):
                missing = [child for child in self._children if child.count == 0]
                raise ConstraintError("The following arguments are missing", missing)
        elif self.kind is ConstraintType.IMPLIES:
            for current, following in zip(self._children, self._children[1:]):
                if current.count > 0 and following.count == 0:
                    raise ConstraintError(
                        f"Setting {current.usage()} requires", [following]
                    )
            if counter == 0 and self._required and self._children:
                raise ConstraintError(
                    "The following arguments must be set", self._children[:1]
                )

    def clone(self) -> ArgumentConstraint:
        duplicate = copy.copy(self)
        duplicate._children = [child.clone() for child in self._children]
        return duplicate

    def find_all_arguments(self, collector: list[Argument]) -> None:
        for child in self._children:
            child.find_all_arguments(collector)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind}, size={len(self)}, "
            f"required={self._required}, usage={self._usage!r})"
        )


class ArgumentSet(ArgumentConstraint):
    """
    Named, optional `ANY` group of arguments.

    The parser searches sets in declaration order when resolving tokens and
    prints one help section per non-empty set.
    """

    def __init__(self, name: str, *children: BaseArgument) -> None:
        self.name: str = name
        self._arguments: list[Argument] | None = None
        super().__init__(ConstraintType.ANY, *children, required=False)

    def add(self, *children: BaseArgument) -> ArgumentSet:
        self._arguments = None
        super().add(*children)
        return self

    def args(self) -> list[Argument]:
        """
        Return every argument contained in this set, including those nested in
        constraints, with clones of one argument listed once.
        """
        if self._arguments is None:
            collected: list[Argument] = []
            self.find_all_arguments(collected)
            seen: set[int] = set()
            arguments = []
            for argument in collected:
                key = id(argument.occurrences)
                if key not in seen:
                    seen.add(key)
                    arguments.append(argument)
            self._arguments = arguments
        return list(self._arguments)

    def clone(self) -> ArgumentSet:
        duplicate = super().clone()
        duplicate._arguments = None
        return duplicate

    def __repr__(self) -> str:
        return f"ArgumentSet(name={self.name!r}, size={len(self)})"


def combine(
    kind: ConstraintType | str, left: BaseArgument, right: BaseArgument
) -> ArgumentConstraint:
    """
    Build the constraint for a binary operator.

    A plain constraint of the same type on either side is extended instead of
    nested, so `a ^ b ^ c` yields one node with three children.
    """
    kind = ConstraintType(kind)
    if _extendable(left, kind):
        return left.clone().add(right)
    if _extendable(right, kind):
        return ArgumentConstraint(kind, left, *right.children, required=right.required)
    return ArgumentConstraint(kind, left, right)


def _extendable(
    node: BaseArgument, kind: ConstraintType
) -> TypeGuard[ArgumentConstraint]:
    return type(node) is ArgumentConstraint and node.kind is kind
