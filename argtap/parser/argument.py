# Argtap CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Argument`, a single declared command-line option.

An argument is identified by zero or more single-character flags (`-v`) and
long names (`--verbose`). An argument declared without any alias is
positional; positional status is fixed at construction and later aliases do
not change it. Plain arguments carry no value: every occurrence only
increments their count. Value-carrying variants live in `typed_argument`.

Key Attributes:
- `flags` / `names`: Aliases, the first of each is canonical.
- `min` / `max`: Occurrence bounds. `max == 0` means unbounded.
- `count`: Occurrences recorded so far, shared by every clone.
- `required`: Whether at least one occurrence is needed.

Arguments are stored by clone in the sets and constraints they are added to.
Bounds and aliases are copied at that moment, while the occurrence count stays
shared, so configure an argument fully before adding it anywhere.

Example:
    verbose = Argument("Print more output", "v", "verbose").set_max(3)
    parser = ArgumentParser(verbose)
    parser.parse(["prog", "-vv"])
    assert verbose.count == 2
"""
from __future__ import annotations

import copy
from typing import Callable

from argtap.exceptions import ArgumentCountMismatchError, LogicError
from argtap.parser.base_argument import BaseArgument
from argtap.parser.parser_types import OccurrenceCell
from argtap.parser.utils import parse_description
from argtap.syntax import get_syntax


class Argument(BaseArgument):
    """
    Represents a command-line argument without a value.

    Args:
        description (str): Help text for the argument.
        flag (str | None): Single-character flag alias.
        name (str | None): Long name alias.
        autoflag (bool): Extract additional aliases from markers in the description.
        required (bool): Whether the argument must be given.

    Raises:
        LogicError: If an alias is malformed, or the argument is positional but
            does not accept a value.
    """

    def __init__(
        self,
        description: str = "",
        flag: str | None = None,
        name: str | None = None,
        *,
        autoflag: bool = False,
        required: bool = False,
    ) -> None:
        super().__init__(required)
        self._flags: list[str] = []
        self._names: list[str] = []
        if autoflag:
            description, flags, names = parse_description(description)
            for found_flag in flags:
                self.alias(flag=found_flag)
            for found_name in names:
                self.alias(name=found_name)
        self.alias(flag=flag, name=name)
        self.description: str = description
        self._positional: bool = not self._flags and not self._names
        self._min: int = 1
        self._max: int = 1
        self._occurrences: OccurrenceCell = OccurrenceCell()
        self._check: Callable[[Argument], None] | None = None
        if self._positional and not self.takes_value():
            raise LogicError(
                f"Positional argument '{description}' must accept a value"
            )

    def alias(self, flag: str | None = None, name: str | None = None) -> Argument:
        """Add a flag and/or name alias."""
        if flag is not None:
            if len(flag) != 1:
                raise LogicError(f"Flag aliases must be a single character: {flag!r}")
            self._flags.append(flag)
        if name is not None:
            if not name:
                raise LogicError("Name aliases cannot be empty")
            self._names.append(name)
        return self

    @property
    def flags(self) -> tuple[str, ...]:
        return tuple(self._flags)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    @property
    def positional(self) -> bool:
        return self._positional

    @property
    def min(self) -> int:
        return self._min

    def set_min(self, minimum: int) -> Argument:
        """
        Set the minimum number of occurrences when the argument is given.

        Raising the minimum above a bounded maximum raises the maximum too.
        """
        if minimum < 1:
            raise LogicError("Cannot set zero minimum")
        self._min = minimum
        if self._max != 0 and self._min > self._max:
            self._max = self._min
        return self

    @property
    def max(self) -> int:
        return self._max

    def set_max(self, maximum: int) -> Argument:
        """
        Set the maximum number of occurrences, 0 for unbounded.

        Lowering the maximum below the minimum lowers the minimum too.
        """
        if maximum < 0:
            raise LogicError("Cannot set negative maximum")
        self._max = maximum
        if self._max != 0 and self._min > self._max:
            self._min = self._max
        return self

    def many(self, many: bool = True) -> Argument:
        """
        Allow unbounded occurrences, or restore a bounded maximum.

        The restored maximum is never below the minimum.
        """
        if many:
            self._max = 0
        else:
            self.set_max(max(self._max, self._min))
        return self

    def check(self, func: Callable[[Argument], None] | None) -> Argument:
        """Register a callback run after every occurrence."""
        self._check = func
        return self

    @property
    def occurrences(self) -> OccurrenceCell:
        return self._occurrences

    @property
    def count(self) -> int:
        return self._occurrences.count

    def can_set(self) -> bool:
        return self._max == 0 or self._occurrences.count < self._max

    def takes_value(self) -> bool:
        return False

    def set(self) -> None:
        """Record one occurrence."""
        self._occur()

    def set_value(self, value: str) -> None:
        raise LogicError(f"Argument {self.ident()} does not accept a value")

    def _occur(self) -> None:
        self._occurrences.increment()
        if self._check is not None:
            self._check(self)

    def matches(self, flag: str | None = None, name: str | None = None) -> bool:
        """
        Check whether this argument answers to a flag, a name, or a positional slot.

        Called without arguments it reports whether the argument is positional.
        """
        if flag is not None:
            return flag in self._flags
        if name is not None:
            return name in self._names
        return self._positional

    def check_valid(self) -> None:
        count = self._occurrences.count
        if count == 0:
            if self._required:
                raise ArgumentCountMismatchError(self, count, 1)
            return
        if count < self._min:
            raise ArgumentCountMismatchError(self, count, self._min)
        if self._max != 0 and count > self._max:
            raise ArgumentCountMismatchError(self, count, self._max)

    def usage(self) -> str:
        syntax = get_syntax()
        if self._flags:
            return f"{syntax.flag_prefix}{self._flags[0]}"
        if self._names:
            return f"{syntax.name_prefix}{self._names[0]}"
        raise LogicError("Base usage() called on positional argument")

    def ident(self) -> str:
        """Return the identifier shown in the help listing, e.g. `-a, --alpha`."""
        syntax = get_syntax()
        parts = []
        if self._flags:
            parts.append(f"{syntax.flag_prefix}{self._flags[0]}")
        if self._names:
            parts.append(f"{syntax.name_prefix}{self._names[0]}")
        return ", ".join(parts)

    def clone(self) -> Argument:
        duplicate = copy.copy(self)
        duplicate._flags = list(self._flags)
        duplicate._names = list(self._names)
        return duplicate

    def find_all_arguments(self, collector: list[Argument]) -> None:
        collector.append(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.description!r}, flags={self._flags}, "
            f"names={self._names}, count={self.count}, required={self._required})"
        )
