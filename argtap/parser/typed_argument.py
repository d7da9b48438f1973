# Argtap CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value-carrying argument variants.

`TypedArgument` extends `Argument` with a value type, used to decode the
command-line token, and a `ValueCell` holding the decoded result. In multi
mode every occurrence appends to a list instead of overwriting the value.

Decoding is transactional: the token is converted first and the cell is only
written when conversion succeeds, so a rejected token leaves the previous
value (or list) untouched.

Classes:
- VariableArgument: Stores into a `ValueCell` supplied and owned by the caller.
- ValueArgument: Allocates its own `ValueCell` from a default value.
- MultiVariableArgument / MultiValueArgument: Multi-mode shorthands.
- ConstArgument: Takes no token, stores a fixed constant when set.
- SwitchArgument: Takes no token, toggles a boolean on every occurrence.

Example:
    level = ValueArgument("Optimization level", "O", default=1)
    files = MultiValueArgument("Input files", type=Path)
    parser = ArgumentParser(level, files)
    parser.parse(["prog", "-O2", "a.txt", "b.txt"])
    assert level.value == 2
"""
from __future__ import annotations

from typing import Any, Callable

from argtap.exceptions import InvalidValueError, LogicError
from argtap.logger import logger
from argtap.parser.argument import Argument
from argtap.parser.parser_types import ValueCell
from argtap.parser.utils import coerce_value


class TypedArgument(Argument):
    """
    Base class for arguments that decode and store a value.

    Args:
        description (str): Help text for the argument.
        flag (str | None): Single-character flag alias.
        name (str | None): Long name alias.
        cell (ValueCell): Storage shared with every clone.
        type (Any): Target type or converter callable. Inferred from the stored
            value when omitted, falling back to `str`.
        multi (bool): Append each occurrence to a list instead of overwriting.
        value_name (str): Placeholder shown in usage and help text.
        autoflag (bool): Extract additional aliases from the description.
        required (bool): Whether the argument must be given.

    A `bool` typed argument takes no token: each occurrence stores `True`.
    """

    def __init__(
        self,
        description: str = "",
        flag: str | None = None,
        name: str | None = None,
        *,
        cell: ValueCell,
        type: Any = None,
        multi: bool = False,
        value_name: str = "value",
        autoflag: bool = False,
        required: bool = False,
    ) -> None:
        self.multi: bool = multi
        if multi:
            if cell.value is None:
                cell.value = []
            elif not isinstance(cell.value, list):
                raise LogicError("Multi-value arguments require list storage")
        self._cell: ValueCell = cell
        self.type: Any = type if type is not None else self._infer_type(cell.value)
        self._value_name: str = value_name
        self._typed_check: Callable[[TypedArgument, Any], None] | None = None
        super().__init__(
            description, flag, name, autoflag=autoflag, required=required
        )
        if multi:
            self._max = 0

    def _infer_type(self, value: Any) -> Any:
        if self.multi:
            value = value[0] if value else None
        if value is None:
            return str
        return type(value)

    @property
    def cell(self) -> ValueCell:
        return self._cell

    @property
    def value(self) -> Any:
        return self._cell.value

    @property
    def value_name(self) -> str:
        return self._value_name

    def set_value_name(self, value_name: str) -> TypedArgument:
        self._value_name = value_name
        return self

    def check_typed(
        self, func: Callable[[TypedArgument, Any], None] | None
    ) -> TypedArgument:
        """
        Register a callback run with the decoded value after every occurrence.

        In multi mode the callback receives the newly appended element.
        """
        self._typed_check = func
        return self

    def takes_value(self) -> bool:
        return self.type is not bool

    def decode(self, value: str) -> Any:
        return coerce_value(value, self.type)

    def set(self) -> None:
        if self.takes_value():
            raise LogicError("Calling set() on valued argument")
        self._store(True)

    def set_value(self, value: str) -> None:
        if not self.takes_value():
            raise LogicError(f"Argument {self.ident()} does not accept a value")
        try:
            decoded = self.decode(value)
        except (ValueError, TypeError) as error:
            logger.debug("Rejected value %r for %s: %s", value, self.usage(), error)
            raise InvalidValueError(self, value) from error
        self._store(decoded)

    def _store(self, decoded: Any) -> None:
        if self.multi:
            self._cell.value.append(decoded)
        else:
            self._cell.value = decoded
        if self._typed_check is not None:
            self._typed_check(self, decoded)
        self._occur()

    def usage(self) -> str:
        if self._positional:
            text = self._value_name
            if self._max != 1:
                text += "..."
            return text
        if not self.takes_value():
            return super().usage()
        return f"{super().usage()} {self._value_name}"

    def ident(self) -> str:
        if self._positional:
            return self._value_name
        return super().ident()


class VariableArgument(TypedArgument):
    """
    Typed argument writing into a `ValueCell` owned by the caller.

    The cell's current value acts as the default and, when `type` is omitted,
    decides the value type.
    """

    def __init__(
        self,
        description: str = "",
        flag: str | None = None,
        name: str | None = None,
        *,
        storage: ValueCell,
        type: Any = None,
        multi: bool = False,
        value_name: str = "value",
        autoflag: bool = False,
        required: bool = False,
    ) -> None:
        super().__init__(
            description,
            flag,
            name,
            cell=storage,
            type=type,
            multi=multi,
            value_name=value_name,
            autoflag=autoflag,
            required=required,
        )


class ValueArgument(TypedArgument):
    """Typed argument owning its storage, initialized from `default`."""

    def __init__(
        self,
        description: str = "",
        flag: str | None = None,
        name: str | None = None,
        *,
        default: Any = None,
        type: Any = None,
        multi: bool = False,
        value_name: str = "value",
        autoflag: bool = False,
        required: bool = False,
    ) -> None:
        if multi:
            if default is None:
                default = []
            elif isinstance(default, (list, tuple)):
                default = list(default)
            else:
                default = [default]
        super().__init__(
            description,
            flag,
            name,
            cell=ValueCell(default),
            type=type,
            multi=multi,
            value_name=value_name,
            autoflag=autoflag,
            required=required,
        )


class MultiVariableArgument(VariableArgument):
    """`VariableArgument` storing every occurrence in the caller's list cell."""

    def __init__(self, description: str = "", flag=None, name=None, **kwargs) -> None:
        super().__init__(description, flag, name, multi=True, **kwargs)


class MultiValueArgument(ValueArgument):
    """`ValueArgument` storing every occurrence in its own list."""

    def __init__(self, description: str = "", flag=None, name=None, **kwargs) -> None:
        super().__init__(description, flag, name, multi=True, **kwargs)


class ConstArgument(Argument):
    """Argument that stores a fixed constant into a caller-owned cell when set."""

    def __init__(
        self,
        description: str = "",
        flag: str | None = None,
        name: str | None = None,
        *,
        storage: ValueCell,
        const: Any,
        autoflag: bool = False,
        required: bool = False,
    ) -> None:
        self._cell: ValueCell = storage
        self.const: Any = const
        super().__init__(
            description, flag, name, autoflag=autoflag, required=required
        )

    @property
    def cell(self) -> ValueCell:
        return self._cell

    @property
    def value(self) -> Any:
        return self._cell.value

    def set(self) -> None:
        self._occur()
        self._cell.value = self.const


class SwitchArgument(Argument):
    """
    Argument that toggles a boolean on every occurrence.

    Without `storage` the switch starts out `False` in an internal cell. A
    caller-supplied cell keeps its value and is toggled from there. Repeated
    occurrences alternate the value.
    """

    def __init__(
        self,
        description: str = "",
        flag: str | None = None,
        name: str | None = None,
        *,
        storage: ValueCell | None = None,
        autoflag: bool = False,
        required: bool = False,
    ) -> None:
        self._cell: ValueCell = storage if storage is not None else ValueCell(False)
        super().__init__(
            description, flag, name, autoflag=autoflag, required=required
        )
        self._max = 0

    @property
    def cell(self) -> ValueCell:
        return self._cell

    @property
    def value(self) -> bool:
        return self._cell.value

    def set(self) -> None:
        self._cell.value = not self._cell.value
        self._occur()
