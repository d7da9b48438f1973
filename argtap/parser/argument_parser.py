# Argtap CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, the engine that maps a raw argument
vector onto declared Argtap arguments and validates the result.

Parsing happens in two phases. The tokenizer walks the vector once, without
backtracking, and applies each token to the argument it resolves to. Then
every argument set, followed by the constraints, is validated. The first
failure is raised as a `TapError`; occurrences recorded before the failure are
not rolled back.

Token classification, in priority order:
- The skip marker (`--`) switches to positional mode for the remaining tokens.
- `--name` / `--name=value`: a named argument.
- `-abc` / `-bcVALUE`: a cluster of flags. Flags are applied left to right
  until one takes a value; the rest of the token (or the next token) is that
  value.
- Anything else is positional.

Resolution:
For a flag, a name, or a positional slot, the sets are searched in
declaration order. The first matching argument that can still be set wins;
when every match is exhausted the last match is used, so the overflow is
reported by validation rather than silently dropped.

Example Usage:
    verbose = Argument("Print more output", "v", "verbose")
    output = ValueArgument("Output file", "o", "output", type=Path)
    inputs = MultiValueArgument("Input files").set_value_name("file")

    parser = ArgumentParser(verbose, output, inputs)
    parser.add_constraint(+inputs)
    parser.parse(["tool", "-vo", "out.txt", "a.txt", "b.txt"])

    assert output.value == Path("out.txt")
    assert inputs.value == ["a.txt", "b.txt"]

    print(parser.help())
"""
from __future__ import annotations

import sys
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from argtap.console import console
from argtap.exceptions import (
    LogicError,
    MissingValueError,
    UnexpectedValueError,
    UnknownArgumentError,
)
from argtap.logger import logger
from argtap.parser.argument import Argument
from argtap.parser.base_argument import BaseArgument
from argtap.parser.constraint import ArgumentSet
from argtap.syntax import Syntax, get_syntax


class ArgumentParser:
    """
    Parser for a flat set of declared arguments and their constraints.

    Arguments passed to the constructor or to `add()` land in the default set,
    named "Arguments". Adding an `ArgumentSet` appends a new named group.
    Constraints added through `add_constraint()` are validated after every
    set, and are not listed in the help text.

    Features:
    - Flags, names, and positional arguments.
    - Flag clusters with an optional trailing value.
    - Inline `--name=value` values.
    - A skip marker forcing positional interpretation.
    - Plain-text and Rich help rendering.
    """

    def __init__(
        self,
        *arguments: BaseArgument,
        program_name: str | None = None,
    ) -> None:
        """Initialize the ArgumentParser."""
        self.console: Console = console
        self._program_name: str = program_name or ""
        self._argument_sets: list[ArgumentSet] = [ArgumentSet("Arguments", *arguments)]
        self._constraints: ArgumentSet = ArgumentSet("Constraints")

    @property
    def program_name(self) -> str:
        return self._program_name

    @program_name.setter
    def program_name(self, program_name: str) -> None:
        self._program_name = program_name

    @property
    def argument_sets(self) -> tuple[ArgumentSet, ...]:
        return tuple(self._argument_sets)

    @property
    def constraints(self) -> ArgumentSet:
        return self._constraints

    def add(self, argument: BaseArgument) -> ArgumentParser:
        """Add an argument or constraint to the default set, or append a new set."""
        if isinstance(argument, ArgumentSet):
            self._argument_sets.append(argument.clone())
        else:
            self._argument_sets[0].add(argument)
        return self

    def add_all(self, *arguments: BaseArgument) -> ArgumentParser:
        for argument in arguments:
            self.add(argument)
        return self

    def add_constraint(self, constraint: BaseArgument) -> ArgumentParser:
        """Add a constraint validated after all argument sets."""
        self._constraints.add(constraint)
        return self

    def _find_argument(
        self, flag: str | None = None, name: str | None = None
    ) -> Argument | None:
        found = None
        for argument_set in self._argument_sets:
            for argument in argument_set.args():
                if argument.matches(flag=flag, name=name):
                    found = argument
                    if argument.can_set():
                        return argument
        return found

    def __getitem__(self, key: str) -> Argument:
        """
        Look up an argument by flag or name.

        Keys may carry their prefix (`-v`, `--verbose`). Without a prefix a
        single character is treated as a flag and anything longer as a name.
        """
        syntax = get_syntax()
        if key.startswith(syntax.name_prefix) and key != syntax.name_prefix:
            argument = self._find_argument(name=key[len(syntax.name_prefix) :])
        elif key.startswith(syntax.flag_prefix) and key != syntax.flag_prefix:
            argument = self._find_argument(flag=key[len(syntax.flag_prefix) :])
        elif len(key) == 1:
            argument = self._find_argument(flag=key)
        else:
            argument = self._find_argument(name=key)
        if argument is None:
            raise KeyError(f"No argument matches '{key}'")
        return argument

    def parse(self, argv: Sequence[str] | None = None) -> None:
        """
        Parse a full argument vector, program name included.

        The program name is taken from `argv[0]` unless one was set before.
        Defaults to `sys.argv`.
        """
        argv = list(sys.argv if argv is None else argv)
        if not argv:
            raise LogicError("The argument vector must contain the program name")
        if not self._program_name:
            self._program_name = argv[0]
        self.parse_args(argv[1:])

    def parse_args(self, args: Sequence[str]) -> None:
        """Parse `args`, which must not include the program name, then validate."""
        args = list(args)
        syntax = get_syntax()
        positional_only = False
        index = 0
        while index < len(args):
            token = args[index]
            if positional_only:
                self._handle_positional(token)
            elif syntax.skip_marker and token == syntax.skip_marker:
                logger.debug("Skip marker at %d, remaining tokens are positional", index)
                positional_only = True
            elif self._is_named(token, syntax):
                index = self._handle_named(args, index, syntax)
            elif self._is_flag_cluster(token, syntax):
                index = self._handle_flags(args, index, syntax)
            else:
                self._handle_positional(token)
            index += 1
        self.check_valid()

    def _is_named(self, token: str, syntax: Syntax) -> bool:
        return token.startswith(syntax.name_prefix) and token != syntax.name_prefix

    def _is_flag_cluster(self, token: str, syntax: Syntax) -> bool:
        return token.startswith(syntax.flag_prefix) and token != syntax.flag_prefix

    def _handle_named(self, args: list[str], index: int, syntax: Syntax) -> int:
        body = args[index][len(syntax.name_prefix) :]
        value = None
        if syntax.name_delimiter:
            position = body.find(syntax.name_delimiter, 1)
            if position > 0:
                body, value = body[:position], body[position + 1 :]

        argument = self._find_argument(name=body)
        if argument is None:
            raise UnknownArgumentError(name=body)
        logger.debug("Token %r resolved to %s", args[index], argument.ident())

        if argument.takes_value():
            if value is None:
                index += 1
                if index >= len(args):
                    raise MissingValueError(argument)
                value = args[index]
            self._set_value(argument, value)
        elif value is not None:
            raise UnexpectedValueError(argument)
        else:
            argument.set()
        return index

    def _handle_flags(self, args: list[str], index: int, syntax: Syntax) -> int:
        token = args[index]
        position = len(syntax.flag_prefix)
        while position < len(token):
            flag = token[position]
            argument = self._find_argument(flag=flag)
            if argument is None:
                raise UnknownArgumentError(flag=flag)
            logger.debug("Flag %r in %r resolved to %s", flag, token, argument.ident())
            position += 1
            if argument.takes_value():
                if position < len(token):
                    self._set_value(argument, token[position:])
                else:
                    index += 1
                    if index >= len(args):
                        raise MissingValueError(argument)
                    self._set_value(argument, args[index])
                break
            argument.set()
        return index

    def _handle_positional(self, token: str) -> None:
        argument = self._find_argument()
        if argument is None:
            raise UnknownArgumentError()
        logger.debug("Positional %r resolved to %s", token, argument.ident())
        if argument.takes_value():
            self._set_value(argument, token)
        else:
            argument.set()

    def _set_value(self, argument: Argument, value: str) -> None:
        if not argument.takes_value():
            raise LogicError("Attempt to set value on non-valued argument")
        argument.set_value(value)

    def check_valid(self) -> None:
        """Validate every argument set, then the constraints."""
        for argument_set in self._argument_sets:
            logger.debug("Validating argument set '%s'", argument_set.name)
            argument_set.check_valid()
        logger.debug("Validating %d constraint(s)", len(self._constraints))
        self._constraints.check_valid()

    def get_usage(self) -> str:
        """
        Render the usage line for this parser.

        Returns:
            str: `Usage: <program> <usage of every non-empty set>`.
        """
        parts = ["Usage:"]
        if self._program_name:
            parts.append(self._program_name)
        parts.extend(
            argument_set.usage()
            for argument_set in self._argument_sets
            if len(argument_set)
        )
        return " ".join(parts)

    def _help_rows(self) -> list[tuple[str, list[tuple[str, str]]]]:
        sections = []
        for argument_set in self._argument_sets:
            if not len(argument_set):
                continue
            rows = [
                (argument.ident(), argument.description)
                for argument in argument_set.args()
            ]
            sections.append((argument_set.name, rows))
        return sections

    def help(self) -> str:
        """
        Build the plain-text help for this parser.

        The usage line is followed by one section per non-empty set, listing
        each argument's identifier aligned to the longest one, then its
        description.
        """
        sections = self._help_rows()
        width = max(
            (len(ident) for _, rows in sections for ident, _ in rows), default=0
        )
        width += 2
        help_text = f"{self.get_usage()}\n"
        for name, rows in sections:
            help_text += f"\n{name}:\n"
            for ident, description in rows:
                help_text += f"  {ident:<{width}}{description}\n"
        return help_text

    def render_help(self) -> None:
        """Print the help text using Rich output."""
        sections = self._help_rows()
        width = max(
            (len(ident) for _, rows in sections for ident, _ in rows), default=0
        )
        width += 2
        usage = self.get_usage().removeprefix("Usage: ")
        self.console.print(f"[bold]Usage:[/bold] {escape(usage)}")
        for name, rows in sections:
            self.console.print(f"\n[bold]{escape(name)}:[/bold]")
            for ident, description in rows:
                padding = " " * (width - len(ident))
                self.console.print(
                    f"  [bold]{escape(ident)}[/bold]{padding}{escape(description)}"
                )

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        arguments = sum(len(argument_set.args()) for argument_set in self._argument_sets)
        return (
            f"ArgumentParser(program={self._program_name!r}, "
            f"sets={len(self._argument_sets)}, arguments={arguments}, "
            f"constraints={len(self._constraints)})"
        )

    def __repr__(self) -> str:
        return str(self)
