# Argtap CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Syntax` model that controls how command-line tokens are classified.

The syntax holds the prefix strings that mark flags (`-a`) and names
(`--alpha`), the delimiter joining a name to an inline value (`--alpha=1`), and
the skip marker after which every token is treated as positional (`--`).

A single active syntax is shared by the whole process. Arguments render their
usage text with it and `ArgumentParser` tokenizes with it, so it should be
configured before arguments are declared.

Example:
    from argtap.syntax import Syntax, set_syntax

    set_syntax(Syntax(flag_prefix="+", name_prefix="++"))
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class Syntax(BaseModel):
    """
    Token grammar used by the parser and by usage rendering.

    Attributes:
        flag_prefix (str): Prefix of single-character flags, clusterable.
        name_prefix (str): Prefix of long names.
        name_delimiter (str): Separates a name from an inline value. Empty disables.
        skip_marker (str): Token after which all tokens are positional. Empty disables.
    """

    model_config = ConfigDict(frozen=True)

    flag_prefix: str = "-"
    name_prefix: str = "--"
    name_delimiter: str = "="
    skip_marker: str = "--"

    @field_validator("flag_prefix", "name_prefix")
    @classmethod
    def validate_prefix(cls, value: str) -> str:
        if not value:
            raise ValueError("Argument prefixes cannot be empty.")
        return value

    @field_validator("name_delimiter")
    @classmethod
    def validate_delimiter(cls, value: str) -> str:
        if len(value) > 1:
            raise ValueError("The name delimiter must be a single character or empty.")
        return value

    @model_validator(mode="after")
    def validate_prefixes_differ(self) -> Syntax:
        if self.flag_prefix == self.name_prefix:
            raise ValueError("Flag and name prefixes must differ.")
        return self


DEFAULT_SYNTAX = Syntax()

_active_syntax: Syntax = DEFAULT_SYNTAX


def get_syntax() -> Syntax:
    """Return the active syntax."""
    return _active_syntax


def set_syntax(syntax: Syntax | None = None) -> None:
    """Replace the active syntax. Passing None restores `DEFAULT_SYNTAX`."""
    global _active_syntax
    _active_syntax = syntax or DEFAULT_SYNTAX


@contextmanager
def use_syntax(syntax: Syntax) -> Iterator[Syntax]:
    """Temporarily activate `syntax`, restoring the previous one on exit."""
    previous = get_syntax()
    set_syntax(syntax)
    try:
        yield syntax
    finally:
        set_syntax(previous)
