# Argtap CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for declaring Argtap parsers in YAML or TOML.

Example (YAML):
    program: backup
    arguments:
      - key: verbose
        description: Print more output
        flag: v
        name: verbose
        max: 3
      - key: target
        description: Destination directory
        kind: value
        type: path
        required: true
    groups:
      - name: Compression
        arguments:
          - key: gzip
            description: Use &gzip
            autoflag: true
          - key: xz
            description: Use $xz
            autoflag: true
    constraints:
      - kind: one
        required: false
        members: [gzip, xz]

`loader()` returns a `LoadedParser` exposing the parser and the declared
arguments by key, so values can be read after parsing.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from argtap.logger import logger
from argtap.parser.argument import Argument
from argtap.parser.argument_parser import ArgumentParser
from argtap.parser.constraint import ArgumentConstraint, ArgumentSet
from argtap.parser.constraint_type import ConstraintType
from argtap.parser.typed_argument import SwitchArgument, ValueArgument
from argtap.syntax import Syntax, set_syntax

VALUE_TYPES: dict[str, Any] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "path": Path,
    "datetime": datetime,
}


class ArgumentKind(Enum):
    """Kinds of arguments that can be declared in a configuration file."""

    FLAG = "flag"
    VALUE = "value"
    MULTI = "multi"
    SWITCH = "switch"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "count": "flag",
            "store": "value",
            "append": "multi",
            "toggle": "switch",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        alias = cls._get_alias(value.strip().lower())
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


class RawArgument(BaseModel):
    """Raw argument model for Argtap configuration."""

    key: str
    description: str = ""
    flag: str | None = None
    name: str | None = None
    kind: ArgumentKind = ArgumentKind.FLAG
    type: str = "str"
    default: Any = None
    required: bool = False
    min: int = Field(default=1, ge=1)
    max: int | None = Field(default=None, ge=0)
    many: bool = False
    value_name: str = "value"
    autoflag: bool = False

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> ArgumentKind:
        if isinstance(value, ArgumentKind):
            return value
        return ArgumentKind(value)

    @field_validator("flag")
    @classmethod
    def validate_flag(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError("flag must be a single character.")
        return value

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in VALUE_TYPES:
            raise ValueError(
                f"Unsupported value type '{value}'. "
                f"Must be one of: {', '.join(VALUE_TYPES)}"
            )
        return normalized

    def to_argument(self) -> Argument:
        if self.kind is ArgumentKind.FLAG:
            argument: Argument = Argument(
                self.description, self.flag, self.name, autoflag=self.autoflag
            )
        elif self.kind is ArgumentKind.SWITCH:
            argument = SwitchArgument(
                self.description, self.flag, self.name, autoflag=self.autoflag
            )
        else:
            argument = ValueArgument(
                self.description,
                self.flag,
                self.name,
                default=self.default,
                type=VALUE_TYPES[self.type],
                multi=self.kind is ArgumentKind.MULTI,
                value_name=self.value_name,
                autoflag=self.autoflag,
            )
        argument.set_required(self.required)
        if self.min != 1:
            argument.set_min(self.min)
        if self.max is not None:
            argument.set_max(self.max)
        if self.many:
            argument.many()
        return argument


class RawConstraint(BaseModel):
    """Raw constraint model; members are argument keys or nested constraints."""

    kind: ConstraintType
    required: bool | None = None
    members: list[str | RawConstraint]

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> ConstraintType:
        if isinstance(value, ConstraintType):
            return value
        return ConstraintType(value)

    @field_validator("members")
    @classmethod
    def validate_members(cls, value: list) -> list:
        if not value:
            raise ValueError("A constraint needs at least one member.")
        return value

    def to_constraint(self, arguments: dict[str, Argument]) -> ArgumentConstraint:
        children = []
        for member in self.members:
            if isinstance(member, RawConstraint):
                children.append(member.to_constraint(arguments))
            elif member in arguments:
                children.append(arguments[member])
            else:
                raise ValueError(f"Constraint references unknown argument '{member}'")
        return ArgumentConstraint(self.kind, *children, required=self.required)


RawConstraint.model_rebuild()


class RawGroup(BaseModel):
    """A named group of arguments, shown as its own help section."""

    name: str
    arguments: list[RawArgument] = Field(default_factory=list)


class ParserConfig(BaseModel):
    """Argtap parser configuration model."""

    program: str | None = None
    syntax: Syntax | None = None
    arguments: list[RawArgument] = Field(default_factory=list)
    groups: list[RawGroup] = Field(default_factory=list)
    constraints: list[RawConstraint] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_keys(self) -> ParserConfig:
        keys = [raw.key for raw in self.arguments]
        keys += [raw.key for group in self.groups for raw in group.arguments]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ValueError(f"Duplicate argument keys: {', '.join(duplicates)}")
        return self

    def to_parser(self) -> LoadedParser:
        """
        Build the parser described by this configuration.

        A `syntax` section replaces the active syntax before any argument is
        created, so usage text and tokenizing agree.
        """
        if self.syntax is not None:
            set_syntax(self.syntax)

        arguments: dict[str, Argument] = {}
        parser = ArgumentParser(program_name=self.program)
        for raw in self.arguments:
            arguments[raw.key] = raw.to_argument()
            parser.add(arguments[raw.key])
        for group in self.groups:
            members = []
            for raw in group.arguments:
                arguments[raw.key] = raw.to_argument()
                members.append(arguments[raw.key])
            parser.add(ArgumentSet(group.name, *members))
        for raw_constraint in self.constraints:
            parser.add_constraint(raw_constraint.to_constraint(arguments))
        logger.debug(
            "Built parser with %d argument(s) and %d constraint(s)",
            len(arguments),
            len(self.constraints),
        )
        return LoadedParser(parser=parser, arguments=arguments)


@dataclass
class LoadedParser:
    """A parser built from configuration, with its arguments by key."""

    parser: ArgumentParser
    arguments: dict[str, Argument] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Argument:
        return self.arguments[key]

    def parse(self, argv: list[str] | None = None) -> None:
        self.parser.parse(argv)


def loader(file_path: Path | str) -> LoadedParser:
    """
    Load an Argtap parser declaration from a YAML or TOML file.

    The file should contain a dictionary with an `arguments` list and,
    optionally, `program`, `syntax`, `groups` and `constraints`.

    Each argument should be defined as a dictionary with at least:
    - key: a unique identifier used by constraints and lookups
    - description: help text

    Args:
        file_path (str): Path to the config file (YAML or TOML).

    Returns:
        LoadedParser: The parser and its arguments by key.

    Raises:
        ValueError: If the file format is unsupported or file cannot be parsed.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of arguments.\n"
            "Example:\n"
            "program: 'tool'\n"
            "arguments:\n"
            "  - key: 'verbose'\n"
            "    description: 'Print more output'\n"
            "    flag: 'v'"
        )

    logger.debug("Loading parser configuration from %s", path)
    return ParserConfig.model_validate(raw_config).to_parser()
