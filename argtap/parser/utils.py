# Argtap CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion and description utilities for Argtap arguments.

This module provides the default decoder used by typed arguments to convert
command-line tokens into Python values, including `Enum`, `bool`, `datetime`,
`Literal` and union types, and the parser for alias markers embedded in
argument descriptions.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string or raw value to an Enum instance.
- coerce_value: General-purpose coercion to a target type (including nested unions, enums, etc.).
- parse_description: Extract flag and name aliases from a marked-up description.
"""
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

from argtap.logger import logger

FLAG_MARKER = "%"
NAME_MARKER = "$"
FLAG_NAME_MARKER = "&"
ESCAPE = "\\"
MARKERS = (FLAG_MARKER, NAME_MARKER, FLAG_NAME_MARKER)


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0', 'off', etc.

    Args:
        value (str): The input string or boolean.

    Returns:
        bool: Parsed boolean result.
    """
    if isinstance(value, bool):
        return value
    value = value.strip().lower()
    if value in {"true", "t", "1", "yes", "on"}:
        return True
    elif value in {"false", "f", "0", "no", "off"}:
        return False
    return bool(value)


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Convert a raw value or string to an Enum instance.

    Tries to resolve by name, value, or coerced base type.

    Raises:
        ValueError: If the value cannot be resolved to a valid Enum member.
    """
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            pass

    base_type = type(next(iter(enum_type)).value)
    try:
        coerced_value = base_type(value)
        return enum_type(coerced_value)
    except (ValueError, TypeError):
        values = [str(enum.value) for enum in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a string to the given target type.

    Handles complex typing constructs such as Union, Literal, Enum, and datetime.
    Any other callable is applied to the value directly, which makes plain
    converter functions usable as argument types.

    Args:
        value (str): The input string to convert.
        target_type (Any): The desired type or converter callable.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the value is invalid.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        if value not in args:
            raise ValueError(
                f"Value '{value}' is not a valid literal for type {target_type}"
            )
        return value

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            try:
                return coerce_value(value, arg)
            except (ValueError, TypeError):
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(
                f"Value '{value}' could not be parsed as a datetime"
            ) from error

    return target_type(value)


def _read_word(text: str, start: int) -> str:
    end = start
    while end < len(text) and text[end].isalnum():
        end += 1
    return text[start:end]


def parse_description(description: str) -> tuple[str, list[str], list[str]]:
    """
    Extract alias markers from an argument description.

    Markers:
        `%` marks the following character as a flag.
        `$` marks the following word as a name.
        `&` marks the following word as a name and its first character as a flag.

    A marker preceded by a backslash is kept literally. Markers are removed
    from the returned description, the marked words are kept.

    Example:
        parse_description("Show this &help text")
        → ("Show this help text", ["h"], ["help"])

    Returns:
        tuple[str, list[str], list[str]]: The cleaned description, the flags
        found, and the names found, in order of appearance.
    """
    text: list[str] = []
    flags: list[str] = []
    names: list[str] = []
    index = 0
    while index < len(description):
        char = description[index]
        if (
            char == ESCAPE
            and index + 1 < len(description)
            and description[index + 1] in MARKERS
        ):
            text.append(description[index + 1])
            index += 2
            continue
        if char in MARKERS:
            word = _read_word(description, index + 1)
            if word:
                if char in (FLAG_MARKER, FLAG_NAME_MARKER):
                    flags.append(word[0])
                if char in (NAME_MARKER, FLAG_NAME_MARKER):
                    names.append(word)
            else:
                logger.debug("Ignoring empty alias marker in description: %r", description)
            index += 1
            continue
        text.append(char)
        index += 1
    return "".join(text), flags, names
