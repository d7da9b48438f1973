# Argtap CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ConstraintType`, the satisfaction policy of an `ArgumentConstraint`.

Supports alias coercion for operator symbols and config-friendly values, so
constraint declarations in YAML or TOML can use either spelling.

Example:
    ConstraintType("one") → ConstraintType.ONE
    ConstraintType("^")   → ConstraintType.ONE (via alias)
    ConstraintType("xor") → ConstraintType.ONE (via alias)
"""
from __future__ import annotations

from enum import Enum


class ConstraintType(Enum):
    """
    Policy used by a constraint node to validate its children.

    Members:
        NONE: No child may be set.
        ONE: Exactly one child must be set.
        ANY: Any number of children may be set; at least one when required.
        ALL: Either every child is set or none is.
        IMPLIES: Each set child requires the next child to be set.

    Aliases:
        - "~", "not" → "none"
        - "^", "xor" → "one"
        - "|", "or" → "any"
        - "&", "and" → "all"
        - ">", "requires" → "implies"
    """

    NONE = "none"
    ONE = "one"
    ANY = "any"
    ALL = "all"
    IMPLIES = "implies"

    @classmethod
    def choices(cls) -> list[ConstraintType]:
        """Return a list of all constraint types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "~": "none",
            "not": "none",
            "^": "one",
            "xor": "one",
            "|": "any",
            "or": "any",
            "&": "all",
            "and": "all",
            ">": "implies",
            "requires": "implies",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ConstraintType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def separator(self) -> str:
        """Separator placed between child usages."""
        return " | " if self is ConstraintType.ONE else " "

    def __str__(self) -> str:
        """Return the string representation of the constraint type."""
        return self.value
