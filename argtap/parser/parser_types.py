# Argtap CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Shared state cells used by Argtap arguments.

Arguments are stored by clone in every argument set and constraint they are
added to. The clones keep their own alias lists and bounds, but all of them
reference the same cells declared here, so an occurrence recorded through any
clone is visible through every other clone and through the handle the caller
kept.

Contents:
- `OccurrenceCell`: How many times an argument has been matched.
- `ValueCell`: The value (or list of values) stored by a typed argument.
"""
from dataclasses import dataclass
from typing import Any


@dataclass
class OccurrenceCell:
    """Occurrence counter shared by an argument and all of its clones."""

    count: int = 0

    def increment(self) -> int:
        self.count += 1
        return self.count

    def reset(self) -> None:
        self.count = 0


@dataclass
class ValueCell:
    """Value storage shared by a typed argument and all of its clones."""

    value: Any = None
