"""State: the rank of each ResultOption variant."""

from __future__ import annotations

from enum import Enum

__all__ = ["State"]


class State(Enum):
    """Which variant of a ResultOption is active.

    The values fix the ordering used when comparing variants:
    VALUE < ABSENT < FAILURE.
    """

    VALUE = 0
    ABSENT = 1
    FAILURE = 2

    def __str__(self) -> str:
        return self.name.capitalize()
