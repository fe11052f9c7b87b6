"""Conversions from the binary Result and Option forms into ResultOption."""

from __future__ import annotations

import copy

from result_option.types.option import NothingType, Option, Some
from result_option.types.result import Err, Ok, Result
from result_option.types.result_option import Absent, Failure, ResultOption, Value

__all__ = ["from_nullable", "from_option", "from_result"]


def from_result[T, E](result: Result[Option[T], E]) -> ResultOption[T, E]:
    """Convert a Result of Option into a ResultOption.

    Args:
        result: Ok(Some(value)), Ok(Nothing) or Err(error).

    Returns:
        Value(value), Absent or Failure(error) respectively.

    Raises:
        TypeError: If an Ok does not hold an Option.

    Examples:
        >>> from_result(Ok(Some(5)))
        Value(value=5)
        >>> from_result(Ok(Nothing))
        Absent
        >>> from_result(Err("e"))
        Failure(error='e')
    """
    match result:
        case Ok(Some(value)):
            return Value(value)
        case Ok(NothingType()):
            return Absent
        case Err(error):
            return Failure(error)
        case Ok(other):
            msg = f"from_result expects Ok to hold an Option, got {type(other).__name__}"
            raise TypeError(msg)
        case _:
            msg = f"from_result expects Ok or Err, got {type(result).__name__}"
            raise TypeError(msg)


def from_option[T](option: Option[T], *, clone: bool = False) -> ResultOption[T, object]:
    """Convert an Option into a ResultOption; no Failure is reachable this way.

    Args:
        option: Some(value) or Nothing.
        clone: Deep-copy the payload so the result owns it independently
            of the source.

    Returns:
        Value(value) for Some, Absent for Nothing.
    """
    match option:
        case Some(value):
            return Value(copy.deepcopy(value) if clone else value)
        case NothingType():
            return Absent
        case _:
            msg = f"from_option expects Some or Nothing, got {type(option).__name__}"
            raise TypeError(msg)


def from_nullable[T](value: T | None, *, clone: bool = False) -> ResultOption[T, object]:
    """Convert a plain Python optional (None means absent) into a ResultOption.

    Examples:
        >>> from_nullable(5)
        Value(value=5)
        >>> from_nullable(None)
        Absent
    """
    if value is None:
        return Absent
    return Value(copy.deepcopy(value) if clone else value)
