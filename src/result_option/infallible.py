"""unwrap_infallible: collapse a ResultOption whose error type is Never."""

from __future__ import annotations

from typing import Never, assert_never

from result_option.types.option import Nothing, Option, Some
from result_option.types.result_option import AbsentType, Failure, ResultOption, Value

__all__ = ["unwrap_infallible"]


def unwrap_infallible[T](result_option: ResultOption[T, Never]) -> Option[T]:
    """Unwrap a ResultOption that can never hold a Failure into an Option.

    With the error type spelled Never, a type checker rejects any attempt to
    build the Failure arm, so this conversion has no failure path: Value
    becomes Some and Absent becomes Nothing.

    Examples:
        >>> def lookup(key: str) -> ResultOption[int, Never]:
        ...     return Value(1) if key == "one" else Absent
        >>> unwrap_infallible(lookup("one"))
        Some(value=1)
        >>> unwrap_infallible(lookup("two"))
        Nothing
    """
    match result_option:
        case Value(value):
            return Some(value)
        case AbsentType():
            return Nothing
        case Failure(error):
            assert_never(error)
        case _:
            raise TypeError(
                f"unwrap_infallible expects Value or Absent, got {type(result_option).__name__}"
            )
