"""ResultOption type: Value[T] | Absent | Failure[E].

A three-way outcome for call sites where a binary Result conflates "no data"
with "failure": a lookup can find something (Value), legitimately find nothing
(Absent), or fail (Failure).
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any, ClassVar, NoReturn, TypeIs

import msgspec

from result_option._config import get_config
from result_option._logging import log_event
from result_option.errors import UnwrapError
from result_option.types.option import Nothing, NothingType, Some
from result_option.types.result import Err, Ok
from result_option.types.state import State

__all__ = ["Absent", "AbsentType", "Failure", "ResultOption", "Value"]


def _unwrap_failed(method: str, message: str, state: State, payload: Any = None) -> NoReturn:
    log_event(
        __name__,
        "unwrap_failed",
        method=method,
        state=str(state),
        payload=None if state is State.ABSENT else repr(payload),
    )
    raise UnwrapError(message, method=method, state=state, payload=payload)


def _unchecked_violation(method: str, state: State) -> None:
    """Raise AssertionError if unchecked calls are verified, else return None."""
    if not get_config().check_unchecked:
        return
    log_event(
        __name__,
        "unchecked_contract_violation",
        level="warning",
        method=method,
        state=str(state),
    )
    raise AssertionError(f"Called {method} on {state}")


class _Variant(msgspec.Struct, frozen=True, gc=False):
    """Ordering shared by all variants: rank first, then payload."""

    state: ClassVar[State]

    def _payload(self) -> tuple[Any, ...]:
        return ()

    def _compare(self, other: object, op: Callable[[Any, Any], bool]) -> bool:
        if not isinstance(other, _Variant):
            return NotImplemented
        if self.state is not other.state:
            return op(self.state.value, other.state.value)
        return op(self._payload(), other._payload())

    def __lt__(self, other: object) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: object) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: object) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: object) -> bool:
        return self._compare(other, operator.ge)


class Value[T](_Variant, frozen=True, gc=False):
    """Value variant of ResultOption: the operation succeeded with data.

    Examples:
        >>> found = Value(42)
        >>> found.unwrap()
        42
        >>> found.map(lambda x: x * 2)
        Value(value=84)
        >>> found.to_value_option()
        Some(value=42)
    """

    value: T

    state = State.VALUE

    def _payload(self) -> tuple[Any, ...]:
        return (self.value,)

    def is_value(self) -> TypeIs[Value[T]]:
        """Return True since this is Value."""
        return True

    def is_absent(self) -> TypeIs[AbsentType]:
        """Return False since this is Value."""
        return False

    def is_failure(self) -> TypeIs[Failure[object]]:
        """Return False since this is Value."""
        return False

    def is_value_and(self, pred: Callable[[T], bool]) -> bool:
        """Return the result of applying pred to the value."""
        return pred(self.value)

    def is_failure_and(self, _pred: Callable[[object], bool]) -> bool:
        """Return False without calling pred since this is Value."""
        return False

    def to_value_option(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        return Some(self.value)

    def to_failure_option(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Value."""
        return Nothing

    def to_result(self) -> Ok[Some[T]]:
        """Convert to a Result of Option, returning Ok(Some(value))."""
        return Ok(Some(self.value))

    def as_ref(self) -> Value[T]:
        """Return a view sharing this value's payload object."""
        return self

    def as_mut(self) -> Value[T]:
        """Return a view sharing this value's payload object.

        The payload is not copied: mutating it through the view mutates the
        payload held by this Value.
        """
        return self

    def map[U](self, f: Callable[[T], U]) -> Value[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the value.

        Returns:
            Value containing the result of applying f to the value.
        """
        return Value(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f(value), ignoring the default."""
        return f(self.value)

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f(value), ignoring the default function."""
        return f(self.value)

    def map_or_default[U](self, f: Callable[[T], U], default_factory: Callable[[], U]) -> U:  # noqa: ARG002
        """Return f(value), ignoring the default factory."""
        return f(self.value)

    def map_failure[F](self, _f: Callable[[object], F]) -> Value[T]:
        """Return self unchanged since this is Value."""
        return self

    def inspect(self, f: Callable[[T], object]) -> Value[T]:
        """Call f with the contained value, then return self unchanged."""
        f(self.value)
        return self

    def inspect_failure(self, _f: Callable[[object], object]) -> Value[T]:
        """Return self unchanged since this is Value."""
        return self

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap_unchecked(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback function."""
        return self.value

    def unwrap_or_default(self, default_factory: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default factory."""
        return self.value

    def unwrap_failure(self) -> NoReturn:
        """Raise since this is Value.

        Raises:
            UnwrapError: Always, with the value's repr in the message.
        """
        _unwrap_failed(
            "unwrap_failure",
            f"Called unwrap_failure on Value: {self.value!r}",
            State.VALUE,
            self.value,
        )

    def expect_failure(self, msg: str) -> NoReturn:
        """Raise with a custom message followed by the value's repr.

        Raises:
            UnwrapError: Always.
        """
        _unwrap_failed("expect_failure", f"{msg}: {self.value!r}", State.VALUE, self.value)

    def unwrap_failure_unchecked(self) -> None:
        """Contract violation: the caller promised this is Failure."""
        return _unchecked_violation("unwrap_failure_unchecked", State.VALUE)

    def unwrap_as_option(self) -> Some[T]:
        """Return Some(value)."""
        return Some(self.value)

    def expect_as_option(self, _msg: str) -> Some[T]:
        """Return Some(value), ignoring the message."""
        return Some(self.value)

    def unwrap_as_option_unchecked(self) -> Some[T]:
        """Return Some(value)."""
        return Some(self.value)

    def unwrap_as_option_or(self, default: T) -> Some[T]:  # noqa: ARG002
        """Return Some(value), ignoring the default."""
        return Some(self.value)

    def unwrap_as_option_or_default(self, default_factory: Callable[[], T]) -> Some[T]:  # noqa: ARG002
        """Return Some(value), ignoring the default factory."""
        return Some(self.value)

    def unwrap_as_option_or_nothing(self) -> Some[T]:
        """Return Some(value)."""
        return Some(self.value)


class AbsentType(_Variant, frozen=True, gc=False):
    """Absent variant of ResultOption: the operation succeeded without data.

    Absent is not an error. The strict unwrap family still refuses it, while
    the option-flavored family (unwrap_as_option*) maps it to Nothing.

    This is a singleton - use the `Absent` constant instead of
    instantiating directly.

    Examples:
        >>> Absent.unwrap_or(7)
        7
        >>> Absent.unwrap_as_option_or_nothing()
        Nothing
    """

    state = State.ABSENT

    def __repr__(self) -> str:
        return "Absent"

    # Copies and unpickled instances resolve back to the module-level Absent.
    def __copy__(self) -> AbsentType:
        return Absent

    def __deepcopy__(self, _memo: dict[int, Any]) -> AbsentType:
        return Absent

    def __reduce__(self) -> str:
        return "Absent"

    def is_value(self) -> TypeIs[Value[object]]:
        """Return False since this is Absent."""
        return False

    def is_absent(self) -> TypeIs[AbsentType]:
        """Return True since this is Absent."""
        return True

    def is_failure(self) -> TypeIs[Failure[object]]:
        """Return False since this is Absent."""
        return False

    def is_value_and(self, _pred: Callable[[object], bool]) -> bool:
        """Return False without calling pred since this is Absent."""
        return False

    def is_failure_and(self, _pred: Callable[[object], bool]) -> bool:
        """Return False without calling pred since this is Absent."""
        return False

    def to_value_option(self) -> NothingType:
        """Convert to Option, returning Nothing."""
        return Nothing

    def to_failure_option(self) -> NothingType:
        """Convert to Option, returning Nothing."""
        return Nothing

    def to_result(self) -> Ok[NothingType]:
        """Convert to a Result of Option, returning Ok(Nothing)."""
        return Ok(Nothing)

    def as_ref(self) -> AbsentType:
        """Return Absent."""
        return self

    def as_mut(self) -> AbsentType:
        """Return Absent."""
        return self

    def map[T, U](self, _f: Callable[[T], U]) -> AbsentType:
        """Return Absent since there's no value to map."""
        return self

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        """Return the default since this is Absent."""
        return default

    def map_or_else[T, U](self, default: Callable[[], U], _f: Callable[[T], U]) -> U:
        """Compute and return the default since this is Absent."""
        return default()

    def map_or_default[T, U](self, _f: Callable[[T], U], default_factory: Callable[[], U]) -> U:
        """Return default_factory() since this is Absent."""
        return default_factory()

    def map_failure[E, F](self, _f: Callable[[E], F]) -> AbsentType:
        """Return Absent since there's no error to map."""
        return self

    def inspect[T](self, _f: Callable[[T], object]) -> AbsentType:
        """Return Absent without calling f."""
        return self

    def inspect_failure[E](self, _f: Callable[[E], object]) -> AbsentType:
        """Return Absent without calling f."""
        return self

    def unwrap(self) -> NoReturn:
        """Raise since Absent holds no value.

        Raises:
            UnwrapError: Always.
        """
        _unwrap_failed("unwrap", "Called unwrap on Absent", State.ABSENT)

    def expect(self, msg: str) -> NoReturn:
        """Raise with the caller's message.

        Raises:
            UnwrapError: Always, with msg as the message.
        """
        _unwrap_failed("expect", msg, State.ABSENT)

    def unwrap_unchecked(self) -> None:
        """Contract violation: the caller promised this is Value."""
        return _unchecked_violation("unwrap_unchecked", State.ABSENT)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Absent."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Absent."""
        return f()

    def unwrap_or_default[T](self, default_factory: Callable[[], T]) -> T:
        """Return default_factory() since this is Absent."""
        return default_factory()

    def unwrap_failure(self) -> NoReturn:
        """Raise since Absent holds no error.

        Raises:
            UnwrapError: Always.
        """
        _unwrap_failed("unwrap_failure", "Called unwrap_failure on Absent", State.ABSENT)

    def expect_failure(self, msg: str) -> NoReturn:
        """Raise with the caller's message.

        Raises:
            UnwrapError: Always, with msg as the message.
        """
        _unwrap_failed("expect_failure", msg, State.ABSENT)

    def unwrap_failure_unchecked(self) -> None:
        """Contract violation: the caller promised this is Failure."""
        return _unchecked_violation("unwrap_failure_unchecked", State.ABSENT)

    def unwrap_as_option(self) -> NothingType:
        """Return Nothing."""
        return Nothing

    def expect_as_option(self, _msg: str) -> NothingType:
        """Return Nothing, ignoring the message."""
        return Nothing

    def unwrap_as_option_unchecked(self) -> NothingType:
        """Return Nothing."""
        return Nothing

    def unwrap_as_option_or[T](self, _default: T) -> NothingType:
        """Return Nothing; the default only replaces a Failure."""
        return Nothing

    def unwrap_as_option_or_default[T](self, _default_factory: Callable[[], T]) -> NothingType:
        """Return Nothing; the default only replaces a Failure."""
        return Nothing

    def unwrap_as_option_or_nothing(self) -> NothingType:
        """Return Nothing."""
        return Nothing


Absent: AbsentType = AbsentType()
"""Singleton instance representing a successful outcome with no data."""


class Failure[E](_Variant, frozen=True, gc=False):
    """Failure variant of ResultOption: the operation failed.

    Every strict unwrap that meets a Failure raises UnwrapError whose
    message embeds repr(error).

    Examples:
        >>> failed = Failure("boom")
        >>> failed.unwrap_failure()
        'boom'
        >>> failed.unwrap_or(0)
        0
        >>> failed.unwrap_as_option_or_nothing()
        Nothing
    """

    error: E

    state = State.FAILURE

    def _payload(self) -> tuple[Any, ...]:
        return (self.error,)

    def is_value(self) -> TypeIs[Value[object]]:
        """Return False since this is Failure."""
        return False

    def is_absent(self) -> TypeIs[AbsentType]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[E]]:
        """Return True since this is Failure."""
        return True

    def is_value_and(self, _pred: Callable[[object], bool]) -> bool:
        """Return False without calling pred since this is Failure."""
        return False

    def is_failure_and(self, pred: Callable[[E], bool]) -> bool:
        """Return the result of applying pred to the error."""
        return pred(self.error)

    def to_value_option(self) -> NothingType:
        """Convert to Option, returning Nothing; the error is dropped."""
        return Nothing

    def to_failure_option(self) -> Some[E]:
        """Convert to Option, returning Some(error)."""
        return Some(self.error)

    def to_result(self) -> Err[E]:
        """Convert to a Result of Option, returning Err(error)."""
        return Err(self.error)

    def as_ref(self) -> Failure[E]:
        """Return a view sharing this failure's error object."""
        return self

    def as_mut(self) -> Failure[E]:
        """Return a view sharing this failure's error object."""
        return self

    def map[T, U](self, _f: Callable[[T], U]) -> Failure[E]:
        """Return self unchanged since this is Failure."""
        return self

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        """Return the default since this is Failure."""
        return default

    def map_or_else[T, U](self, default: Callable[[], U], _f: Callable[[T], U]) -> U:
        """Compute and return the default since this is Failure."""
        return default()

    def map_or_default[T, U](self, _f: Callable[[T], U], default_factory: Callable[[], U]) -> U:
        """Return default_factory() since this is Failure."""
        return default_factory()

    def map_failure[F](self, f: Callable[[E], F]) -> Failure[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error.

        Returns:
            Failure containing the transformed error.
        """
        return Failure(f(self.error))

    def inspect[T](self, _f: Callable[[T], object]) -> Failure[E]:
        """Return self without calling f."""
        return self

    def inspect_failure(self, f: Callable[[E], object]) -> Failure[E]:
        """Call f with the contained error, then return self unchanged."""
        f(self.error)
        return self

    def unwrap(self) -> NoReturn:
        """Raise since this is Failure.

        Raises:
            UnwrapError: Always, with the error's repr in the message.
        """
        _unwrap_failed("unwrap", f"Called unwrap on Failure: {self.error!r}", State.FAILURE, self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message followed by the error's repr.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always.
        """
        _unwrap_failed("expect", f"{msg}: {self.error!r}", State.FAILURE, self.error)

    def unwrap_unchecked(self) -> None:
        """Contract violation: the caller promised this is Value."""
        return _unchecked_violation("unwrap_unchecked", State.FAILURE)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Failure."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Failure."""
        return f()

    def unwrap_or_default[T](self, default_factory: Callable[[], T]) -> T:
        """Return default_factory() since this is Failure."""
        return default_factory()

    def unwrap_failure(self) -> E:
        """Return the contained error."""
        return self.error

    def expect_failure(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def unwrap_failure_unchecked(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_as_option(self) -> NoReturn:
        """Raise since Failure cannot collapse into an Option.

        Raises:
            UnwrapError: Always, with the error's repr in the message.
        """
        _unwrap_failed(
            "unwrap_as_option",
            f"Called unwrap_as_option on Failure: {self.error!r}",
            State.FAILURE,
            self.error,
        )

    def expect_as_option(self, msg: str) -> NoReturn:
        """Raise with a custom message followed by the error's repr.

        Raises:
            UnwrapError: Always.
        """
        _unwrap_failed("expect_as_option", f"{msg}: {self.error!r}", State.FAILURE, self.error)

    def unwrap_as_option_unchecked(self) -> None:
        """Contract violation: the caller promised this is not Failure."""
        return _unchecked_violation("unwrap_as_option_unchecked", State.FAILURE)

    def unwrap_as_option_or[T](self, default: T) -> Some[T]:
        """Return Some(default) in place of the error."""
        return Some(default)

    def unwrap_as_option_or_default[T](self, default_factory: Callable[[], T]) -> Some[T]:
        """Return Some(default_factory()) in place of the error."""
        return Some(default_factory())

    def unwrap_as_option_or_nothing(self) -> NothingType:
        """Return Nothing, discarding the error."""
        return Nothing


type ResultOption[T, E = Exception] = Value[T] | AbsentType | Failure[E]

