"""@safe decorator for turning raising, None-returning functions into ResultOption."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from result_option._logging import log_event
from result_option.types.result_option import Absent, AbsentType, Failure, Value

__all__ = ["safe"]

P = ParamSpec("P")
T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@overload
def safe[**P, T](
    func: Callable[P, T | None],
) -> Callable[P, Value[T] | AbsentType | Failure[Exception]]: ...


@overload
def safe[E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, T | None]], Callable[P, Value[T] | AbsentType | Failure[E]]]: ...


@overload
def safe[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T | None]], Callable[P, Value[T] | AbsentType | Failure[E]]]: ...


def safe[**P, T](
    func: Callable[P, T | None] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator that maps a function's three outcomes onto ResultOption.

    A returned value becomes Value(value), a returned None becomes Absent,
    and a caught exception becomes Failure(exception). Exceptions outside
    `exceptions` propagate unchanged.

    Can be used with or without arguments:
        @safe
        def lookup(): ...

        @safe(exceptions=(KeyError, ValueError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns ResultOption[T, E] instead of T | None.

    Example:
        ```python
        @safe
        def find_port(config: dict[str, str]) -> int | None:
            raw = config.get("port")
            return None if raw is None else int(raw)

        find_port({"port": "8080"})
        # Value(value=8080)
        find_port({})
        # Absent
        find_port({"port": "http"})
        # Failure(error=ValueError("invalid literal for int() with base 10: 'http'"))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T | None],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Value[T] | AbsentType | Failure[Any]:
        try:
            result = wrapped(*args, **kwargs)
        except catch as e:
            log_event(
                __name__,
                "safe_caught_exception",
                function=getattr(wrapped, "__qualname__", repr(wrapped)),
                error_type=type(e).__name__,
            )
            return Failure(e)
        if result is None:
            return Absent
        return Value(result)

    if func is not None:
        return wrapper(func)
    return wrapper
