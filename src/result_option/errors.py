"""UnwrapError: raised when a strict unwrap meets the wrong variant."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from result_option.types.state import State

__all__ = ["UnwrapError"]


class UnwrapError(RuntimeError):
    """A strict unwrap was called on a variant it cannot unwrap.

    This signals a logic error in the caller, not a recoverable condition:
    code that may legitimately see Absent or Failure should use the
    unwrap_or* / map_or* / *_or_nothing combinators instead of catching this.

    Attributes:
        method: Name of the unwrapping method that was called.
        state: The variant that triggered the error.
        payload: The value or error held by that variant (None for Absent).
    """

    def __init__(self, message: str, *, method: str, state: State, payload: Any = None) -> None:
        self.method = method
        self.state = state
        self.payload = payload
        super().__init__(message)
