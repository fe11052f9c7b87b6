"""Library configuration: Config, init, and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from result_option._logging import configure_logging

__all__ = [
    "Config",
    "get_config",
    "init",
]

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class Config:
    """Configuration for result-option.

    Attributes:
        check_unchecked: Verify the variant in the *_unchecked family and raise
            AssertionError on misuse. Defaults to __debug__, so the check
            disappears under ``python -O``.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs when logging is configured, else console output.
    """

    check_unchecked: bool = __debug__
    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init() or lazily by get_config())
_config: Config | None = None


def _detect_check_unchecked() -> bool:
    """Read RESULT_OPTION_CHECK_UNCHECKED, falling back to __debug__."""
    raw = os.environ.get("RESULT_OPTION_CHECK_UNCHECKED", "").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    if raw:
        logging.warning(
            "Unknown RESULT_OPTION_CHECK_UNCHECKED value '%s', defaulting to %s", raw, __debug__
        )
    return __debug__


def _detect_log_level() -> str | None:
    """Read RESULT_OPTION_LOG_LEVEL. Empty or unset means silent."""
    raw = os.environ.get("RESULT_OPTION_LOG_LEVEL", "").strip()
    return raw.upper() or None


def init(
    check_unchecked: bool | None = None,
    log_level: str | None = None,
    *,
    json_logs: bool = True,
) -> Config:
    """Initialize result-option with the given configuration.

    Arguments left as None are resolved from the environment.

    Args:
        check_unchecked: Verify the *_unchecked family. Detected if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). Detected if None;
            still None after detection means silent.
        json_logs: JSON output when logging is configured.

    Returns:
        The Config that was set.

    Example:
        ```python
        import result_option

        result_option.init(log_level="DEBUG", json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_check = _detect_check_unchecked() if check_unchecked is None else check_unchecked
    resolved_level = _detect_log_level() if log_level is None else log_level.upper()

    _config = Config(
        check_unchecked=resolved_check,
        log_level=resolved_level,
        json_logs=json_logs,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    return _config


def get_config() -> Config:
    """Get the current configuration, initializing from the environment on first use."""
    if _config is None:
        return init()
    return _config
