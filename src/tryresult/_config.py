"""Package configuration: ResultConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from tryresult._logging import configure_logging

__all__ = [
    "ResultConfig",
    "get_config",
    "init",
]

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class ResultConfig:
    """Configuration for tryresult.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Emit JSON logs when True, console logs otherwise.
        log_captures: Emit a debug event whenever a capture adapter turns an
            exception into an Err.
    """

    log_level: str | None = None
    json_output: bool = True
    log_captures: bool = True


# Global configuration (set by init())
_config: ResultConfig | None = None


def _detect_log_level() -> str | None:
    """Read TRYRESULT_LOG_LEVEL, returning None when unset or empty."""
    level = os.environ.get("TRYRESULT_LOG_LEVEL", "").strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read TRYRESULT_LOG_FORMAT ("json" or "console").

    Defaults to JSON output.
    """
    fmt = os.environ.get("TRYRESULT_LOG_FORMAT", "").lower()
    if fmt == "console":
        return False
    if fmt and fmt != "json":
        logging.warning("Unknown TRYRESULT_LOG_FORMAT value '%s', defaulting to json", fmt)
    return True


def _detect_log_captures() -> bool:
    """Read TRYRESULT_LOG_CAPTURES; 0/false/no/off disable capture events."""
    value = os.environ.get("TRYRESULT_LOG_CAPTURES", "").strip().lower()
    return value not in _FALSE_VALUES


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    log_captures: bool | None = None,
) -> ResultConfig:
    """Initialize tryresult with the given configuration.

    Unspecified values are read from the environment.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: JSON (True) or console (False) log rendering.
        log_captures: Whether capture adapters log captured exceptions.

    Returns:
        The ResultConfig that was set.

    Example:
        ```python
        import tryresult

        # Read everything from the environment
        tryresult.init()

        # Explicit configuration
        tryresult.init("DEBUG", json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = ResultConfig(
        log_level=log_level if log_level is not None else _detect_log_level(),
        json_output=json_output if json_output is not None else _detect_json_output(),
        log_captures=log_captures if log_captures is not None else _detect_log_captures(),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> ResultConfig:
    """Get the current configuration.

    Returns:
        The ResultConfig set by init(), or the defaults if init() was never called.
    """
    if _config is None:
        return ResultConfig()
    return _config


def _reset() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
