"""Capture adapters: run raising code and get a Result back instead.

try_fn() and try_async() are the bridge from exception-based code into
Result-based code. Whatever the wrapped computation raises comes back as an
Err; nothing escapes past the adapter except BaseExceptions that are not
Exceptions (KeyboardInterrupt, SystemExit, cancellation), which are left to
the caller.

Example:
    ```python
    import json

    from tryresult import try_fn

    try_fn(lambda: json.loads('{"name": "John"}'))
    # Ok(value={'name': 'John'})
    try_fn(lambda: json.loads("{invalid}"))
    # Err(error=JSONDecodeError(...))
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from tryresult._config import get_config
from tryresult._logging import get_logger
from tryresult.errors import CapturedError
from tryresult.types.result import Err, Ok

__all__ = ["as_error", "try_async", "try_fn"]

logger = get_logger(__name__)

DEFAULT_CATCH: tuple[type[BaseException], ...] = (Exception,)


def as_error(value: object) -> Exception:
    """Normalize a raised value into an Exception.

    Exceptions are returned unchanged. Anything else is wrapped in a
    CapturedError whose message is str(value). Only CapturedError has a
    `.message` attribute; str(error) gives the message of every payload
    this returns.

    Examples:
        >>> exc = ValueError("bad")
        >>> as_error(exc) is exc
        True
        >>> as_error(404)
        CapturedError('404')
    """
    if isinstance(value, Exception):
        return value
    return CapturedError(value)


def _captured(adapter: str, error: BaseException) -> Err[Exception]:
    if get_config().log_captures and logger.isEnabledFor(logging.DEBUG):
        logger.debug("captured exception", adapter=adapter, exc_type=type(error).__name__)
    return Err(as_error(error))


def capture[T](
    adapter: str,
    catch: tuple[type[BaseException], ...],
    fn: Callable[..., T],
    *args: Any,
    **kwargs: Any,
) -> Ok[T] | Err[Exception]:
    """Call fn(*args, **kwargs), turning exceptions listed in catch into Err.

    Exception types outside catch propagate unchanged.

    Args:
        adapter: Name reported in the debug event for a captured exception.
        catch: Exception types to capture.
        fn: The computation to run.
    """
    try:
        value = fn(*args, **kwargs)
    except catch as e:
        return _captured(adapter, e)
    return Ok(value)


async def capture_async[T](
    adapter: str,
    catch: tuple[type[BaseException], ...],
    fn: Callable[..., Awaitable[T]],
    *args: Any,
    **kwargs: Any,
) -> Ok[T] | Err[Exception]:
    """Async counterpart of capture(): awaits fn(*args, **kwargs)."""
    try:
        value = await fn(*args, **kwargs)
    except catch as e:
        return _captured(adapter, e)
    return Ok(value)


def try_fn[T](fn: Callable[[], T]) -> Ok[T] | Err[Exception]:
    """Call fn now and capture its outcome as a Result.

    Args:
        fn: Zero-argument computation that may raise.

    Returns:
        Ok(return value), or Err(exception) if fn raised. The exception is
        stored as-is, so use str(result.error) for its message.
    """
    return capture("try_fn", DEFAULT_CATCH, fn)


async def try_async[T](fn: Callable[[], Awaitable[T]]) -> Ok[T] | Err[Exception]:
    """Await fn() and capture its outcome as a Result.

    The only suspension point is awaiting fn(); no timeout or cancellation
    handling is added.

    Args:
        fn: Zero-argument callable returning an awaitable that may raise.

    Returns:
        Ok(resolved value), or Err(exception) if fn or its awaitable raised.

    Example:
        ```python
        async def fetch() -> dict:
            raise RuntimeError("HTTP error: 404")

        result = await try_async(fetch)
        str(result.error)
        # 'HTTP error: 404'
        ```
    """
    return await capture_async("try_async", DEFAULT_CATCH, fn)
