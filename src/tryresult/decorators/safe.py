"""@safe and @safe_async: decorator forms of try_fn() and try_async()."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from tryresult.capture import DEFAULT_CATCH, capture, capture_async
from tryresult.types.result import Err, Ok

__all__ = ["safe", "safe_async"]


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[Exception]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Make a function return Ok(value) or Err(exception) instead of raising.

    Bare `@safe` captures any Exception, like try_fn(). With
    `@safe(exceptions=(...))` only the listed types are captured and the
    rest propagate; listed BaseExceptions that are not Exceptions come back
    as CapturedError.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 0)
        # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else DEFAULT_CATCH

    @wrapt.decorator
    def wrapper(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        return capture("safe", catch, wrapped, *args, **kwargs)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Ok[T] | Err[Exception]]]: ...


@overload
def safe_async[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Ok[T] | Err[Exception]]]]: ...


def safe_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async counterpart of safe(); the wrapped coroutine resolves to a Result."""
    catch = exceptions if exceptions is not None else DEFAULT_CATCH

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> Any:
        return await capture_async("safe_async", catch, wrapped, *args, **kwargs)

    if func is not None:
        return wrapper(func)
    return wrapper
