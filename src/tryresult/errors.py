"""Error types raised or produced by tryresult itself."""

from __future__ import annotations

__all__ = [
    "CapturedError",
    "UnwrapError",
]


class UnwrapError(RuntimeError):
    """Raised when unwrap() or expect() is called on an Err.

    Calling unwrap() asserts that failure was already ruled out, so reaching
    this is a programming error rather than a recoverable condition.

    Attributes:
        error: The payload held by the Err that was unwrapped.
    """

    def __init__(self, error: object, msg: str | None = None) -> None:
        self.error = error
        prefix = msg if msg is not None else "Called unwrap on Err"
        super().__init__(f"{prefix}: {error!r}")


class CapturedError(Exception):
    """Minimal structured error wrapping a raised value that is not an Exception.

    Attributes:
        message: Text form of the original value.
        value: The original value.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        self.message = str(value)
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"CapturedError({self.message!r})"
