"""Decorators: @safe and its async variant."""

from tryresult.decorators.safe import safe, safe_async

__all__ = [
    "safe",
    "safe_async",
]
