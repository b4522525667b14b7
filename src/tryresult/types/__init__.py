"""Core types: Result, Ok, Err and their constructors."""

from tryresult.types.result import Err, Ok, Result, err, ok

__all__ = [
    "Err",
    "Ok",
    "Result",
    "err",
    "ok",
]
