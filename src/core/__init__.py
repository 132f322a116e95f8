"""Core algebraic containers - Option and Outcome."""

from src.core.option import Nothing, Option, Some, none, some
from src.core.outcome import Err, Ok, Outcome, err, ok

__all__ = [
    "Option",
    "Some",
    "Nothing",
    "some",
    "none",
    "Outcome",
    "Ok",
    "Err",
    "ok",
    "err",
]
