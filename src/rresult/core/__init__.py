"""Result type, early return, and collection helpers."""

from .combine import collect_results, safe, sequence, traverse
from .display import display
from .propagate import early_return, propagate, propagating
from .result import Failure, Result, Success, failure, success

__all__ = [
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "propagate",
    "propagating",
    "early_return",
    "display",
    "sequence",
    "traverse",
    "collect_results",
    "safe",
]
