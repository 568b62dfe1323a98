"""Public shared result API for errkit packages."""

from .builders import failure, success
from .result import Result

__all__ = [
    "Result",
    "failure",
    "success",
]
