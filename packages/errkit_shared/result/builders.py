"""Convenience constructors for typed results."""

from __future__ import annotations

from typing import Any, TypeVar

from .result import Result

T = TypeVar("T")
E = TypeVar("E")


def success(payload: T) -> Result[T, Any]:
    """Build a successful result carrying ``payload``."""
    return Result(payload=payload, error=None)


def failure(error: E) -> Result[Any, E]:
    """Build a failed result carrying ``error``."""
    if error is None:
        raise ValueError("failure() requires an error value")
    return Result(payload=None, error=error)
