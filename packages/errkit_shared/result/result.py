"""Typed success/failure result model for fallible in-process calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Outcome of one fallible call: a payload or an error, never both."""

    payload: T | None = None
    error: E | None = None

    def __post_init__(self) -> None:
        if self.payload is not None and self.error is not None:
            raise ValueError("Result cannot carry both a payload and an error")

    @property
    def ok(self) -> bool:
        """Return True when no error is present."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the payload, raising the error when this result failed.

        Errors that are not exceptions are wrapped in ``ValueError``.
        """
        if self.error is None:
            return self.payload  # type: ignore[return-value]
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"called unwrap() on a failed result: {self.error!r}")

    def unwrap_error(self) -> E:
        """Return the error, raising ``ValueError`` when this result succeeded."""
        if self.error is None:
            raise ValueError("called unwrap_error() on a successful result")
        return self.error
