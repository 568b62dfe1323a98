"""Converter contract and result-wrapping helper for upstream failures."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, TypeVar

from packages.errkit_shared.result import Result, failure

from .types import Error

T = TypeVar("T")
F_contra = TypeVar("F_contra", contravariant=True)


class ErrorConverter(Protocol[F_contra]):
    """Contract for adapters that turn one upstream failure type into ``Error``."""

    def convert_error(
        self,
        error: F_contra,
        message: str | None,
        details: Mapping[str, Any],
    ) -> Error:
        """Return the structured error for one upstream failure."""


def convert_result(
    result: Result[T, Any],
    converter: ErrorConverter[Any],
    *,
    message: str | None = None,
    details: Mapping[str, Any] | None = None,
) -> Result[T, Error]:
    """Replace a failed result's error with its structured conversion.

    Successful results are returned unchanged and the converter is not called.
    """
    if result.ok:
        return result
    converted = converter.convert_error(
        result.error,
        message,
        details if details is not None else {},
    )
    return failure(converted)
