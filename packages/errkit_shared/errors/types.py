"""Canonical structured error type for errkit packages.

This module defines the transport-agnostic error shape produced by every
adapter: one kind, one human-readable message and a key-sorted details
mapping carrying caller-supplied diagnostic context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .kinds import ErrorKind


@dataclass(eq=False)
class Error(Exception):
    """Structured error object returned in results or raised to callers.

    Instances keep identity equality and hashing like any other exception.
    Compare ``to_dict()`` output when checking two errors for equivalence.
    """

    kind: ErrorKind
    message: str = ""
    details: Mapping[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message

    def __reduce__(self) -> tuple[type[Error], tuple[ErrorKind, str, dict[str, Any]]]:
        # Fields are keyword-built, so BaseException's args-based reduce loses them.
        return (type(self), (self.kind, self.message, dict(self.details)))

    @property
    def message_id(self) -> str:
        """Return the stable identifier of this error's kind."""
        return self.kind.message_id

    @property
    def status(self) -> int:
        """Return the HTTP-style status of this error's kind."""
        return self.kind.status

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping suitable for API responses and logs."""
        return {
            "message_id": self.kind.message_id,
            "status": self.kind.status,
            "description": self.kind.description,
            "message": self.message,
            "details": dict(self.details),
        }


def sorted_details(details: Mapping[Any, Any] | None) -> dict[str, Any]:
    """Normalize optional details into a plain dict ordered by key."""
    if details is None:
        return {}
    return {str(key): details[key] for key in sorted(details, key=str)}
