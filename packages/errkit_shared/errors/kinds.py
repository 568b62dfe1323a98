"""Error kind primitives and static kind registries.

A kind is the category metadata shared by every error of one family: a stable
machine-readable ``message_id``, an HTTP-style ``status`` and a short
``description``. Packages declare their kinds once at import time with
``define_kinds`` and never mutate them afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class ErrorKind:
    """Immutable category metadata shared by all errors of one kind."""

    name: str
    message_id: str
    status: int
    description: str

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping suitable for JSON serialization."""
        return {
            "name": self.name,
            "message_id": self.message_id,
            "status": self.status,
            "description": self.description,
        }


def define_kinds(**entries: tuple[str, int, str]) -> Mapping[str, ErrorKind]:
    """Build a read-only kind registry from ``name=(message_id, status, description)``.

    Registries are definition-time constants, so malformed entries raise
    immediately instead of surfacing later at conversion time.
    """
    kinds: dict[str, ErrorKind] = {}
    seen_ids: dict[str, str] = {}
    for name, entry in entries.items():
        message_id, status, description = entry
        if not message_id:
            raise ValueError(f"kind {name} must declare a non-empty message_id")
        if message_id in seen_ids:
            raise ValueError(
                f"kind {name} reuses message_id {message_id} from {seen_ids[message_id]}"
            )
        seen_ids[message_id] = name
        kinds[name] = ErrorKind(
            name=name,
            message_id=message_id,
            status=int(status),
            description=description,
        )
    return MappingProxyType(kinds)
