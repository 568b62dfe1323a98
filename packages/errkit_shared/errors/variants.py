"""Builder base for typed error variants bound to one error kind."""

from __future__ import annotations

from typing import Any, ClassVar, Mapping

from .kinds import ErrorKind
from .types import Error, sorted_details


class ErrorVariant:
    """Mutable error builder converted into ``Error`` at package boundaries.

    Subclasses bind exactly one kind through the ``kind`` class attribute::

        class InvalidThingError(ErrorVariant):
            kind = KINDS["ThingDecode"]
    """

    kind: ClassVar[ErrorKind]

    def __init__(self) -> None:
        if getattr(type(self), "kind", None) is None:
            raise TypeError(f"{type(self).__name__} is not bound to an error kind")
        self.message = ""
        self.details: dict[str, Any] = {}

    @classmethod
    def new(cls) -> ErrorVariant:
        """Return a default instance with empty message and details."""
        return cls()

    def with_message(self, message: str) -> ErrorVariant:
        """Replace the message and return this instance."""
        self.message = message
        return self

    def with_details(self, details: Mapping[str, Any]) -> ErrorVariant:
        """Replace the details wholesale and return this instance."""
        self.details = dict(details)
        return self

    def into_error(self) -> Error:
        """Convert this builder into the shared structured error."""
        return Error(
            kind=self.kind,
            message=self.message,
            details=sorted_details(self.details),
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.name!r}, "
            f"message={self.message!r}, details={self.details!r})"
        )
