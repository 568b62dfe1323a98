"""Logging context bound per thread/task through ``contextvars``.

Converted errors describe themselves through ``error_context`` so every
adapter logs the same ``message_id``/``status``/``error_variant`` keys.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping

from packages.errkit_shared.errors import Error

from . import fields

_CONTEXT: ContextVar[dict[str, str]] = ContextVar("errkit_log_context", default={})


def get_context() -> dict[str, str]:
    """Return a copy of the fields bound in the current context."""
    return dict(_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind stringified values into the current context; ``None`` is skipped."""
    updates = {key: str(value) for key, value in values.items() if value is not None}
    if updates:
        _CONTEXT.set({**_CONTEXT.get(), **updates})


def clear_context(*keys: str) -> None:
    """Clear selected keys, or every key when none are given."""
    if not keys:
        _CONTEXT.set({})
        return
    _CONTEXT.set({key: value for key, value in _CONTEXT.get().items() if key not in keys})


@contextmanager
def log_context(values: Mapping[str, object] | None = None, **extra: object) -> Iterator[None]:
    """Bind ``values`` and ``extra`` for the duration of a with-block."""
    token = _CONTEXT.set(dict(_CONTEXT.get()))
    try:
        bind_context(**dict(values or {}), **extra)
        yield
    finally:
        _CONTEXT.reset(token)


def error_context(error: Error, *, variant: str | None = None) -> dict[str, object]:
    """Return the canonical logging fields describing one structured error."""
    context: dict[str, object] = {
        fields.MESSAGE_ID: error.message_id,
        fields.STATUS: error.status,
        fields.ERROR_VARIANT: variant,
    }
    if error.details:
        context[fields.DETAIL_KEYS] = ",".join(error.details)
    return context
