"""Tests for shared error kinds and structured error shape."""

from __future__ import annotations

import pytest

from packages.errkit_shared.errors import Error, ErrorKind, define_kinds, sorted_details


def _kinds():
    """Return a small registry used across kind tests."""
    return define_kinds(
        WidgetDecode=("Widget-00001", 400, "Widget decode error"),
        WidgetStore=("Widget-00002", 503, "Widget store unavailable"),
    )


def test_define_kinds_builds_kinds_addressable_by_name() -> None:
    """define_kinds should expose one ErrorKind per keyword name."""
    kinds = _kinds()

    assert list(kinds) == ["WidgetDecode", "WidgetStore"]
    assert kinds["WidgetDecode"] == ErrorKind(
        name="WidgetDecode",
        message_id="Widget-00001",
        status=400,
        description="Widget decode error",
    )
    assert kinds["WidgetStore"].status == 503


def test_define_kinds_returns_read_only_registry() -> None:
    """Kind registries should reject mutation after definition."""
    kinds = _kinds()

    with pytest.raises(TypeError):
        kinds["WidgetOther"] = kinds["WidgetDecode"]  # type: ignore[index]


def test_error_kind_is_immutable() -> None:
    """Kinds are shared constants and must not be mutated in place."""
    kind = _kinds()["WidgetDecode"]

    with pytest.raises(AttributeError):
        kind.status = 500  # type: ignore[misc]


def test_define_kinds_rejects_duplicate_message_ids() -> None:
    """Two kinds sharing one message id should fail at definition time."""
    with pytest.raises(ValueError, match="reuses message_id Widget-00001"):
        define_kinds(
            WidgetDecode=("Widget-00001", 400, "Widget decode error"),
            WidgetEncode=("Widget-00001", 400, "Widget encode error"),
        )


def test_define_kinds_rejects_empty_message_id() -> None:
    """Kinds without an identifier cannot be classified by callers."""
    with pytest.raises(ValueError, match="non-empty message_id"):
        define_kinds(WidgetDecode=("", 400, "Widget decode error"))


def test_error_exposes_kind_fields_and_serializes() -> None:
    """Error should surface kind metadata and render a plain dict."""
    error = Error(
        kind=_kinds()["WidgetDecode"],
        message="widget payload was truncated",
        details={"widget_id": "w-1", "attempt": 2},
    )

    assert error.message_id == "Widget-00001"
    assert error.status == 400
    assert str(error) == "widget payload was truncated"
    assert error.to_dict() == {
        "message_id": "Widget-00001",
        "status": 400,
        "description": "Widget decode error",
        "message": "widget payload was truncated",
        "details": {"widget_id": "w-1", "attempt": 2},
    }


def test_error_can_be_raised_and_caught() -> None:
    """Error is an exception so callers can propagate it with raise."""
    kind = _kinds()["WidgetStore"]

    with pytest.raises(Error) as exc_info:
        raise Error(kind=kind, message="store down")

    assert exc_info.value.kind is kind
    assert exc_info.value.details == {}


def test_sorted_details_orders_keys_and_handles_none() -> None:
    """sorted_details should emit a key-sorted plain dict."""
    assert sorted_details(None) == {}
    assert list(sorted_details({"zeta": 1, "alpha": {"nested": True}, "mid": [1]})) == [
        "alpha",
        "mid",
        "zeta",
    ]
