"""Tests for the shared error variant builder."""

from __future__ import annotations

import pytest

from packages.errkit_shared.errors import Error, ErrorVariant, define_kinds

_KINDS = define_kinds(WidgetDecode=("Widget-00001", 400, "Widget decode error"))


class WidgetTruncatedError(ErrorVariant):
    kind = _KINDS["WidgetDecode"]


def test_new_builds_empty_variant_bound_to_kind() -> None:
    """new() should return a variant with empty message and details."""
    variant = WidgetTruncatedError.new()

    assert isinstance(variant, WidgetTruncatedError)
    assert variant.kind is _KINDS["WidgetDecode"]
    assert variant.message == ""
    assert variant.details == {}


def test_with_message_overwrites_and_returns_same_instance() -> None:
    """with_message should replace prior text and allow chaining."""
    variant = WidgetTruncatedError.new()

    returned = variant.with_message("first").with_message("")

    assert returned is variant
    assert variant.message == ""


def test_with_details_replaces_mapping_wholesale() -> None:
    """with_details should not merge keys from earlier calls."""
    source = {"b": 2}
    variant = WidgetTruncatedError.new().with_details({"a": 1}).with_details(source)
    source["c"] = 3

    assert variant.details == {"b": 2}


def test_into_error_carries_kind_message_and_sorted_details() -> None:
    """into_error should produce the shared Error with key-sorted details."""
    error = (
        WidgetTruncatedError.new()
        .with_message("widget payload was truncated")
        .with_details({"zeta": "z", "alpha": ["a"]})
        .into_error()
    )

    assert isinstance(error, Error)
    assert error.kind is _KINDS["WidgetDecode"]
    assert error.message == "widget payload was truncated"
    assert list(error.details.items()) == [("alpha", ["a"]), ("zeta", "z")]


def test_into_error_has_no_side_effects_on_variant() -> None:
    """Converting twice should yield equivalent, independent errors."""
    variant = WidgetTruncatedError.new().with_message("m").with_details({"k": "v"})

    first = variant.into_error()
    second = variant.into_error()

    assert first is not second
    assert first.to_dict() == second.to_dict()
    assert variant.details == {"k": "v"}


def test_unbound_variant_cannot_be_constructed() -> None:
    """The bare base class has no kind and must not be instantiated."""
    with pytest.raises(TypeError, match="not bound to an error kind"):
        ErrorVariant.new()
