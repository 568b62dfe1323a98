"""Conversion of base64 decode failures into structured errors."""

from __future__ import annotations

import logging
from typing import Any, Mapping, TypeVar, assert_never

from packages.errkit_shared import errors as shared_errors
from packages.errkit_shared.errors import Error, ErrorVariant
from packages.errkit_shared.logging import error_context, fields, get_logger, log_context
from packages.errkit_shared.result import Result

from .codec import DecodeFailure, InvalidByte, InvalidLastSymbol, InvalidLength, InvalidPadding
from .variants import (
    InvalidByteError,
    InvalidLastSymbolError,
    InvalidLengthError,
    InvalidPaddingError,
)

_LOGGER = get_logger(__name__)

T = TypeVar("T")


def convert(
    failure: DecodeFailure,
    message: str | None = None,
    details: Mapping[str, Any] | None = None,
) -> Error:
    """Return the structured error for one decode failure.

    A missing ``message`` defaults to ``str(failure)``; an explicit message,
    empty string included, is used verbatim.
    """
    text = str(failure) if message is None else message
    variant = _variant_for(failure)
    error = variant.with_message(text).with_details(details or {}).into_error()

    if _LOGGER.isEnabledFor(logging.DEBUG):
        context = error_context(error, variant=type(variant).__name__)
        context[fields.FAILURE] = repr(failure)
        with log_context(context):
            _LOGGER.debug("Converted base64 decode failure")
    return error


def _variant_for(failure: DecodeFailure) -> ErrorVariant:
    match failure:
        case InvalidByte():
            return InvalidByteError.new()
        case InvalidLength():
            return InvalidLengthError.new()
        case InvalidLastSymbol():
            return InvalidLastSymbolError.new()
        case InvalidPadding():
            return InvalidPaddingError.new()
        case _:
            assert_never(failure)


class Base64DecodeErrorConverter:
    """``ErrorConverter`` implementation for base64 decode failures."""

    @staticmethod
    def convert_error(
        error: DecodeFailure,
        message: str | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> Error:
        """Return the structured error for one decode failure."""
        return convert(error, message, details)


def convert_result(
    result: Result[T, DecodeFailure],
    details: Mapping[str, Any] | str | None = None,
    message: str | None = None,
) -> Result[T, Error]:
    """Pass successes through and convert a failed decode into ``Error``.

    Supported call shapes::

        convert_result(result, details, "Failed to decode token")
        convert_result(result, "Failed to decode token")
        convert_result(result)

    A string in the second position is the message, with empty details.
    """
    if isinstance(details, str):
        if message is not None:
            raise TypeError("convert_result() got a message both positionally and by keyword")
        details, message = None, details
    return shared_errors.convert_result(
        result,
        Base64DecodeErrorConverter(),
        message=message,
        details=details,
    )
