"""Typed error variants, one per base64 decode failure shape."""

from __future__ import annotations

from packages.errkit_shared.errors import ErrorVariant

from .kinds import BASE64_DECODE


class InvalidByteError(ErrorVariant):
    """Input holds a byte outside the alphabet or data after padding."""

    kind = BASE64_DECODE


class InvalidLengthError(ErrorVariant):
    """Input symbol count cannot encode a whole number of bytes."""

    kind = BASE64_DECODE


class InvalidLastSymbolError(ErrorVariant):
    """Input ends with a symbol carrying non-zero discarded bits."""

    kind = BASE64_DECODE


class InvalidPaddingError(ErrorVariant):
    """Input padding is missing, superfluous or not allowed."""

    kind = BASE64_DECODE
