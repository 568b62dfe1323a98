"""Public API for structured base64 codec errors."""

from .codec import (
    STANDARD,
    STANDARD_NO_PAD,
    URL_SAFE,
    URL_SAFE_NO_PAD,
    DecodeError,
    DecodeFailure,
    Engine,
    InvalidByte,
    InvalidLastSymbol,
    InvalidLength,
    InvalidPadding,
    decode,
    decode_or_raise,
    encode,
    engine_for,
    engine_from_settings,
)
from .converter import Base64DecodeErrorConverter, convert, convert_result
from .kinds import BASE64_DECODE, BASE64_ENCODE, KINDS, get_kind
from .variants import (
    InvalidByteError,
    InvalidLastSymbolError,
    InvalidLengthError,
    InvalidPaddingError,
)

__all__ = [
    "BASE64_DECODE",
    "BASE64_ENCODE",
    "Base64DecodeErrorConverter",
    "DecodeError",
    "DecodeFailure",
    "Engine",
    "InvalidByte",
    "InvalidByteError",
    "InvalidLastSymbol",
    "InvalidLastSymbolError",
    "InvalidLength",
    "InvalidLengthError",
    "InvalidPadding",
    "InvalidPaddingError",
    "KINDS",
    "STANDARD",
    "STANDARD_NO_PAD",
    "URL_SAFE",
    "URL_SAFE_NO_PAD",
    "convert",
    "convert_result",
    "decode",
    "decode_or_raise",
    "encode",
    "engine_for",
    "engine_from_settings",
    "get_kind",
]
