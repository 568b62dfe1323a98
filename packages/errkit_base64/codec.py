"""Base64 codec boundary producing typed decode failures.

The standard library reports every malformed input as one untyped
``binascii.Error``. ``decode`` classifies the input first so callers receive
one of four typed failures, then delegates the byte decoding itself to
``base64.b64decode``.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass, fields
from typing import Any, TypeAlias

from packages.errkit_shared.config import ErrkitSettings
from packages.errkit_shared.result import Result, failure, success

_PAD = ord("=")
_STANDARD_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_URL_SAFE_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"


class DecodeError(ValueError):
    """Base type for typed base64 decode failures."""

    def __reduce__(self) -> tuple[type[DecodeError], tuple[Any, ...]]:
        # Rebuild from dataclass fields; ``args`` is empty for keyword-built failures.
        return (type(self), tuple(getattr(self, item.name) for item in fields(self)))


@dataclass(eq=False)
class InvalidByte(DecodeError):
    """A byte outside the alphabet, or data after padding, at ``offset``."""

    offset: int
    byte: int

    def __str__(self) -> str:
        return f"Invalid symbol {self.byte}, offset {self.offset}."


@dataclass(eq=False)
class InvalidLength(DecodeError):
    """The number of alphabet symbols cannot encode whole bytes."""

    length: int

    def __str__(self) -> str:
        return f"Invalid input length: {self.length}"


@dataclass(eq=False)
class InvalidLastSymbol(DecodeError):
    """The final symbol carries non-zero bits that decoding would discard."""

    offset: int
    byte: int

    def __str__(self) -> str:
        return f"Invalid last symbol {self.byte}, offset {self.offset}."


@dataclass(eq=False)
class InvalidPadding(DecodeError):
    """Padding is missing, superfluous or present where it is not allowed."""

    def __str__(self) -> str:
        return "Invalid padding"


DecodeFailure: TypeAlias = InvalidByte | InvalidLength | InvalidLastSymbol | InvalidPadding


@dataclass(frozen=True)
class Engine:
    """Alphabet and padding policy used for encoding and decoding."""

    name: str
    alphabet: bytes
    pad: bool

    @property
    def altchars(self) -> bytes:
        return self.alphabet[-2:]


STANDARD = Engine(name="standard", alphabet=_STANDARD_ALPHABET, pad=True)
STANDARD_NO_PAD = Engine(name="standard_no_pad", alphabet=_STANDARD_ALPHABET, pad=False)
URL_SAFE = Engine(name="url_safe", alphabet=_URL_SAFE_ALPHABET, pad=True)
URL_SAFE_NO_PAD = Engine(name="url_safe_no_pad", alphabet=_URL_SAFE_ALPHABET, pad=False)

_ENGINES = {engine.name: engine for engine in (STANDARD, STANDARD_NO_PAD, URL_SAFE, URL_SAFE_NO_PAD)}


def engine_for(name: str) -> Engine:
    """Return the engine registered under ``name``."""
    try:
        return _ENGINES[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown base64 engine {name!r}; expected one of {sorted(_ENGINES)}"
        ) from None


def engine_from_settings(settings: ErrkitSettings) -> Engine:
    """Return the engine configured under ``base64.engine``."""
    return engine_for(settings.base64.engine)


def encode(data: bytes | bytearray | memoryview, engine: Engine = STANDARD) -> str:
    """Encode bytes into base64 text using ``engine``."""
    encoded = base64.b64encode(bytes(data), altchars=engine.altchars).decode("ascii")
    if engine.pad:
        return encoded
    return encoded.rstrip("=")


def decode(text: str | bytes, engine: Engine = STANDARD) -> Result[bytes, DecodeFailure]:
    """Decode base64 text, returning the bytes or one typed failure."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    problem = _classify(data, engine)
    if problem is not None:
        return failure(problem)

    symbols = data.rstrip(b"=")
    padded = symbols + b"=" * (-len(symbols) % 4)
    try:
        return success(base64.b64decode(padded, altchars=engine.altchars, validate=True))
    except binascii.Error as exc:
        raise RuntimeError(f"base64 input passed classification but failed to decode: {exc}") from exc


def decode_or_raise(text: str | bytes, engine: Engine = STANDARD) -> bytes:
    """Decode base64 text, raising the typed failure on malformed input."""
    return decode(text, engine).unwrap()


def _classify(data: bytes, engine: Engine) -> DecodeFailure | None:
    """Return the first structural problem in ``data``, if any."""
    padding_start = data.find(b"=")
    if padding_start < 0:
        padding_start = len(data)

    for offset in range(padding_start):
        if data[offset] not in engine.alphabet:
            return InvalidByte(offset=offset, byte=data[offset])
    for offset in range(padding_start, len(data)):
        if data[offset] != _PAD:
            return InvalidByte(offset=offset, byte=data[offset])

    symbol_count = padding_start
    padding_count = len(data) - padding_start
    remainder = symbol_count % 4
    if remainder == 1:
        return InvalidLength(length=symbol_count)

    expected_padding = (4 - remainder) % 4 if engine.pad else 0
    if padding_count != expected_padding:
        return InvalidPadding()

    if remainder:
        # 2 trailing symbols keep 4 unused bits, 3 keep 2.
        unused_bits = 4 if remainder == 2 else 2
        last_offset = symbol_count - 1
        value = engine.alphabet.index(data[last_offset])
        if value & ((1 << unused_bits) - 1):
            return InvalidLastSymbol(offset=last_offset, byte=data[last_offset])

    return None
