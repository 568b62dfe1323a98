"""Error kinds for base64 codec failures."""

from __future__ import annotations

from packages.errkit_shared.errors import ErrorKind, define_kinds

KINDS = define_kinds(
    Base64Decode=("Base64-00001", 400, "Base64 decode error"),
    Base64Encode=("Base64-00002", 400, "Base64 encode error"),
)

BASE64_DECODE = KINDS["Base64Decode"]
# Encoding bytes cannot fail; the kind is registered for taxonomy symmetry.
BASE64_ENCODE = KINDS["Base64Encode"]


def get_kind(name: str) -> ErrorKind:
    """Return the base64 error kind registered under ``name``."""
    return KINDS[name]
