# assetledger/core/encoding.py
import base64

import base58

from assetledger.core.errors import KeyDecodingError


def b64url_encode(data: bytes) -> str:
    """Encode bytes to base64url (no padding, URL-safe)."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(s: str) -> bytes:
    """Decode base64url string back to bytes."""
    # Restore padding
    padding = len(s) % 4
    if padding:
        s += "=" * (4 - padding)
    return base64.urlsafe_b64decode(s)


def b58_encode(data: bytes) -> str:
    """Encode raw key bytes to the base58 text form used on the wire."""
    return base58.b58encode(data).decode("ascii")


def b58_decode(s: str, expected_lengths=None, key_kind: str = "key") -> bytes:
    """
    Decode a base58 key string to raw bytes.
    Raises KeyDecodingError if the text is not base58 or the length is not one of `expected_lengths`.
    """
    if not isinstance(s, str) or not s:
        raise KeyDecodingError(f"{key_kind} must be a non-empty base58 string, got {s!r}", key_kind)
    try:
        raw = base58.b58decode(s)
    except ValueError as e:
        raise KeyDecodingError(f"{key_kind} is not valid base58: {e}", key_kind) from e

    if expected_lengths is not None and len(raw) not in expected_lengths:
        allowed = " or ".join(str(n) for n in expected_lengths)
        raise KeyDecodingError(f"{key_kind} must decode to {allowed} bytes, got {len(raw)}", key_kind)
    return raw
