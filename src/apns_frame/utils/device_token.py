"""Device token helpers: sanitizing, packing and masking."""

from __future__ import annotations

import string
from typing import Any

from apns_frame.exceptions import InvalidDeviceTokenError

DEVICE_TOKEN_LENGTH = 32
"""Bytes occupied by the token on the wire."""
DEVICE_TOKEN_HEX_LENGTH = DEVICE_TOKEN_LENGTH * 2

_HEX_DIGITS = frozenset(string.hexdigits)
_MASK_SEPARATOR = "..."


def sanitize_device_token(token: Any) -> str | None:
    """Return the token with all whitespace removed, or None when unset."""
    if token is None:
        return None
    return "".join(str(token).split())


def device_token_bytes(token: Any) -> bytes:
    """Pack a hex device token into its fixed 32-byte wire field.

    The token is read as a 64 character hex field: shorter tokens are
    zero-filled on the right, longer ones truncated. A missing token packs
    as 32 zero bytes.
    """
    sanitized = sanitize_device_token(token) or ""
    if not _HEX_DIGITS.issuperset(sanitized):
        raise InvalidDeviceTokenError(token=sanitized)
    hex_field = sanitized[:DEVICE_TOKEN_HEX_LENGTH].ljust(DEVICE_TOKEN_HEX_LENGTH, "0")
    return bytes.fromhex(hex_field)


def mask_device_token(token: str | None) -> str:
    """Return a masked device token for logging (e.g. abcd1234...ef01)."""
    sanitized = sanitize_device_token(token)
    if sanitized and _MASK_SEPARATOR in sanitized:
        return sanitized
    if not sanitized or len(sanitized) < 16:
        return "***"
    return f"{sanitized[:8]}{_MASK_SEPARATOR}{sanitized[-4:]}"
