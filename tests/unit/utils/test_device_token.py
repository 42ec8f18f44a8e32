# -*- coding: utf-8 -*-
"""Unit tests for device token helpers."""

from __future__ import annotations

import pytest

from apns_frame.exceptions import InvalidDeviceTokenError
from apns_frame.utils.device_token import (
    DEVICE_TOKEN_LENGTH,
    device_token_bytes,
    mask_device_token,
    sanitize_device_token,
)


def test_sanitize_removes_all_whitespace() -> None:
    assert sanitize_device_token(" ab cd\tef\n01 ") == "abcdef01"


def test_sanitize_returns_none_for_missing_token() -> None:
    assert sanitize_device_token(None) is None


def test_device_token_bytes_decodes_64_hex_chars(device_token: str) -> None:
    packed = device_token_bytes(device_token)

    assert len(packed) == DEVICE_TOKEN_LENGTH
    assert packed == bytes.fromhex(device_token)


def test_device_token_bytes_accepts_uppercase_and_spaces(device_token: str) -> None:
    spaced = " ".join(device_token.upper()[i : i + 8] for i in range(0, 64, 8))

    assert device_token_bytes(spaced) == bytes.fromhex(device_token)


def test_device_token_bytes_zero_fills_short_tokens() -> None:
    assert device_token_bytes("abcd") == b"\xab\xcd" + b"\x00" * 30


def test_device_token_bytes_pads_odd_length_with_zero_nibble() -> None:
    assert device_token_bytes("abc")[:2] == b"\xab\xc0"


def test_device_token_bytes_truncates_long_tokens(device_token: str) -> None:
    assert device_token_bytes(device_token + "ffff") == bytes.fromhex(device_token)


def test_device_token_bytes_for_missing_token_is_zero_filled() -> None:
    assert device_token_bytes(None) == b"\x00" * DEVICE_TOKEN_LENGTH
    assert device_token_bytes("") == b"\x00" * DEVICE_TOKEN_LENGTH


def test_device_token_bytes_rejects_non_hex() -> None:
    with pytest.raises(InvalidDeviceTokenError) as exc_info:
        device_token_bytes("zz" * 32)

    assert exc_info.value.token == "zz" * 32


def test_mask_device_token_keeps_prefix_and_suffix(device_token: str) -> None:
    assert mask_device_token(device_token) == "740f4707...78ad"


def test_mask_device_token_hides_short_or_missing_tokens() -> None:
    assert mask_device_token(None) == "***"
    assert mask_device_token("abcd") == "***"


def test_mask_device_token_leaves_masked_values_unchanged(device_token: str) -> None:
    masked = mask_device_token(device_token)

    assert mask_device_token(masked) == masked
