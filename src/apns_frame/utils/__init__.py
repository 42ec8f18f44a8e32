# -*- coding: utf-8 -*-
"""Utility modules."""

from apns_frame.utils.device_token import (
    DEVICE_TOKEN_LENGTH,
    device_token_bytes,
    mask_device_token,
    sanitize_device_token,
)
from apns_frame.utils.merge import deep_merge

__all__ = [
    "DEVICE_TOKEN_LENGTH",
    "deep_merge",
    "device_token_bytes",
    "mask_device_token",
    "sanitize_device_token",
]
