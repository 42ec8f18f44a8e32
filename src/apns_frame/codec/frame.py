# -*- coding: utf-8 -*-
"""Binary frame layout for the legacy push gateway protocol (command 1).

| Offset | Size | Field |
|--------|------|-------|
| 0      | 1    | command (1) |
| 1      | 4    | identifier |
| 5      | 4    | expiry (UNIX epoch) |
| 9      | 2    | token length (32) |
| 11     | 32   | device token |
| 43     | 2    | payload length |
| 45     | N    | payload |

All integers are big-endian.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from apns_frame.exceptions import FrameDecodingError, FrameEncodingError
from apns_frame.utils.device_token import DEVICE_TOKEN_LENGTH

FRAME_COMMAND = 1
HEADER_FORMAT = f"!BIIH{DEVICE_TOKEN_LENGTH}sH"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)

_UINT32_MAX = 0xFFFFFFFF
_UINT16_MAX = 0xFFFF


@dataclass(frozen=True, slots=True)
class DecodedFrame:
    """Fields read back from a packed frame."""

    command: int
    identifier: int
    expiry: int
    device_token: str
    """Lowercase hex of the 32 token bytes."""
    payload: bytes

    @property
    def frame_size(self) -> int:
        return HEADER_SIZE + len(self.payload)


def _check_range(field: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise FrameEncodingError(
            f"{field} must be between 0 and {maximum}, got {value}",
            field=field,
            value=value,
        )


def pack_frame(*, identifier: int, expiry: int, device_token: bytes, payload: bytes) -> bytes:
    """Pack header fields and payload into one frame.

    Args:
        identifier: Correlation id echoed back by the gateway on error.
        expiry: UNIX timestamp, 0 for no retry window.
        device_token: Raw token bytes; must be exactly 32 bytes.
        payload: Encoded payload, appended without padding or terminator.
    """
    _check_range("identifier", identifier, _UINT32_MAX)
    _check_range("expiry", expiry, _UINT32_MAX)
    _check_range("payload length", len(payload), _UINT16_MAX)
    if len(device_token) != DEVICE_TOKEN_LENGTH:
        raise FrameEncodingError(
            f"device token must be {DEVICE_TOKEN_LENGTH} bytes, got {len(device_token)}",
            field="device_token",
            value=device_token,
        )

    header = struct.pack(
        HEADER_FORMAT,
        FRAME_COMMAND,
        identifier,
        expiry,
        DEVICE_TOKEN_LENGTH,
        device_token,
        len(payload),
    )
    return header + payload


def unpack_frame(data: bytes) -> DecodedFrame:
    """Parse a single frame produced by pack_frame.

    Raises:
        FrameDecodingError: Buffer too short, wrong command, unexpected token
            length or trailing/missing payload bytes.
    """
    if len(data) < HEADER_SIZE:
        raise FrameDecodingError(f"frame needs at least {HEADER_SIZE} bytes, got {len(data)}")

    command, identifier, expiry, token_length, token, payload_length = struct.unpack_from(
        HEADER_FORMAT, data
    )
    if command != FRAME_COMMAND:
        raise FrameDecodingError(f"unsupported frame command {command}")
    if token_length != DEVICE_TOKEN_LENGTH:
        raise FrameDecodingError(f"unexpected device token length {token_length}")

    payload = data[HEADER_SIZE:]
    if len(payload) != payload_length:
        raise FrameDecodingError(
            f"payload length field is {payload_length}, frame carries {len(payload)} bytes"
        )

    return DecodedFrame(
        command=command,
        identifier=identifier,
        expiry=expiry,
        device_token=token.hex(),
        payload=bytes(payload),
    )
