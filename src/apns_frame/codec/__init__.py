"""Binary frame codec."""

from apns_frame.codec.frame import (
    FRAME_COMMAND,
    HEADER_SIZE,
    DecodedFrame,
    pack_frame,
    unpack_frame,
)

__all__ = [
    "FRAME_COMMAND",
    "HEADER_SIZE",
    "DecodedFrame",
    "pack_frame",
    "unpack_frame",
]
