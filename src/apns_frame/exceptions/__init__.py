"""Exceptions subpackage."""

from apns_frame.exceptions.exceptions import (
    FrameDecodingError,
    FrameEncodingError,
    FrameError,
    InvalidDeviceTokenError,
    MissingContentError,
    MissingDeviceTokenError,
    NoPayloadError,
    NotificationError,
    PayloadEncodingError,
    PayloadTooLargeError,
    UnrecognizedFieldError,
)

__all__ = [
    "FrameDecodingError",
    "FrameEncodingError",
    "FrameError",
    "InvalidDeviceTokenError",
    "MissingContentError",
    "MissingDeviceTokenError",
    "NoPayloadError",
    "NotificationError",
    "PayloadEncodingError",
    "PayloadTooLargeError",
    "UnrecognizedFieldError",
]
