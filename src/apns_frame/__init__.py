"""apns-frame: payload model and binary frame encoder for the legacy push gateway protocol."""

from apns_frame.codec import DecodedFrame, pack_frame, unpack_frame
from apns_frame.config import get_settings
from apns_frame.exceptions import (
    MissingContentError,
    NotificationError,
    PayloadTooLargeError,
    UnrecognizedFieldError,
)
from apns_frame.models import Notification, PayloadAlert
from apns_frame.services import NotificationEncoderService

__version__ = "0.0.1"
__all__ = [
    "DecodedFrame",
    "MissingContentError",
    "Notification",
    "NotificationEncoderService",
    "NotificationError",
    "PayloadAlert",
    "PayloadTooLargeError",
    "UnrecognizedFieldError",
    "get_settings",
    "pack_frame",
    "unpack_frame",
]
