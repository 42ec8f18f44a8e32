"""Custom exceptions for notification payloads and binary frames."""

from __future__ import annotations

from collections.abc import Iterable


class NotificationError(Exception):
    """Base exception for notification building and encoding errors."""

    pass


class MissingContentError(NotificationError):
    """Raised when a notification has no alert, badge or custom payload."""

    def __init__(
        self,
        message: str = "Notification must define at least one of alert, badge or custom",
    ) -> None:
        super().__init__(message)


NoPayloadError = MissingContentError


class PayloadTooLargeError(NotificationError):
    """Raised when the encoded payload exceeds the gateway limit."""

    def __init__(
        self,
        message: str | None = None,
        *,
        size: int,
        max_size: int,
    ) -> None:
        super().__init__(message or f"Payload is {size} bytes, maximum is {max_size}")
        self.size = size
        self.max_size = max_size


class PayloadEncodingError(NotificationError, TypeError):
    """Raised when the payload document can not be serialized to JSON."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class UnrecognizedFieldError(NotificationError, TypeError):
    """Raised when a notification is constructed with unknown field names."""

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = tuple(fields)
        super().__init__(f"Unrecognized notification field(s): {', '.join(self.fields)}")


class MissingDeviceTokenError(NotificationError):
    """Raised when a frame is requested for a notification without a device token."""

    pass


class InvalidDeviceTokenError(NotificationError, ValueError):
    """Raised when a device token is not a hex string."""

    def __init__(self, message: str = "Device token must be a hex string", *, token: str | None = None) -> None:
        super().__init__(message)
        self.token = token


class FrameError(NotificationError):
    """Base exception for binary frame packing and parsing."""

    pass


class FrameEncodingError(FrameError):
    """Raised when a header value does not fit its wire field."""

    def __init__(self, message: str, *, field: str | None = None, value: object = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class FrameDecodingError(FrameError):
    """Raised when bytes can not be parsed as a notification frame."""

    pass
