# -*- coding: utf-8 -*-
"""Notification encoder service: settings-aware frame encoding with structured logs."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, Optional

from apns_frame.exceptions import MissingDeviceTokenError, NotificationError
from apns_frame.models.notification import Notification
from apns_frame.utils.device_token import mask_device_token

if TYPE_CHECKING:
    from apns_frame.config import Settings


class NotificationEncoderService:
    """Turn notifications into wire frames for a caller-owned transport."""

    def __init__(
        self,
        settings: "Settings",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def encode(self, notification: Notification) -> bytes:
        """Validate and pack a notification.

        Args:
            notification: Notification to encode.

        Returns:
            The binary frame.

        Raises:
            MissingDeviceTokenError: No device token and ENCODER__REQUIRE_DEVICE_TOKEN is set.
            NotificationError: Any validation or packing failure from the notification.
        """
        try:
            if self._settings.encoder.require_device_token and not notification.sanitized_device_token:
                raise MissingDeviceTokenError("Notification has no device token")
            frame = notification.to_bytes()
        except NotificationError as e:
            self._logger.warning(
                "notification_rejected",
                identifier=notification.identifier,
                device_token=mask_device_token(notification.device_token),
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

        self._logger.debug(
            "notification_encoded",
            identifier=notification.identifier,
            device_token=mask_device_token(notification.device_token),
            payload_size=notification.payload_size,
            frame_size=len(frame),
        )
        return frame

    def build(self, fields: Optional[dict[str, Any]] = None, **kwargs: Any) -> bytes:
        """Construct a notification from fields and encode it in one step."""
        return self.encode(Notification(fields, **kwargs))
