"""Services."""

from apns_frame.services.notification_encoder import NotificationEncoderService

__all__ = ["NotificationEncoderService"]
