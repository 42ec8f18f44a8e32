# -*- coding: utf-8 -*-
"""Domain models."""

from apns_frame.models.alert import PayloadAlert
from apns_frame.models.fields import NOTIFICATION_FIELDS, NotificationFields
from apns_frame.models.notification import Notification

__all__ = [
    "NOTIFICATION_FIELDS",
    "Notification",
    "NotificationFields",
    "PayloadAlert",
]
