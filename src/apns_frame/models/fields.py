"""Recognized notification construction fields."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, TypedDict

from apns_frame.models.alert import PayloadAlert


class NotificationFields(TypedDict, total=False):
    """Keyword options accepted by Notification(...). Keys match attribute names."""

    device_token: str
    alert: str | Mapping[str, Any] | PayloadAlert
    badge: int
    sound: str
    expiry: int | datetime
    identifier: int
    content_available: bool
    mutable_content: bool
    category: str
    thread_id: str
    custom: Mapping[str, Any]


NOTIFICATION_FIELDS: frozenset[str] = frozenset(NotificationFields.__optional_keys__)
