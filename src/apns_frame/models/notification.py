# -*- coding: utf-8 -*-
"""Notification: payload document, validation and binary frame for one push.

Fields are mutated through properties; every write marks the memoized JSON
encoding dirty so encoded_payload and to_bytes always reflect current values.
"""

from __future__ import annotations

import json
import threading
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional

from apns_frame.codec.frame import pack_frame
from apns_frame.exceptions import (
    FrameEncodingError,
    MissingContentError,
    NotificationError,
    PayloadEncodingError,
    PayloadTooLargeError,
    UnrecognizedFieldError,
)
from apns_frame.models.alert import PayloadAlert
from apns_frame.models.fields import NOTIFICATION_FIELDS
from apns_frame.utils.device_token import device_token_bytes, sanitize_device_token
from apns_frame.utils.merge import deep_merge


class Notification:
    """A single push notification for the binary gateway protocol.

    At least one of alert, badge or custom must be set before encoding.
    content_available and mutable_content are one-way flags: a truthy value
    stores the indicator 1, a falsy value leaves the stored value as it was.

    The device token is packed as a 64 character hex field. A missing token
    packs as zeros, but a token with non-hex characters is rejected with
    InvalidDeviceTokenError rather than packed as garbage.
    """

    MAX_PAYLOAD_SIZE = 2048
    CONTENT_AVAILABLE_INDICATOR = 1
    MUTABLE_CONTENT_INDICATOR = 1

    def __init__(self, fields: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        self._lock = threading.RLock()
        self._identifier: int = 0
        self._expiry: Any = 0
        self._device_token: Optional[str] = None
        self._alert: Any = None
        self._badge: Optional[int] = None
        self._sound: Optional[str] = None
        self._content_available: Optional[int] = None
        self._mutable_content: Optional[int] = None
        self._category: Optional[str] = None
        self._thread_id: Optional[str] = None
        self._custom: Optional[Mapping[str, Any]] = None
        self._encoded_payload: Optional[bytes] = None
        self._dirty = True

        values = {**(fields or {}), **kwargs}
        unknown = sorted(key for key in values if key not in NOTIFICATION_FIELDS)
        if unknown:
            raise UnrecognizedFieldError(unknown)
        for key, value in values.items():
            setattr(self, key, value)

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> Notification:
        """Build a notification from a field-name -> value mapping."""
        return cls(fields)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(identifier={self._identifier!r}, "
            f"expiry={self._expiry!r}, alert={self._alert!r}, badge={self._badge!r})"
        )

    def _set(self, attr: str, value: Any) -> None:
        with self._lock:
            setattr(self, attr, value)
            self._dirty = True

    # Framing fields

    @property
    def identifier(self) -> int:
        return self._identifier

    @identifier.setter
    def identifier(self, value: int) -> None:
        self._set("_identifier", value)

    @property
    def expiry(self) -> Any:
        return self._expiry

    @expiry.setter
    def expiry(self, value: Any) -> None:
        self._set("_expiry", value)

    @property
    def device_token(self) -> Optional[str]:
        return self._device_token

    @device_token.setter
    def device_token(self, value: Optional[str]) -> None:
        self._set("_device_token", value)

    # Payload fields

    @property
    def alert(self) -> Any:
        return self._alert

    @alert.setter
    def alert(self, value: str | Mapping[str, Any] | PayloadAlert | None) -> None:
        self._set("_alert", value)

    @property
    def badge(self) -> Optional[int]:
        return self._badge

    @badge.setter
    def badge(self, value: Optional[int]) -> None:
        self._set("_badge", value)

    @property
    def sound(self) -> Optional[str]:
        return self._sound

    @sound.setter
    def sound(self, value: Optional[str]) -> None:
        self._set("_sound", value)

    @property
    def category(self) -> Optional[str]:
        return self._category

    @category.setter
    def category(self, value: Optional[str]) -> None:
        self._set("_category", value)

    @property
    def thread_id(self) -> Optional[str]:
        return self._thread_id

    @thread_id.setter
    def thread_id(self, value: Optional[str]) -> None:
        self._set("_thread_id", value)

    @property
    def thread_id_present(self) -> bool:
        return self._thread_id is not None

    @property
    def content_available(self) -> Optional[int]:
        return self._content_available

    @content_available.setter
    def content_available(self, value: Any) -> None:
        with self._lock:
            if value:
                self._content_available = self.CONTENT_AVAILABLE_INDICATOR
            self._dirty = True

    @property
    def content_available_present(self) -> bool:
        return self._content_available is not None

    @property
    def mutable_content(self) -> Optional[int]:
        return self._mutable_content

    @mutable_content.setter
    def mutable_content(self, value: Any) -> None:
        with self._lock:
            if value:
                self._mutable_content = self.MUTABLE_CONTENT_INDICATOR
            self._dirty = True

    @property
    def mutable_content_present(self) -> bool:
        return self._mutable_content is not None

    @property
    def custom(self) -> Optional[Mapping[str, Any]]:
        return self._custom

    @custom.setter
    def custom(self, value: Optional[Mapping[str, Any]]) -> None:
        self._set("_custom", value)

    # Payload

    @property
    def payload(self) -> dict[str, Any]:
        """The payload document: reserved aps keys deep-merged with custom."""
        with self._lock:
            aps: dict[str, Any] = {}
            if self._alert is not None:
                aps["alert"] = (
                    self._alert.to_dict() if isinstance(self._alert, PayloadAlert) else self._alert
                )
            if self._badge is not None:
                aps["badge"] = self._badge
            if self._sound is not None:
                aps["sound"] = self._sound
            if self.content_available_present:
                aps["content-available"] = self._content_available
            if self.mutable_content_present:
                aps["mutable-content"] = self._mutable_content
            if self._category is not None:
                aps["category"] = self._category
            if self.thread_id_present:
                aps["thread-id"] = self._thread_id

            return deep_merge({"aps": aps}, self._custom or {})

    @property
    def encoded_payload(self) -> bytes:
        """Compact UTF-8 JSON of payload, recomputed only after a field changes."""
        with self._lock:
            if self._dirty or self._encoded_payload is None:
                try:
                    encoded = json.dumps(self.payload, separators=(",", ":"), ensure_ascii=False)
                except (TypeError, ValueError) as e:
                    raise PayloadEncodingError(f"Payload is not JSON serializable: {e}", cause=e) from e
                self._encoded_payload = encoded.encode("utf-8")
                self._dirty = False
            return self._encoded_payload

    @property
    def payload_size(self) -> int:
        return len(self.encoded_payload)

    @property
    def expiry_epoch_time(self) -> int:
        """expiry coerced to an integer UNIX timestamp (None counts as 0).

        Numeric strings such as "1.5" are truncated like floats.

        Raises:
            FrameEncodingError: expiry can not be read as a number.
        """
        expiry = self._expiry
        if expiry is None:
            return 0
        if isinstance(expiry, datetime):
            return int(expiry.timestamp())
        try:
            return int(expiry)
        except (TypeError, ValueError):
            pass
        try:
            return int(float(expiry))
        except (TypeError, ValueError, OverflowError) as e:
            raise FrameEncodingError(
                f"expiry must be a number or datetime, got {expiry!r}",
                field="expiry",
                value=expiry,
            ) from e

    @property
    def sanitized_device_token(self) -> Optional[str]:
        return sanitize_device_token(self._device_token)

    # Validation

    def validate_payload(self) -> bool:
        """Check the notification can be sent.

        Raises:
            MissingContentError: alert, badge and custom are all unset.
            PayloadTooLargeError: encoded payload is over MAX_PAYLOAD_SIZE bytes.
        """
        with self._lock:
            if self._alert is None and self._badge is None and self._custom is None:
                raise MissingContentError()
            size = self.payload_size
            if size > self.MAX_PAYLOAD_SIZE:
                raise PayloadTooLargeError(size=size, max_size=self.MAX_PAYLOAD_SIZE)
            return True

    def is_valid(self) -> bool:
        try:
            return self.validate_payload()
        except NotificationError:
            return False

    # Wire format

    def to_bytes(self) -> bytes:
        """Validate and pack the notification into a binary frame."""
        with self._lock:
            self.validate_payload()
            return pack_frame(
                identifier=self._identifier,
                expiry=self.expiry_epoch_time,
                device_token=device_token_bytes(self._device_token),
                payload=self.encoded_payload,
            )

    def to_dict(self) -> dict[str, Any]:
        """Current field values keyed by construction field name."""
        with self._lock:
            return {
                "device_token": self._device_token,
                "alert": self._alert,
                "badge": self._badge,
                "sound": self._sound,
                "expiry": self._expiry,
                "identifier": self._identifier,
                "content_available": self._content_available,
                "mutable_content": self._mutable_content,
                "category": self._category,
                "thread_id": self._thread_id,
                "custom": self._custom,
            }
