# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from apns_frame.config import Settings
from apns_frame.models.notification import Notification


@pytest.fixture
def device_token() -> str:
    """Default 64 hex character device token used by tests."""
    return "740f4707bebcf74f9b7c25d48e3358945f6aa01da5ddb387462c7eaf61bb78ad"


@pytest.fixture
def notification_factory(device_token: str) -> Callable[..., Notification]:
    """Build Notification with a device token and alert unless overridden."""

    def _build(**overrides: Any) -> Notification:
        fields: dict[str, Any] = {"device_token": device_token, "alert": "Hello"}
        fields.update(overrides)
        return Notification(fields)

    return _build


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Build Settings without reading .env, with nested section overrides."""

    def _build(**overrides: Any) -> Settings:
        return Settings(_env_file=None, **overrides)  # type: ignore[call-arg]

    return _build
