"""Configuration subpackage."""

from apns_frame.config.config import (
    AppSettings,
    EncoderSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "EncoderSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
