"""Logging subpackage."""

from apns_frame.logging.config import configure_logging

__all__ = ["configure_logging"]
