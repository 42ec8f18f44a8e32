# -*- coding: utf-8 -*-
"""Unit tests for logging configuration."""

from __future__ import annotations

import logging
import logging.handlers
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
import structlog

from apns_frame.config import Settings
from apns_frame.logging.config import configure_logging, mask_device_tokens


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Restore root handlers and structlog defaults after configure_logging."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_mask_device_tokens_masks_known_keys(device_token: str) -> None:
    event = mask_device_tokens(
        None, "info", {"event": "x", "device_token": device_token, "token": device_token}
    )

    assert event["device_token"] == "740f4707...78ad"
    assert event["token"] == "740f4707...78ad"
    assert event["event"] == "x"


def test_mask_device_tokens_ignores_missing_or_non_string_values() -> None:
    event = mask_device_tokens(None, "info", {"event": "x", "device_token": None})

    assert event == {"event": "x", "device_token": None}


@pytest.mark.usefixtures("restore_logging")
def test_configure_logging_installs_console_handler(
    settings_factory: Callable[..., Settings],
) -> None:
    configure_logging(settings_factory(logging={"console_level": "DEBUG"}))

    root = logging.getLogger()
    assert any(type(h) is logging.StreamHandler for h in root.handlers)
    assert root.level == logging.DEBUG
    assert structlog.is_configured()


@pytest.mark.usefixtures("restore_logging")
def test_configure_logging_writes_rotating_file(
    settings_factory: Callable[..., Settings],
    tmp_path: Path,
) -> None:
    log_file = tmp_path / "logs" / "frames.log"

    configure_logging(
        settings_factory(
            logging={"log_to_console": False, "log_to_file": True, "log_file_path": str(log_file)}
        )
    )

    assert log_file.parent.is_dir()
    assert any(
        isinstance(h, logging.handlers.TimedRotatingFileHandler)
        for h in logging.getLogger().handlers
    )


def test_mask_device_tokens_keeps_already_masked_value() -> None:
    event = mask_device_tokens(None, "info", {"event": "x", "device_token": "740f4707...78ad"})

    assert event["device_token"] == "740f4707...78ad"
