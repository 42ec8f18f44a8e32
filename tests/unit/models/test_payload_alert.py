# -*- coding: utf-8 -*-
"""Unit tests for PayloadAlert rendering."""

from __future__ import annotations

from apns_frame.models.alert import PayloadAlert


def test_to_dict_omits_unset_fields() -> None:
    assert PayloadAlert(body="Body").to_dict() == {"body": "Body"}


def test_to_dict_uses_dashed_localization_keys() -> None:
    alert = PayloadAlert(
        title_loc_key="GAME_TITLE",
        title_loc_args=["Shelby"],
        loc_key="GAME_PLAY_REQUEST_FORMAT",
        loc_args=["Jenna", "Frank"],
        action_loc_key="PLAY",
        launch_image="splash.png",
    )

    assert alert.to_dict() == {
        "title-loc-key": "GAME_TITLE",
        "title-loc-args": ["Shelby"],
        "loc-key": "GAME_PLAY_REQUEST_FORMAT",
        "loc-args": ["Jenna", "Frank"],
        "action-loc-key": "PLAY",
        "launch-image": "splash.png",
    }


def test_to_dict_keeps_empty_strings() -> None:
    assert PayloadAlert(title="", body="Body").to_dict() == {"title": "", "body": "Body"}


def test_empty_alert_renders_empty_dict() -> None:
    assert PayloadAlert().to_dict() == {}
