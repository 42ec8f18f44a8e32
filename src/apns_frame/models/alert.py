# -*- coding: utf-8 -*-
"""Structured alert sub-document for the aps payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class PayloadAlert:
    """Alert rendered as a dictionary instead of a plain string.

    Only set fields are emitted; localization fields use the gateway's
    dashed key names (title-loc-key, loc-args, ...).
    """

    title: Optional[str] = None
    title_loc_key: Optional[str] = None
    title_loc_args: Optional[list[str]] = None
    subtitle: Optional[str] = None
    body: Optional[str] = None
    loc_key: Optional[str] = None
    loc_args: Optional[list[str]] = None
    action_loc_key: Optional[str] = None
    launch_image: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        fields: tuple[tuple[str, Any], ...] = (
            ("title", self.title),
            ("title-loc-key", self.title_loc_key),
            ("title-loc-args", self.title_loc_args),
            ("subtitle", self.subtitle),
            ("body", self.body),
            ("loc-key", self.loc_key),
            ("loc-args", self.loc_args),
            ("action-loc-key", self.action_loc_key),
            ("launch-image", self.launch_image),
        )
        return {key: value for key, value in fields if value is not None}
