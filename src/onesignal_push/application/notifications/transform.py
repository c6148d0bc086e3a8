"""Application notifications – OneSignal payload transformers.

Each transformer deep-copies ``payload["data"]``, moves the keys it
recognises into named OneSignal fields and forwards the remainder untouched
under ``data``. A key is only mapped when its value is truthy; falsy values
stay in ``data`` as-is.
"""
from __future__ import annotations

import copy
from typing import Any

from onesignal_push.application.notifications.push import NotificationPayload, Platform
from onesignal_push.kernel.time import Clock, SystemClock, epoch_millis

__all__ = ["transform", "transform_android", "transform_ios"]


def _is_one(value: Any) -> bool:
    return value == 1 or value == "1"


def _extract(payload: NotificationPayload) -> dict[str, Any]:
    return copy.deepcopy(dict(payload.get("data") or {}))


def _apply_common(data: dict[str, Any], post: dict[str, Any]) -> None:
    if data.get("title"):
        post["headings"] = {"en": data.pop("title")}
    if data.get("alert"):
        post["contents"] = {"en": data.pop("alert")}
    if data.get("push_time"):
        post["send_after"] = data.pop("push_time")
    if data.get("buttons"):
        post["buttons"] = data.pop("buttons")


def transform_ios(payload: NotificationPayload, clock: Clock | None = None) -> dict[str, Any]:
    """Build the iOS request body (without ``include_ios_tokens``)."""
    data = _extract(payload)
    post: dict[str, Any] = {}

    badge = data.get("badge")
    if badge:
        if badge == "Increment":
            post["ios_badgeType"] = "Increase"
            post["ios_badgeCount"] = 1
        else:
            post["ios_badgeType"] = "SetTo"
            post["ios_badgeCount"] = badge
        del data["badge"]

    _apply_common(data, post)

    if data.get("sound"):
        post["ios_sound"] = data.pop("sound")
    if _is_one(data.get("content-available")):
        post["content_available"] = True
        del data["content-available"]
    if _is_one(data.get("mutable-content")):
        post["mutable_content"] = True
        del data["mutable-content"]
    if data.get("uri"):
        post["url"] = data.pop("uri")
    if data.get("image_url"):
        stamp = str(epoch_millis(clock or SystemClock()))
        post["ios_attachments"] = {stamp: data.pop("image_url")}

    post["data"] = data
    return post


def transform_android(payload: NotificationPayload) -> dict[str, Any]:
    """Build the Android request body (without ``include_android_reg_ids``).

    ``uri`` is copied to ``url`` but, unlike iOS, also left in ``data``.
    """
    data = _extract(payload)
    post: dict[str, Any] = {}

    _apply_common(data, post)

    if data.get("image_url"):
        post["big_picture"] = data.pop("image_url")
    if data.get("uri"):
        post["url"] = data["uri"]

    post["data"] = data
    return post


def transform(
    platform: Platform,
    payload: NotificationPayload,
    clock: Clock | None = None,
) -> dict[str, Any]:
    if Platform(platform) is Platform.IOS:
        return transform_ios(payload, clock)
    return transform_android(payload)
