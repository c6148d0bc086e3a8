"""Application notifications – device classification."""
from __future__ import annotations

from collections.abc import Iterable

from onesignal_push.application.notifications.push import DeviceRegistration

__all__ = ["classify_installations"]


def classify_installations(
    registrations: Iterable[DeviceRegistration],
    valid_types: Iterable[str],
) -> dict[str, list[DeviceRegistration]]:
    """Group *registrations* by platform tag.

    Every valid type gets a (possibly empty) bucket. Registrations without a
    device token, or whose ``push_type``/``device_type`` is not a valid type,
    are discarded.
    """
    device_map: dict[str, list[DeviceRegistration]] = {t: [] for t in valid_types}
    for registration in registrations:
        if not registration.device_token:
            continue
        bucket = device_map.get(registration.push_type or "")
        if bucket is None:
            bucket = device_map.get(registration.device_type)
        if bucket is not None:
            bucket.append(registration)
    return device_map
