"""Application – push dispatch use cases."""

from onesignal_push.application.notifications import (
    AggregateOutcome,
    DeviceRegistration,
    DispatchOutcome,
    OneSignalPushAdapter,
    Platform,
)

__all__ = [
    "AggregateOutcome",
    "DeviceRegistration",
    "DispatchOutcome",
    "OneSignalPushAdapter",
    "Platform",
]
