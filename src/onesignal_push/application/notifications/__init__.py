"""Application notifications – OneSignal push dispatch."""
from onesignal_push.application.notifications.adapter import OneSignalPushAdapter
from onesignal_push.application.notifications.batch import BatchDispatcher, chunk_tokens
from onesignal_push.application.notifications.classify import classify_installations
from onesignal_push.application.notifications.push import (
    CHUNK_SIZE,
    AggregateOutcome,
    DeviceRegistration,
    DispatchOutcome,
    NotificationPayload,
    Platform,
    PushTransport,
    TransportResult,
)
from onesignal_push.application.notifications.transform import (
    transform,
    transform_android,
    transform_ios,
)

__all__ = [
    "CHUNK_SIZE",
    "AggregateOutcome",
    "BatchDispatcher",
    "DeviceRegistration",
    "DispatchOutcome",
    "NotificationPayload",
    "OneSignalPushAdapter",
    "Platform",
    "PushTransport",
    "TransportResult",
    "chunk_tokens",
    "classify_installations",
    "transform",
    "transform_android",
    "transform_ios",
]
