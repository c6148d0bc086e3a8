"""Application notifications – push models and transport protocol."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from onesignal_push.kernel.errors import (
    PushDispatchError,
    TransportFailure,
    UnsupportedPlatformError,
)

__all__ = [
    "CHUNK_SIZE",
    "AggregateOutcome",
    "DeviceRegistration",
    "DispatchOutcome",
    "NotificationPayload",
    "Platform",
    "PushTransport",
    "TransportResult",
]

# OneSignal accepts at most 2000 device identifiers per request.
CHUNK_SIZE = 2000

NotificationPayload = Mapping[str, Any]


class Platform(str, Enum):
    """Device platforms the adapter can deliver to."""

    IOS = "ios"
    ANDROID = "android"

    @property
    def token_field(self) -> str:
        """Request field that carries this platform's device identifiers."""
        return _TOKEN_FIELDS[self]

    @classmethod
    def parse(cls, value: str) -> Platform:
        try:
            return cls(value)
        except ValueError as exc:
            raise UnsupportedPlatformError(value, cause=exc) from exc


_TOKEN_FIELDS = {
    Platform.IOS: "include_ios_tokens",
    Platform.ANDROID: "include_android_reg_ids",
}


@dataclass(frozen=True)
class DeviceRegistration:
    """A device that can receive pushes.

    ``push_type`` takes precedence over ``device_type`` during classification.
    """

    device_type: str
    device_token: str
    push_type: str | None = None
    app_identifier: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DeviceRegistration:
        """Build from an installation record (``deviceType``, ``deviceToken``, ...)."""
        return cls(
            device_type=data.get("deviceType", ""),
            device_token=data.get("deviceToken") or "",
            push_type=data.get("pushType"),
            app_identifier=data.get("appIdentifier"),
        )


@dataclass(frozen=True)
class TransportResult:
    """Outcome of a single request to the broadcast service."""

    success: bool
    status_code: int | None = None
    body: str | None = None
    error: str | None = None


@runtime_checkable
class PushTransport(Protocol):
    """Port: submit one JSON request to the broadcast service."""

    async def submit(self, request: dict[str, Any]) -> TransportResult: ...


@dataclass(frozen=True)
class DispatchOutcome:
    """The delivery result for one platform."""

    platform: Platform
    success: bool
    batches_sent: int = 0
    tokens_sent: int = 0
    error: str | None = None
    status_code: int | None = None
    response_body: str | None = None

    def as_error(self) -> TransportFailure | None:
        """Return the failure as a :class:`TransportFailure`, or ``None`` on success."""
        if self.success:
            return None
        return TransportFailure(
            "onesignal",
            self.error,
            status_code=self.status_code,
            response_body=self.response_body,
            detail={"platform": self.platform.value, "batches_sent": self.batches_sent},
        )


@dataclass(frozen=True)
class AggregateOutcome:
    """Per-platform outcomes of a single :meth:`send` call."""

    outcomes: tuple[DispatchOutcome, ...] = field(default_factory=tuple)

    @property
    def success(self) -> bool:
        return all(o.success for o in self.outcomes)

    @property
    def failures(self) -> list[DispatchOutcome]:
        return [o for o in self.outcomes if not o.success]

    @property
    def platforms(self) -> list[Platform]:
        return [o.platform for o in self.outcomes]

    def for_platform(self, platform: Platform | str) -> DispatchOutcome | None:
        for outcome in self.outcomes:
            if outcome.platform == platform:
                return outcome
        return None

    def raise_for_failures(self) -> None:
        """Raise :class:`PushDispatchError` if any attempted platform failed."""
        if not self.success:
            raise PushDispatchError(self, cause=self.failures[0].as_error())
