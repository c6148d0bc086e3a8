"""Application notifications – OneSignalPushAdapter facade."""
from __future__ import annotations

import asyncio
from collections.abc import Iterable, Mapping
from typing import Any

from onesignal_push.application.notifications.batch import BatchDispatcher
from onesignal_push.application.notifications.classify import classify_installations
from onesignal_push.application.notifications.push import (
    CHUNK_SIZE,
    AggregateOutcome,
    DeviceRegistration,
    DispatchOutcome,
    NotificationPayload,
    Platform,
    PushTransport,
)
from onesignal_push.application.notifications.transform import transform
from onesignal_push.config.settings import EnvSettingsLoader, OneSignalSettings
from onesignal_push.config.validation import ConfigurationError
from onesignal_push.kernel.time import Clock, SystemClock
from onesignal_push.observability.logging import get_logger

__all__ = ["OneSignalPushAdapter"]

logger = get_logger(__name__)

Registration = DeviceRegistration | Mapping[str, Any]


class OneSignalPushAdapter:
    """Send a notification to iOS and Android devices through OneSignal.

    Registrations are classified by platform, the payload is transformed once
    per represented platform, and each platform is delivered by its own
    :class:`BatchDispatcher`. Platforms run concurrently; a failure on one
    never cancels another.

    Usage::

        async with OneSignalPushAdapter(app_id, api_key) as adapter:
            outcome = await adapter.send({"data": {"alert": "Hi"}}, devices)
            outcome.raise_for_failures()
    """

    valid_push_types: tuple[str, ...] = tuple(p.value for p in Platform)

    def __init__(
        self,
        app_id: str | None,
        api_key: str | None,
        *,
        transport: PushTransport | None = None,
        clock: Clock | None = None,
        chunk_size: int = CHUNK_SIZE,
    ) -> None:
        if not app_id or not api_key:
            raise ConfigurationError(
                "Trying to initialize OneSignalPushAdapter without app_id or api_key"
            )
        self._app_id = app_id
        self._owns_transport = transport is None
        self._transport = transport or self._default_transport(app_id, api_key)
        self._clock = clock or SystemClock()
        self._dispatcher = BatchDispatcher(self._transport, chunk_size)

    @staticmethod
    def _default_transport(app_id: str, api_key: str) -> PushTransport:
        from onesignal_push.adapters.http.client import OneSignalTransport  # noqa: PLC0415

        return OneSignalTransport(app_id, api_key)

    @classmethod
    def from_settings(
        cls,
        settings: OneSignalSettings,
        *,
        clock: Clock | None = None,
    ) -> OneSignalPushAdapter:
        from onesignal_push.adapters.http.client import OneSignalTransport  # noqa: PLC0415

        adapter = cls(
            settings.app_id,
            settings.api_key,
            transport=OneSignalTransport.from_settings(settings),
            clock=clock,
        )
        adapter._owns_transport = True
        return adapter

    @classmethod
    def from_env(cls, *, clock: Clock | None = None) -> OneSignalPushAdapter:
        """Build from ``ONESIGNAL_*`` environment variables."""
        return cls.from_settings(EnvSettingsLoader().load(OneSignalSettings), clock=clock)

    async def __aenter__(self) -> OneSignalPushAdapter:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport if this adapter created it."""
        if self._owns_transport:
            aclose = getattr(self._transport, "aclose", None)
            if aclose is not None:
                await aclose()

    def get_valid_push_types(self) -> list[str]:
        return list(self.valid_push_types)

    @staticmethod
    def classify_installations(
        registrations: Iterable[DeviceRegistration],
        valid_types: Iterable[str],
    ) -> dict[str, list[DeviceRegistration]]:
        return classify_installations(registrations, valid_types)

    async def send(
        self,
        payload: NotificationPayload,
        registrations: Iterable[Registration],
    ) -> AggregateOutcome:
        devices = [
            r if isinstance(r, DeviceRegistration) else DeviceRegistration.from_mapping(r)
            for r in registrations
        ]
        device_map = classify_installations(devices, self.valid_push_types)
        self._log_dropped(devices, device_map)

        platforms: list[Platform] = []
        jobs = []
        for push_type, bucket in device_map.items():
            if not bucket:
                continue
            platform = Platform(push_type)
            tokens = [d.device_token for d in bucket]
            platforms.append(platform)
            jobs.append(self._send_platform(platform, payload, tokens))

        results = await asyncio.gather(*jobs, return_exceptions=True)
        outcomes = []
        for platform, result in zip(platforms, results):
            if isinstance(result, DispatchOutcome):
                outcomes.append(result)
            elif isinstance(result, Exception):
                outcomes.append(self._crashed(platform, result))
            else:
                raise result
        return AggregateOutcome(tuple(outcomes))

    @staticmethod
    def _crashed(platform: Platform, exc: Exception) -> DispatchOutcome:
        logger.error("push.dispatch_crashed", platform=platform.value, error=repr(exc))
        return DispatchOutcome(platform=platform, success=False, error=repr(exc))

    async def _send_platform(
        self,
        platform: Platform,
        payload: NotificationPayload,
        tokens: list[str],
    ) -> DispatchOutcome:
        template = transform(platform, payload, self._clock)
        return await self._dispatcher.dispatch(platform, template, tokens)

    def _log_dropped(
        self,
        devices: list[DeviceRegistration],
        device_map: dict[str, list[DeviceRegistration]],
    ) -> None:
        kept = {id(d) for bucket in device_map.values() for d in bucket}
        for device in devices:
            if id(device) in kept or not device.device_token:
                continue
            logger.warning(
                "push.platform_unsupported",
                device_type=device.device_type,
                push_type=device.push_type,
            )
