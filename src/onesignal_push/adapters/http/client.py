"""HTTP adapter – OneSignalTransport."""
from __future__ import annotations

import json
from typing import Any

import httpx

from onesignal_push.application.notifications.push import TransportResult
from onesignal_push.config.settings import (
    DEFAULT_BASE_URL,
    DEFAULT_NOTIFICATIONS_PATH,
    OneSignalSettings,
)
from onesignal_push.config.validation import MissingRequiredSettingError
from onesignal_push.observability.logging import get_logger

__all__ = ["OneSignalTransport"]

logger = get_logger(__name__)


class OneSignalTransport:
    """Thin async httpx wrapper that posts one notification request.

    Any status below 299 counts as success. Error responses and
    connection-level failures are logged and returned as a failed
    :class:`TransportResult`; nothing is raised or retried.
    """

    def __init__(
        self,
        app_id: str,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        path: str = DEFAULT_NOTIFICATIONS_PATH,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not app_id:
            raise MissingRequiredSettingError("app_id")
        if not api_key:
            raise MissingRequiredSettingError("api_key")
        self._app_id = app_id
        self._api_key = api_key
        self._path = path
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    @classmethod
    def from_settings(cls, settings: OneSignalSettings) -> OneSignalTransport:
        return cls(
            settings.app_id,
            settings.api_key,
            base_url=settings.base_url,
            path=settings.path,
            timeout=settings.timeout,
        )

    async def __aenter__(self) -> OneSignalTransport:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Basic {self._api_key}",
        }

    async def submit(self, request: dict[str, Any]) -> TransportResult:
        try:
            content = json.dumps({**request, "app_id": self._app_id})
        except (TypeError, ValueError) as exc:
            logger.error("onesignal.encode_error", path=self._path, error=repr(exc))
            return TransportResult(success=False, error=f"Request body is not JSON serializable: {exc}")

        try:
            response = await self._client.post(self._path, content=content, headers=self.headers)
        except httpx.HTTPError as exc:
            logger.error("onesignal.connection_error", path=self._path, error=repr(exc))
            return TransportResult(success=False, error=f"Error connecting to OneSignal: {exc!r}")

        if response.status_code < 299:
            return TransportResult(success=True, status_code=response.status_code)

        logger.error(
            "onesignal.request_failed",
            path=self._path,
            status_code=response.status_code,
            body=response.text,
        )
        return TransportResult(
            success=False,
            status_code=response.status_code,
            body=response.text,
            error=f"OneSignal responded with HTTP {response.status_code}",
        )

