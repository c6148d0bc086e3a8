"""Config settings – OneSignalSettings."""
from __future__ import annotations

import dataclasses
import typing

from onesignal_push.config.settings.base import Settings
from onesignal_push.config.validation import InvalidSettingValueError

DEFAULT_BASE_URL = "https://onesignal.com"
DEFAULT_NOTIFICATIONS_PATH = "/api/v1/notifications"


@dataclasses.dataclass
class OneSignalSettings(Settings):
    """Credentials and endpoint for the OneSignal REST API.

    Read from ``ONESIGNAL_APP_ID``, ``ONESIGNAL_API_KEY`` and, optionally,
    ``ONESIGNAL_BASE_URL``, ``ONESIGNAL_PATH`` and ``ONESIGNAL_TIMEOUT``.
    """

    _prefix: typing.ClassVar[str] = "ONESIGNAL"

    app_id: str
    api_key: str = dataclasses.field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    path: str = DEFAULT_NOTIFICATIONS_PATH
    timeout: float = 10.0

    def _validate(self) -> None:
        self._require("app_id", "api_key")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_NOTIFICATIONS_PATH", "OneSignalSettings"]
