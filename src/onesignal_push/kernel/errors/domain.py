"""Domain errors — rule violations in device and payload handling."""

from __future__ import annotations

from typing import Any

from onesignal_push.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class UnsupportedPlatformError(DomainError):
    """A device registration carries a platform tag the adapter cannot serve.

    The dispatch facade never lets this escape: unsupported registrations are
    logged and dropped.
    """

    default_code = "unsupported_platform"

    def __init__(self, platform: Any, **kwargs: Any) -> None:
        super().__init__(f"Unsupported push platform {platform!r}", **kwargs)
        self.platform = platform


__all__ = ["DomainError", "UnsupportedPlatformError"]
