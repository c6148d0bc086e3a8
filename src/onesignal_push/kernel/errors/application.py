"""Application-layer errors — raised at the use-case boundary."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from onesignal_push.kernel.errors.base import BaseError

if TYPE_CHECKING:
    from onesignal_push.application.notifications.push import AggregateOutcome


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class PushDispatchError(ApplicationError):
    """One or more platforms failed during a dispatch.

    Raised on demand by :meth:`AggregateOutcome.raise_for_failures`; the
    complete per-platform outcome stays available on ``outcome``.
    """

    default_code = "push_dispatch_failed"

    def __init__(self, outcome: AggregateOutcome, **kwargs: Any) -> None:
        failed = sorted(o.platform.value for o in outcome.failures)
        kwargs.setdefault(
            "detail",
            {o.platform.value: o.error for o in outcome.failures},
        )
        super().__init__(f"Push dispatch failed for: {', '.join(failed)}", **kwargs)
        self.outcome = outcome


__all__ = ["ApplicationError", "PushDispatchError"]
