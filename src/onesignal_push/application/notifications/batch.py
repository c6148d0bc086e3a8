"""Application notifications – sequential chunked delivery."""
from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from onesignal_push.application.notifications.push import (
    CHUNK_SIZE,
    DispatchOutcome,
    Platform,
    PushTransport,
)
from onesignal_push.observability.logging import get_logger

__all__ = ["BatchDispatcher", "chunk_tokens"]

logger = get_logger(__name__)


def chunk_tokens(tokens: Sequence[str], size: int = CHUNK_SIZE) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(offset, slice)`` pairs covering *tokens* in order."""
    if size <= 0:
        raise ValueError("chunk size must be positive")
    for offset in range(0, len(tokens), size):
        yield offset, list(tokens[offset : offset + size])


class BatchDispatcher:
    """Deliver one request template to many tokens, one chunk at a time.

    Chunks are awaited strictly in order; the first chunk the transport
    reports as failed ends the dispatch and no later chunk is attempted.
    Chunks already accepted by the service are not rolled back.
    """

    def __init__(self, transport: PushTransport, chunk_size: int = CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._transport = transport
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    async def dispatch(
        self,
        platform: Platform,
        template: dict[str, Any],
        tokens: Sequence[str],
    ) -> DispatchOutcome:
        log = logger.bind(platform=platform.value, total=len(tokens))
        batches = 0
        sent = 0
        for offset, chunk in chunk_tokens(tokens, self._chunk_size):
            request = {**template, platform.token_field: chunk}
            result = await self._transport.submit(request)
            if not result.success:
                failed = DispatchOutcome(
                    platform=platform,
                    success=False,
                    batches_sent=batches,
                    tokens_sent=sent,
                    error=result.error or f"OneSignal responded with HTTP {result.status_code}",
                    status_code=result.status_code,
                    response_body=result.body,
                )
                log.error(
                    "push.batch_failed",
                    offset=offset,
                    batch_size=len(chunk),
                    status_code=result.status_code,
                    **failed.as_error().log_context(),
                )
                return failed
            batches += 1
            sent += len(chunk)
            log.debug("push.batch_sent", offset=offset, batch_size=len(chunk))

        log.info("push.dispatch_completed", batches=batches)
        return DispatchOutcome(
            platform=platform,
            success=True,
            batches_sent=batches,
            tokens_sent=sent,
        )
