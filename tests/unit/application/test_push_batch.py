"""Unit tests for BatchDispatcher and chunk_tokens."""
from __future__ import annotations

import asyncio

import pytest
from structlog.testing import capture_logs

from onesignal_push.application.notifications import (
    CHUNK_SIZE,
    BatchDispatcher,
    Platform,
    TransportResult,
    chunk_tokens,
)
from onesignal_push.testing.fakes import InMemoryPushTransport


def _tokens(n: int) -> list[str]:
    return [f"tok-{i}" for i in range(n)]


# ---------------------------------------------------------------------------
# chunk_tokens
# ---------------------------------------------------------------------------
class TestChunkTokens:
    def test_exact_multiple(self):
        chunks = list(chunk_tokens(_tokens(4), 2))
        assert chunks == [(0, ["tok-0", "tok-1"]), (2, ["tok-2", "tok-3"])]

    def test_remainder(self):
        chunks = list(chunk_tokens(_tokens(5), 2))
        assert [len(c) for _, c in chunks] == [2, 2, 1]
        assert [o for o, _ in chunks] == [0, 2, 4]

    def test_empty(self):
        assert list(chunk_tokens([], 2)) == []

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            list(chunk_tokens(_tokens(3), 0))


# ---------------------------------------------------------------------------
# BatchDispatcher
# ---------------------------------------------------------------------------
class TestBatchDispatcher:
    def test_default_chunk_size(self):
        assert BatchDispatcher(InMemoryPushTransport()).chunk_size == CHUNK_SIZE == 2000

    def test_exactly_one_chunk(self):
        async def _run():
            transport = InMemoryPushTransport()
            outcome = await BatchDispatcher(transport).dispatch(
                Platform.IOS, {"data": {}}, _tokens(2000)
            )
            assert outcome.success is True
            assert outcome.batches_sent == 1
            assert transport.count == 1
            assert len(transport.last()["include_ios_tokens"]) == 2000
        asyncio.run(_run())

    def test_one_over_chunk_size(self):
        async def _run():
            transport = InMemoryPushTransport()
            tokens = _tokens(2001)
            outcome = await BatchDispatcher(transport).dispatch(
                Platform.ANDROID, {"data": {}}, tokens
            )
            assert outcome.success is True
            assert outcome.batches_sent == 2
            assert outcome.tokens_sent == 2001
            first, second = transport.sent
            assert first["include_android_reg_ids"] == tokens[:2000]
            assert second["include_android_reg_ids"] == ["tok-2000"]
        asyncio.run(_run())

    def test_chunks_never_exceed_limit(self):
        async def _run():
            transport = InMemoryPushTransport()
            await BatchDispatcher(transport).dispatch(Platform.IOS, {}, _tokens(6500))
            sizes = [len(r["include_ios_tokens"]) for r in transport.sent]
            assert sizes == [2000, 2000, 2000, 500]
        asyncio.run(_run())

    def test_first_failure_stops_remaining_chunks(self):
        async def _run():
            transport = InMemoryPushTransport(fail_on={1}, status_code=400, body="bad")
            outcome = await BatchDispatcher(transport).dispatch(
                Platform.IOS, {"data": {}}, _tokens(2001)
            )
            assert transport.count == 1
            assert outcome.success is False
            assert outcome.batches_sent == 0
            assert outcome.status_code == 400
            assert outcome.response_body == "bad"
            assert outcome.error
        asyncio.run(_run())

    def test_failure_is_logged_with_error_context(self):
        async def _run():
            transport = InMemoryPushTransport(fail_on={1}, status_code=502)
            with capture_logs() as logs:
                await BatchDispatcher(transport).dispatch(Platform.ANDROID, {}, _tokens(3))
            failed = [e for e in logs if e["event"] == "push.batch_failed"]
            assert len(failed) == 1
            assert failed[0]["error_code"] == "transport_failure"
            assert failed[0]["status_code"] == 502
            assert failed[0]["platform"] == "android"
        asyncio.run(_run())

    def test_failure_after_successful_chunks(self):
        async def _run():
            transport = InMemoryPushTransport(fail_on={2})
            outcome = await BatchDispatcher(transport, chunk_size=10).dispatch(
                Platform.IOS, {}, _tokens(35)
            )
            assert transport.count == 2
            assert outcome.success is False
            assert outcome.batches_sent == 1
            assert outcome.tokens_sent == 10
        asyncio.run(_run())

    def test_template_is_not_mutated_between_chunks(self):
        async def _run():
            transport = InMemoryPushTransport()
            template = {"contents": {"en": "Hi"}, "data": {"k": "v"}}
            await BatchDispatcher(transport, chunk_size=2).dispatch(
                Platform.IOS, template, _tokens(3)
            )
            assert "include_ios_tokens" not in template
            assert all(r["contents"] == {"en": "Hi"} for r in transport.sent)
        asyncio.run(_run())

    def test_chunks_are_sequential(self):
        in_flight = 0
        peak = 0

        class _SlowTransport:
            async def submit(self, request):
                nonlocal in_flight, peak
                in_flight += 1
                peak = max(peak, in_flight)
                await asyncio.sleep(0.001)
                in_flight -= 1
                return TransportResult(success=True, status_code=200)

        async def _run():
            await BatchDispatcher(_SlowTransport(), chunk_size=1).dispatch(
                Platform.ANDROID, {}, _tokens(5)
            )
        asyncio.run(_run())
        assert peak == 1

    def test_empty_token_list_sends_nothing(self):
        async def _run():
            transport = InMemoryPushTransport()
            outcome = await BatchDispatcher(transport).dispatch(Platform.IOS, {}, [])
            assert outcome.success is True
            assert outcome.batches_sent == 0
            assert transport.count == 0
        asyncio.run(_run())

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError):
            BatchDispatcher(InMemoryPushTransport(), chunk_size=0)
