"""Testing support – in-memory fakes for the push adapter."""

from onesignal_push.testing.fakes import FakeClock, FrozenClock, InMemoryPushTransport

__all__ = ["FakeClock", "FrozenClock", "InMemoryPushTransport"]
