"""Testing fakes – in-memory doubles for adapter ports."""
from onesignal_push.testing.fakes.clock import DEFAULT_EPOCH_MILLIS, FakeClock
from onesignal_push.testing.fakes.transport import InMemoryPushTransport
from onesignal_push.kernel.time import FrozenClock

__all__ = ["DEFAULT_EPOCH_MILLIS", "FakeClock", "FrozenClock", "InMemoryPushTransport"]
