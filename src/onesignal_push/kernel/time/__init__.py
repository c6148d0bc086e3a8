"""Kernel time – Clock port + implementations."""
from onesignal_push.kernel.time.clock import Clock, FrozenClock, SystemClock, epoch_millis

__all__ = ["Clock", "FrozenClock", "SystemClock", "epoch_millis"]
