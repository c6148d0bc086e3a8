"""HTTP adapter – async OneSignal transport."""
from onesignal_push.adapters.http.client import OneSignalTransport

__all__ = ["OneSignalTransport"]
