"""
onesignal_push – OneSignal push-notification dispatch adapter.

Import path convention::

    from onesignal_push.application.notifications import OneSignalPushAdapter
    from onesignal_push.config import OneSignalSettings
    from onesignal_push.kernel.errors import PushDispatchError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
