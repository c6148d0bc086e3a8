"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── UnsupportedPlatformError
    ├── ApplicationError         (application.py)
    │   ├── PushDispatchError
    │   └── ConfigurationError   (onesignal_push.config.validation)
    └── InfrastructureError      (infrastructure.py)
        └── ExternalServiceError
            └── TransportFailure
"""

from onesignal_push.kernel.errors.application import ApplicationError, PushDispatchError
from onesignal_push.kernel.errors.base import BaseError
from onesignal_push.kernel.errors.domain import DomainError, UnsupportedPlatformError
from onesignal_push.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    TransportFailure,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "PushDispatchError",
    "TransportFailure",
    "UnsupportedPlatformError",
]
