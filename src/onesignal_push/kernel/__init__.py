"""Kernel – framework-agnostic building blocks."""

from onesignal_push.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ExternalServiceError,
    InfrastructureError,
    PushDispatchError,
    TransportFailure,
    UnsupportedPlatformError,
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
