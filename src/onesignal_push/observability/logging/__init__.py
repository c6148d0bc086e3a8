"""Observability – structured logging helpers."""
from onesignal_push.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from onesignal_push.observability.logging.factory import JsonLoggerFactory
from onesignal_push.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
