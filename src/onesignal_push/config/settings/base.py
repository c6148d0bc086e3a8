"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
import typing

from onesignal_push.config.validation import MissingRequiredSettingError


@dataclasses.dataclass
class Settings:
    """Base class for environment-backed settings.

    Every field maps to the variable ``<_prefix>_<FIELD>`` (upper-cased).
    """

    _prefix: typing.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _require(self, *names: str) -> None:
        """Raise :class:`MissingRequiredSettingError` for the first empty field."""
        for name in names:
            if not getattr(self, name):
                raise MissingRequiredSettingError(name)

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings"]
