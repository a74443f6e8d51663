"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses are dataclasses whose fields map to ``<_prefix>_<FIELD>``
    environment variables.  ``_validate`` runs after every construction,
    including ``dataclasses.replace``, so an instance is never invalid.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable name for *field_name*, e.g. ``TYPEBUS_LOG_LEVEL``."""
        if not cls._prefix:
            return field_name.upper()
        return f"{cls._prefix}_{field_name}".upper()

    def _validate(self) -> None:
        """Override to reject out-of-range values."""


__all__ = ["Settings"]
