"""Bus settings – TypeBusSettings (env prefix ``TYPEBUS``)."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from typebus.config.settings import Settings
from typebus.config.validation import InvalidSettingValueError

LOG_LEVELS: frozenset[str] = frozenset({"debug", "verbose", "info", "error"})


@dataclasses.dataclass
class TypeBusSettings(Settings):
    """Construction-time configuration for :class:`TypeBus`.

    ``enable_logging`` and ``log_level`` only decide whether the logging
    middleware is installed and how chatty the bus is; they never change
    dispatch semantics.  ``enable_metrics`` is reported by ``get_stats()``.
    """

    _prefix: ClassVar[str] = "TYPEBUS"

    enable_logging: bool = True
    log_level: str = "info"
    enable_metrics: bool = True
    max_middleware: int = 10
    command_timeout_ms: int = 30_000
    query_timeout_ms: int = 10_000

    def _validate(self) -> None:
        if self.log_level not in LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(LOG_LEVELS)}"
            )
        for name in ("max_middleware", "command_timeout_ms", "query_timeout_ms"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidSettingValueError(name, value, "must be positive")


__all__ = ["LOG_LEVELS", "TypeBusSettings"]
