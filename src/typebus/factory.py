"""Factory helpers – ready-to-use TypeBus instances."""
from __future__ import annotations

import dataclasses
from typing import Any

from typebus.application.bus import TypeBus, TypeBusSettings
from typebus.application.cqrs.builders import FluentBuilder
from typebus.application.pipeline import with_logging


def create_type_bus(settings: TypeBusSettings | None = None, **overrides: Any) -> TypeBus:
    """Build a :class:`TypeBus`, installing the logging middleware when enabled.

    *overrides* replace individual fields of *settings* (or of the defaults)::

        bus = create_type_bus(log_level="debug", command_timeout_ms=5_000)
    """
    settings = settings or TypeBusSettings()
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    bus = TypeBus(settings)
    if settings.enable_logging:
        bus.use(with_logging(settings.log_level, include_data=settings.log_level == "debug"))  # type: ignore[arg-type]
    return bus


def fluent(bus: TypeBus) -> FluentBuilder:
    """Shortcut for :class:`FluentBuilder`."""
    return FluentBuilder(bus)


__all__ = ["create_type_bus", "fluent"]
