"""Application bus – TypeBus dispatch engine, settings and stats."""
from typebus.application.bus.settings import LOG_LEVELS, TypeBusSettings
from typebus.application.bus.stats import BusStats, RegisteredHandlers
from typebus.application.bus.type_bus import TypeBus

__all__ = [
    "LOG_LEVELS",
    "BusStats",
    "RegisteredHandlers",
    "TypeBus",
    "TypeBusSettings",
]
