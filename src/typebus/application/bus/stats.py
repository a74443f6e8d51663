"""Bus introspection snapshots."""
from __future__ import annotations

import dataclasses

from typebus.application.bus.settings import TypeBusSettings


@dataclasses.dataclass(frozen=True)
class BusStats:
    """Counts of registered handlers and middleware at one point in time.

    ``event_handlers`` is the total number of bindings across all event types.
    """

    command_handlers: int
    query_handlers: int
    event_handlers: int
    middleware: int
    settings: TypeBusSettings


@dataclasses.dataclass(frozen=True)
class RegisteredHandlers:
    """Registered message types (not the handlers), in registration order."""

    commands: tuple[str, ...]
    queries: tuple[str, ...]
    events: tuple[str, ...]


__all__ = ["BusStats", "RegisteredHandlers"]
