"""typebus – in-process CQRS message bus.

Import path convention::

    from typebus import TypeBus, TypeBusSettings, create_type_bus
    from typebus.application.pipeline import Middleware, LoggingMiddleware
    from typebus.kernel.messaging import Command, Query, Event
"""

from typebus.application.bus import BusStats, RegisteredHandlers, TypeBus, TypeBusSettings
from typebus.application.cqrs import (
    DispatchTimeoutError,
    DuplicateRegistrationError,
    FunctionHandler,
    HandlerNotFoundError,
    MessageHandler,
    MiddlewareLimitExceededError,
    TypeBusError,
    create_command,
    create_event_handler,
    create_query,
)
from typebus.application.pipeline import LoggingMiddleware, Middleware, Next, with_logging
from typebus.factory import create_type_bus, fluent
from typebus.kernel.messaging import Command, Event, Message, Query

__version__ = "0.2.0"

__all__ = [
    "BusStats",
    "Command",
    "DispatchTimeoutError",
    "DuplicateRegistrationError",
    "Event",
    "FunctionHandler",
    "HandlerNotFoundError",
    "LoggingMiddleware",
    "Message",
    "MessageHandler",
    "Middleware",
    "MiddlewareLimitExceededError",
    "Next",
    "Query",
    "RegisteredHandlers",
    "TypeBus",
    "TypeBusError",
    "TypeBusSettings",
    "__version__",
    "create_command",
    "create_event_handler",
    "create_query",
    "create_type_bus",
    "fluent",
    "with_logging",
]
