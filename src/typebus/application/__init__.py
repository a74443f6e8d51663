"""Application – bus, CQRS handlers and the middleware pipeline."""

from typebus.application.bus import BusStats, RegisteredHandlers, TypeBus, TypeBusSettings
from typebus.application.cqrs import (
    CommandHandler,
    EventHandler,
    FunctionHandler,
    HandlerRegistry,
    MessageHandler,
    QueryHandler,
)
from typebus.application.pipeline import LoggingMiddleware, Middleware, Next, Pipeline, with_logging

__all__ = [
    "BusStats",
    "CommandHandler",
    "EventHandler",
    "FunctionHandler",
    "HandlerRegistry",
    "LoggingMiddleware",
    "MessageHandler",
    "Middleware",
    "Next",
    "Pipeline",
    "QueryHandler",
    "RegisteredHandlers",
    "TypeBus",
    "TypeBusSettings",
    "with_logging",
]
