"""Application CQRS – handlers, registry, builders and bus errors."""
from typebus.application.cqrs.errors import (
    DispatchTimeoutError,
    DuplicateRegistrationError,
    HandlerNotFoundError,
    MiddlewareLimitExceededError,
    TypeBusError,
)
from typebus.application.cqrs.handlers import (
    CommandHandler,
    EventHandler,
    FunctionHandler,
    MessageHandler,
    QueryHandler,
)
from typebus.application.cqrs.registry import HandlerRegistry
from typebus.application.cqrs.builders import (
    BatchBuilder,
    CommandExecutor,
    EventPublisher,
    FluentBuilder,
    QueryExecutor,
    TypedCommandBuilder,
    TypedEventBuilder,
    TypedQueryBuilder,
    create_command,
    create_event_handler,
    create_fluent_builder,
    create_query,
)

__all__ = [
    "BatchBuilder",
    "CommandExecutor",
    "EventPublisher",
    "FluentBuilder",
    "QueryExecutor",
    "TypedCommandBuilder",
    "TypedEventBuilder",
    "TypedQueryBuilder",
    "create_command",
    "create_event_handler",
    "create_fluent_builder",
    "create_query",
    "CommandHandler",
    "DispatchTimeoutError",
    "DuplicateRegistrationError",
    "EventHandler",
    "FunctionHandler",
    "HandlerNotFoundError",
    "HandlerRegistry",
    "MessageHandler",
    "MiddlewareLimitExceededError",
    "QueryHandler",
    "TypeBusError",
]
