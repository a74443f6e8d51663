"""CQRS – builders that turn plain async functions into registered handlers.

Usage::

    create_user = create_command(bus, "User.CreateUser", create_user_logic)
    user_id = await create_user.execute({"name": "ada"}, "user-1")

    api = (
        fluent(bus).batch()
        .add_query("get_user", "User.GetUser", get_user_logic)
        .add_event_handler("on_created", "User.Created", send_welcome_mail)
        .build()
    )
    await api["get_user"].execute({"id": "user-1"})
"""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Awaitable, Callable

from typebus.application.cqrs.handlers import MessageHandler
from typebus.kernel.messaging import Command, Event, Metadata, Query

if TYPE_CHECKING:
    from typebus.application.bus.type_bus import TypeBus

CommandLogic = Callable[[Any, str, Metadata | None], Awaitable[Any]]
QueryLogic = Callable[[Any, Metadata | None], Awaitable[Any]]
EventLogic = Callable[[Any, str, int, Metadata | None], Awaitable[None]]


# ---------------------------------------------------------------------------
# Handler adapters
# ---------------------------------------------------------------------------


class _CommandLogicHandler(MessageHandler[Command[Any], Any]):
    def __init__(self, logic: CommandLogic) -> None:
        self._logic = logic

    async def handle(self, message: Command[Any]) -> Any:
        return await self._logic(message.data, message.aggregate_id, message.metadata)


class _QueryLogicHandler(MessageHandler[Query[Any], Any]):
    def __init__(self, logic: QueryLogic) -> None:
        self._logic = logic

    async def handle(self, message: Query[Any]) -> Any:
        return await self._logic(message.params, message.metadata)


class _EventLogicHandler(MessageHandler[Event[Any], None]):
    def __init__(self, logic: EventLogic) -> None:
        self._logic = logic

    async def handle(self, message: Event[Any]) -> None:
        await self._logic(message.data, message.aggregate_id, message.version, message.metadata)


# ---------------------------------------------------------------------------
# Executors returned to callers
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class CommandExecutor:
    bus: TypeBus
    type: str
    handler: MessageHandler[Any, Any]

    async def execute(self, data: Any, aggregate_id: str, metadata: Metadata | None = None) -> Any:
        return await self.bus.execute_command(self.type, data, aggregate_id, metadata)


@dataclasses.dataclass(frozen=True)
class QueryExecutor:
    bus: TypeBus
    type: str
    handler: MessageHandler[Any, Any]

    async def execute(self, params: Any, metadata: Metadata | None = None) -> Any:
        return await self.bus.execute_query(self.type, params, metadata)


@dataclasses.dataclass(frozen=True)
class EventPublisher:
    bus: TypeBus
    type: str
    handler: MessageHandler[Any, Any]

    async def publish(
        self,
        data: Any,
        aggregate_id: str,
        version: int,
        metadata: Metadata | None = None,
    ) -> None:
        await self.bus.publish_event(self.type, data, aggregate_id, version, metadata)


# ---------------------------------------------------------------------------
# Typed builders
# ---------------------------------------------------------------------------


class TypedCommandBuilder:
    @staticmethod
    def create(bus: TypeBus, command_type: str, logic: CommandLogic) -> CommandExecutor:
        """Register *logic* as the handler for *command_type*.

        Raises :class:`DuplicateRegistrationError` if the type is taken.
        """
        handler = _CommandLogicHandler(logic)
        bus.register_command_handler(command_type, handler)
        return CommandExecutor(bus=bus, type=command_type, handler=handler)


class TypedQueryBuilder:
    @staticmethod
    def create(bus: TypeBus, query_type: str, logic: QueryLogic) -> QueryExecutor:
        handler = _QueryLogicHandler(logic)
        bus.register_query_handler(query_type, handler)
        return QueryExecutor(bus=bus, type=query_type, handler=handler)


class TypedEventBuilder:
    @staticmethod
    def create(bus: TypeBus, event_type: str, logic: EventLogic) -> EventPublisher:
        handler = _EventLogicHandler(logic)
        bus.register_event_handler(event_type, handler)
        return EventPublisher(bus=bus, type=event_type, handler=handler)


class BatchBuilder:
    """Register several related handlers and collect their executors by name."""

    def __init__(self, bus: TypeBus) -> None:
        self._bus = bus
        self._items: dict[str, CommandExecutor | QueryExecutor | EventPublisher] = {}

    def add_command(self, name: str, command_type: str, logic: CommandLogic) -> "BatchBuilder":
        self._items[name] = TypedCommandBuilder.create(self._bus, command_type, logic)
        return self

    def add_query(self, name: str, query_type: str, logic: QueryLogic) -> "BatchBuilder":
        self._items[name] = TypedQueryBuilder.create(self._bus, query_type, logic)
        return self

    def add_event_handler(self, name: str, event_type: str, logic: EventLogic) -> "BatchBuilder":
        self._items[name] = TypedEventBuilder.create(self._bus, event_type, logic)
        return self

    def build(self) -> dict[str, CommandExecutor | QueryExecutor | EventPublisher]:
        return dict(self._items)


class _FluentStep:
    def __init__(self, register: Callable[[Any], Any]) -> None:
        self._register = register

    def handle(self, logic: Any) -> Any:
        return self._register(logic)


class FluentBuilder:
    """``builder.command("X").handle(fn)`` style registration."""

    def __init__(self, bus: TypeBus) -> None:
        self._bus = bus

    def command(self, command_type: str) -> _FluentStep:
        return _FluentStep(lambda logic: TypedCommandBuilder.create(self._bus, command_type, logic))

    def query(self, query_type: str) -> _FluentStep:
        return _FluentStep(lambda logic: TypedQueryBuilder.create(self._bus, query_type, logic))

    def event(self, event_type: str) -> _FluentStep:
        return _FluentStep(lambda logic: TypedEventBuilder.create(self._bus, event_type, logic))

    def batch(self) -> BatchBuilder:
        return BatchBuilder(self._bus)


# ---------------------------------------------------------------------------
# Shortcuts
# ---------------------------------------------------------------------------


def create_command(bus: TypeBus, command_type: str, logic: CommandLogic) -> CommandExecutor:
    return TypedCommandBuilder.create(bus, command_type, logic)


def create_query(bus: TypeBus, query_type: str, logic: QueryLogic) -> QueryExecutor:
    return TypedQueryBuilder.create(bus, query_type, logic)


def create_event_handler(bus: TypeBus, event_type: str, logic: EventLogic) -> EventPublisher:
    return TypedEventBuilder.create(bus, event_type, logic)


def create_fluent_builder(bus: TypeBus) -> FluentBuilder:
    return FluentBuilder(bus)


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
]
