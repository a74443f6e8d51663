"""TypeBus – in-process CQRS dispatch core.

Usage::

    bus = TypeBus(TypeBusSettings(command_timeout_ms=5_000))
    bus.use(LoggingMiddleware())
    bus.register_command_handler("User.CreateUser", CreateUserHandler())
    user_id = await bus.execute_command("User.CreateUser", {"name": "ada"}, "user-1")

Timeouts are advisory: a dispatch that exceeds its deadline raises
:class:`DispatchTimeoutError` to the caller, but the handler keeps running
in the background and its late outcome is dropped.
"""
from __future__ import annotations

import asyncio
from typing import Any

from typebus.application.bus.settings import TypeBusSettings
from typebus.application.bus.stats import BusStats, RegisteredHandlers
from typebus.application.cqrs.errors import (
    DispatchTimeoutError,
    HandlerNotFoundError,
    MiddlewareLimitExceededError,
)
from typebus.application.cqrs.handlers import MessageHandler
from typebus.application.cqrs.registry import HandlerRegistry
from typebus.application.pipeline import Middleware, Pipeline
from typebus.kernel.messaging import Message, MessageFactory, MessageKind, Metadata
from typebus.kernel.time import Clock
from typebus.observability.logging import get_logger

logger = get_logger(__name__)


class TypeBus:
    """Route commands, queries and events through the middleware pipeline."""

    def __init__(
        self,
        settings: TypeBusSettings | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._settings = settings or TypeBusSettings()
        self._registry = HandlerRegistry()
        self._middlewares: list[Middleware] = []
        self._factory = MessageFactory(clock)
        # Abandoned invocations stay referenced here until they settle.
        self._inflight: set[asyncio.Future[Any]] = set()

    @property
    def settings(self) -> TypeBusSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Middleware
    # ------------------------------------------------------------------

    def use(self, middleware: Middleware) -> None:
        """Append *middleware*; registration order is outermost first."""
        if len(self._middlewares) >= self._settings.max_middleware:
            raise MiddlewareLimitExceededError(self._settings.max_middleware)
        self._middlewares.append(middleware)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_command_handler(self, command_type: str, handler: MessageHandler[Any, Any]) -> None:
        self._registry.register_command_handler(command_type, handler)
        self._debug("bus.handler_registered", kind=MessageKind.COMMAND.value, message_type=command_type)

    def register_query_handler(self, query_type: str, handler: MessageHandler[Any, Any]) -> None:
        self._registry.register_query_handler(query_type, handler)
        self._debug("bus.handler_registered", kind=MessageKind.QUERY.value, message_type=query_type)

    def register_event_handler(self, event_type: str, handler: MessageHandler[Any, Any]) -> None:
        total = self._registry.register_event_handler(event_type, handler)
        self._debug(
            "bus.handler_registered",
            kind=MessageKind.EVENT.value,
            message_type=event_type,
            subscribers=total,
        )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def execute_command(
        self,
        command_type: str,
        data: Any,
        aggregate_id: str,
        metadata: Metadata | None = None,
    ) -> Any:
        handler = self._registry.lookup_command(command_type)
        if handler is None:
            raise HandlerNotFoundError(MessageKind.COMMAND, command_type)
        command = self._factory.create_command(command_type, data, aggregate_id, metadata)
        return await self._dispatch(
            command, handler, self._snapshot_pipeline(), self._settings.command_timeout_ms
        )

    async def execute_query(
        self,
        query_type: str,
        params: Any,
        metadata: Metadata | None = None,
    ) -> Any:
        handler = self._registry.lookup_query(query_type)
        if handler is None:
            raise HandlerNotFoundError(MessageKind.QUERY, query_type)
        query = self._factory.create_query(query_type, params, metadata)
        return await self._dispatch(
            query, handler, self._snapshot_pipeline(), self._settings.query_timeout_ms
        )

    async def publish_event(
        self,
        event_type: str,
        data: Any,
        aggregate_id: str,
        version: int,
        metadata: Metadata | None = None,
    ) -> None:
        """Deliver one event to every subscriber concurrently.

        Succeeds only if every handler succeeds; otherwise raises the first
        failure in registration order among those that have settled.  Sibling
        invocations are never cancelled.
        """
        handlers = self._registry.lookup_events(event_type)
        event = self._factory.create_event(event_type, data, aggregate_id, version, metadata)
        if not handlers:
            if self._settings.enable_logging:
                logger.debug("bus.event_without_subscribers", message_type=event_type, message_id=event.id)
            return

        pipeline = self._snapshot_pipeline()
        timeout_ms = self._settings.command_timeout_ms
        tasks = [
            self._track(asyncio.ensure_future(self._dispatch(event, handler, pipeline, timeout_ms)))
            for handler in handlers
        ]
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        for task in tasks:
            if task in done and (task.cancelled() or task.exception() is not None):
                task.result()

    # ------------------------------------------------------------------
    # Lifecycle / introspection
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Drop every handler and middleware; the bus stays usable."""
        self._registry.clear()
        self._middlewares.clear()
        if self._settings.enable_logging:
            logger.info("bus.cleared")

    def get_stats(self) -> BusStats:
        commands, queries, events = self._registry.counts()
        return BusStats(
            command_handlers=commands,
            query_handlers=queries,
            event_handlers=events,
            middleware=len(self._middlewares),
            settings=self._settings,
        )

    def get_registered_handlers(self) -> RegisteredHandlers:
        return RegisteredHandlers(
            commands=self._registry.command_types,
            queries=self._registry.query_types,
            events=self._registry.event_types,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _snapshot_pipeline(self) -> Pipeline:
        return Pipeline(self._middlewares)

    async def _dispatch(
        self,
        message: Message,
        handler: MessageHandler[Any, Any],
        pipeline: Pipeline,
        timeout_ms: int,
    ) -> Any:
        """Race the chain against *timeout_ms*; the first to settle wins."""
        invocation = asyncio.ensure_future(pipeline.build(handler.handle)(message))
        try:
            done, _ = await asyncio.wait({invocation}, timeout=timeout_ms / 1000)
        except asyncio.CancelledError:
            self._track(invocation)
            raise
        if invocation in done:
            return invocation.result()
        self._track(invocation)
        raise DispatchTimeoutError(message.type, timeout_ms)

    def _track(self, future: asyncio.Future[Any]) -> asyncio.Future[Any]:
        self._inflight.add(future)
        future.add_done_callback(self._settle)
        return future

    def _settle(self, future: asyncio.Future[Any]) -> None:
        self._inflight.discard(future)
        if not future.cancelled():
            # Mark the outcome as retrieved so late failures are dropped silently.
            future.exception()

    def _debug(self, event: str, **fields: Any) -> None:
        if self._settings.enable_logging and self._settings.log_level == "debug":
            logger.debug(event, **fields)


__all__ = ["TypeBus"]
