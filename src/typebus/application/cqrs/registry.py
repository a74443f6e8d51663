"""CQRS – HandlerRegistry.

Three independent mappings keyed by the message ``type`` tag:

* command type -> exactly one handler
* query type   -> exactly one handler
* event type   -> handlers in registration order

Entries are never removed individually; :meth:`HandlerRegistry.clear`
resets all three at once.
"""
from __future__ import annotations

from typing import Any

from typebus.application.cqrs.errors import DuplicateRegistrationError
from typebus.application.cqrs.handlers import MessageHandler
from typebus.kernel.messaging import MessageKind


class HandlerRegistry:
    def __init__(self) -> None:
        self._commands: dict[str, MessageHandler[Any, Any]] = {}
        self._queries: dict[str, MessageHandler[Any, Any]] = {}
        self._events: dict[str, list[MessageHandler[Any, Any]]] = {}

    def register_command_handler(self, command_type: str, handler: MessageHandler[Any, Any]) -> None:
        if command_type in self._commands:
            raise DuplicateRegistrationError(MessageKind.COMMAND, command_type)
        self._commands[command_type] = handler

    def register_query_handler(self, query_type: str, handler: MessageHandler[Any, Any]) -> None:
        if query_type in self._queries:
            raise DuplicateRegistrationError(MessageKind.QUERY, query_type)
        self._queries[query_type] = handler

    def register_event_handler(self, event_type: str, handler: MessageHandler[Any, Any]) -> int:
        """Append *handler* for *event_type*; return the subscriber count."""
        handlers = self._events.setdefault(event_type, [])
        handlers.append(handler)
        return len(handlers)

    def lookup_command(self, command_type: str) -> MessageHandler[Any, Any] | None:
        return self._commands.get(command_type)

    def lookup_query(self, query_type: str) -> MessageHandler[Any, Any] | None:
        return self._queries.get(query_type)

    def lookup_events(self, event_type: str) -> tuple[MessageHandler[Any, Any], ...]:
        return tuple(self._events.get(event_type, ()))

    def clear(self) -> None:
        self._commands.clear()
        self._queries.clear()
        self._events.clear()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def command_types(self) -> tuple[str, ...]:
        return tuple(self._commands)

    @property
    def query_types(self) -> tuple[str, ...]:
        return tuple(self._queries)

    @property
    def event_types(self) -> tuple[str, ...]:
        return tuple(self._events)

    def counts(self) -> tuple[int, int, int]:
        """Return ``(commands, queries, event bindings)``."""
        return (
            len(self._commands),
            len(self._queries),
            sum(len(handlers) for handlers in self._events.values()),
        )


__all__ = ["HandlerRegistry"]
