"""CQRS – message handler ports."""
from __future__ import annotations

import abc
from typing import Any, Awaitable, Callable, Generic, TypeVar

from typebus.kernel.messaging import Command, Event, Message, Query

M = TypeVar("M", bound=Message)
R = TypeVar("R")


class MessageHandler(abc.ABC, Generic[M, R]):
    """Consume one envelope and produce one result."""

    @abc.abstractmethod
    async def handle(self, message: M) -> R: ...


CommandHandler = MessageHandler[Command[Any], Any]
QueryHandler = MessageHandler[Query[Any], Any]
EventHandler = MessageHandler[Event[Any], None]


class FunctionHandler(MessageHandler[M, R]):
    """Adapt a plain ``async def fn(message)`` into a :class:`MessageHandler`."""

    def __init__(self, fn: Callable[[M], Awaitable[R]], *, name: str | None = None) -> None:
        self._fn = fn
        self.name = name or getattr(fn, "__qualname__", repr(fn))

    async def handle(self, message: M) -> R:
        return await self._fn(message)

    def __repr__(self) -> str:
        return f"FunctionHandler({self.name})"


__all__ = [
    "CommandHandler",
    "EventHandler",
    "FunctionHandler",
    "MessageHandler",
    "QueryHandler",
]
