"""Application pipeline – Middleware base."""
from __future__ import annotations

import abc
from typing import Any, Awaitable, Callable

from typebus.kernel.messaging import Message

Handler = Callable[[Message], Awaitable[Any]]
Next = Callable[[Message], Awaitable[Any]]


class Middleware(abc.ABC):
    """Single node in the middleware chain.

    Implementations run code before and/or after awaiting ``next_``.  Not
    awaiting ``next_`` short-circuits the chain; whatever is returned (or
    raised) becomes the dispatch outcome.
    """

    @abc.abstractmethod
    async def __call__(self, message: Message, next_: Next) -> Any: ...


__all__ = ["Handler", "Middleware", "Next"]
