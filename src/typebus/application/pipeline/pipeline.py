"""Application pipeline – Pipeline class (onion composition)."""
from __future__ import annotations

from typing import Any, Iterable

from typebus.application.pipeline.middleware import Handler, Middleware, Next
from typebus.kernel.messaging import Message


class _Link:
    """One layer of a built chain: a middleware bound to its continuation."""

    __slots__ = ("middleware", "next_")

    def __init__(self, middleware: Middleware, next_: Next) -> None:
        self.middleware = middleware
        self.next_ = next_

    async def __call__(self, message: Message) -> Any:
        return await self.middleware(message, self.next_)

    def __repr__(self) -> str:
        return f"_Link({type(self.middleware).__name__} -> {self.next_!r})"


class Pipeline:
    """Builds and executes an ordered chain of middleware around a handler.

    The first middleware added is the outermost layer: its pre-logic runs
    first and its post-logic runs last.
    """

    def __init__(self, middlewares: Iterable[Middleware] = ()) -> None:
        self._middlewares: list[Middleware] = list(middlewares)

    def add(self, middleware: Middleware) -> "Pipeline":
        """Append a middleware (fluent API)."""
        self._middlewares.append(middleware)
        return self

    @property
    def middlewares(self) -> tuple[Middleware, ...]:
        return tuple(self._middlewares)

    def __len__(self) -> int:
        return len(self._middlewares)

    def build(self, handler: Handler) -> Next:
        """Fold the middleware list, last to first, around *handler*."""
        chain: Next = handler
        for mw in reversed(self._middlewares):
            chain = _Link(mw, chain)
        return chain

    async def execute(self, message: Message, handler: Handler) -> Any:
        """Execute the full chain, ending with *handler*."""
        return await self.build(handler)(message)


__all__ = ["Pipeline"]
