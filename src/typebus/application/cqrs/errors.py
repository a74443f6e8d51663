"""CQRS – bus error taxonomy."""
from __future__ import annotations

from typebus.kernel.errors import ApplicationError
from typebus.kernel.errors import TimeoutError as AppTimeoutError


class TypeBusError(ApplicationError):
    """Base class for errors raised by the bus itself."""

    default_code = "type_bus_error"


class HandlerNotFoundError(TypeBusError):
    """No command/query handler is bound for the requested type."""

    default_code = "handler_not_found"

    def __init__(self, kind: str, message_type: str) -> None:
        super().__init__(
            f"No handler registered for {kind}: {message_type}",
            detail={"kind": kind, "message_type": message_type},
        )
        self.kind = kind
        self.message_type = message_type


class DuplicateRegistrationError(TypeBusError):
    """A command/query type already has a handler."""

    default_code = "duplicate_registration"

    def __init__(self, kind: str, message_type: str) -> None:
        super().__init__(
            f"{kind.capitalize()} handler for '{message_type}' already registered",
            detail={"kind": kind, "message_type": message_type},
        )
        self.kind = kind
        self.message_type = message_type


class MiddlewareLimitExceededError(TypeBusError):
    """``use()`` was called with the middleware list already full."""

    default_code = "middleware_limit_exceeded"

    def __init__(self, limit: int) -> None:
        super().__init__(
            f"Maximum number of middleware ({limit}) exceeded",
            detail={"limit": limit},
        )
        self.limit = limit


class DispatchTimeoutError(TypeBusError, AppTimeoutError):
    """The dispatch did not settle within its configured timeout."""

    default_code = "dispatch_timeout"

    def __init__(self, message_type: str, timeout_ms: int) -> None:
        super().__init__(
            f"Operation '{message_type}' timed out after {timeout_ms}ms",
            detail={"message_type": message_type, "timeout_ms": timeout_ms},
        )
        self.message_type = message_type
        self.timeout_ms = timeout_ms


__all__ = [
    "DispatchTimeoutError",
    "DuplicateRegistrationError",
    "HandlerNotFoundError",
    "MiddlewareLimitExceededError",
    "TypeBusError",
]
