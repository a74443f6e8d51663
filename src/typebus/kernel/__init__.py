"""Kernel – framework-agnostic building blocks (errors, clock, envelopes)."""

from typebus.kernel.errors import ApplicationError, BaseError, TimeoutError

__all__ = [
    "ApplicationError",
    "BaseError",
    "TimeoutError",
]
