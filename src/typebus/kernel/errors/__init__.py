"""Kernel error hierarchy: public re-exports.

Hierarchy::

    BaseError
    └── ApplicationError     (application.py)
        ├── TimeoutError
        ├── ConfigError                  (typebus.config.validation)
        └── TypeBusError                 (typebus.application.cqrs.errors)
            ├── HandlerNotFoundError
            ├── DuplicateRegistrationError
            ├── MiddlewareLimitExceededError
            └── DispatchTimeoutError     (also a TimeoutError)
"""

from typebus.kernel.errors.application import ApplicationError, TimeoutError
from typebus.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "TimeoutError",
]
