"""Application pipeline – message middleware chain."""
from typebus.application.pipeline.middleware import Handler, Middleware, Next
from typebus.application.pipeline.middlewares import LoggingMiddleware, LogLevel, with_logging
from typebus.application.pipeline.pipeline import Pipeline

__all__ = [
    "Handler",
    "LogLevel",
    "LoggingMiddleware",
    "Middleware",
    "Next",
    "Pipeline",
    "with_logging",
]
