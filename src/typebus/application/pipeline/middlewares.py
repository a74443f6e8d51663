"""Application pipeline – LoggingMiddleware."""
from __future__ import annotations

import dataclasses
import json
import time
from collections.abc import Mapping
from typing import Any, Literal

from typebus.application.pipeline.middleware import Middleware, Next
from typebus.kernel.messaging import Message
from typebus.observability.logging import SensitiveFieldsFilter, get_logger

LogLevel = Literal["debug", "verbose", "info", "error"]

#: Successful dispatches slower than this are logged as warnings.
SLOW_THRESHOLD_MS = 1000.0


class LoggingMiddleware(Middleware):
    """Log each dispatch with its outcome and duration.

    * ``debug`` / ``verbose`` also log ``message.started``.
    * ``debug`` adds the handler result and exception info.
    * ``error`` logs failures only; successful dispatches are not logged
      at this level.

    Failures are logged and re-raised unchanged.
    """

    def __init__(
        self,
        log_level: LogLevel = "info",
        *,
        include_data: bool = False,
        include_metadata: bool = False,
        max_data_length: int = 200,
        sensitive_fields: frozenset[str] | None = None,
        logger: Any = None,
    ) -> None:
        self._level = log_level
        self._include_data = include_data
        self._include_metadata = include_metadata
        self._max_data_length = max_data_length
        self._filter = SensitiveFieldsFilter(sensitive_fields)
        self._logger = logger or get_logger(__name__)

    async def __call__(self, message: Message, next_: Next) -> Any:
        fields: dict[str, Any] = {
            "message_id": message.id,
            "message_type": message.type,
            "kind": message.kind.value,
        }
        if self._level in ("debug", "verbose"):
            self._logger.info(
                "message.started",
                timestamp=message.timestamp.isoformat(),
                **fields,
                **self._extra(message),
            )

        start = time.perf_counter()
        try:
            result = await next_(message)
        except Exception as exc:
            duration = round((time.perf_counter() - start) * 1000, 2)
            self._logger.error(
                "message.failed",
                duration_ms=duration,
                error=str(exc),
                exc_info=self._level == "debug",
                **fields,
            )
            raise

        duration = round((time.perf_counter() - start) * 1000, 2)
        if self._level != "error":
            log = self._logger.warning if duration > SLOW_THRESHOLD_MS else self._logger.info
            if self._level == "debug":
                fields["result"] = self._truncate(result)
            log("message.succeeded", duration_ms=duration, **fields)
        return result

    def _extra(self, message: Message) -> dict[str, Any]:
        extra: dict[str, Any] = {}
        if self._include_data:
            payload = getattr(message, "data", None)
            if payload is None:
                payload = getattr(message, "params", None)
            if payload is not None:
                extra["data"] = self._sanitize(payload)
        if self._include_metadata and message.metadata:
            extra["metadata"] = self._filter.redact_deep(dict(message.metadata))
        return extra

    def _sanitize(self, payload: Any) -> Any:
        if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
            payload = dataclasses.asdict(payload)
        if isinstance(payload, Mapping):
            payload = self._filter.redact_deep(dict(payload))
        return self._truncate(payload)

    def _truncate(self, value: Any) -> Any:
        if value is None or isinstance(value, (bool, int, float)):
            return value
        try:
            rendered = json.dumps(value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            rendered = repr(value)
        if len(rendered) > self._max_data_length:
            return f"{rendered[: self._max_data_length]}..."
        return value


def with_logging(level: LogLevel = "info", *, include_data: bool = False) -> LoggingMiddleware:
    """Shortcut for a :class:`LoggingMiddleware` that also logs metadata."""
    return LoggingMiddleware(level, include_data=include_data, include_metadata=True)


__all__ = ["LogLevel", "LoggingMiddleware", "SLOW_THRESHOLD_MS", "with_logging"]
