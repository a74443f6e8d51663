"""Unit tests for LoggingMiddleware."""

from __future__ import annotations

import asyncio
import dataclasses
from typing import Any

import pytest
from structlog.testing import capture_logs

from typebus.application.pipeline import LoggingMiddleware, Pipeline, with_logging
from typebus.kernel.messaging import Message, MessageFactory
from typebus.testing import FakeClock, RecordingHandler

factory = MessageFactory(FakeClock(), id_factory=lambda: "msg-1")


def run(middleware: LoggingMiddleware, message: Message, handler: RecordingHandler) -> Any:
    return asyncio.run(Pipeline([middleware]).execute(message, handler.handle))


class TestLoggingMiddlewareOutcomes:
    def test_success_logged_at_info(self) -> None:
        message = factory.create_command("User.CreateUser", {"name": "ada"}, "u1")
        with capture_logs() as logs:
            result = run(LoggingMiddleware(), message, RecordingHandler("ok"))

        assert result == "ok"
        assert len(logs) == 1
        entry = logs[0]
        assert entry["event"] == "message.succeeded"
        assert entry["log_level"] == "info"
        assert entry["message_id"] == "msg-1"
        assert entry["message_type"] == "User.CreateUser"
        assert entry["kind"] == "command"
        assert entry["duration_ms"] >= 0
        assert "result" not in entry

    def test_failure_logged_and_reraised(self) -> None:
        boom = RuntimeError("kaput")
        message = factory.create_query("User.GetUser", {"id": "u1"})
        with capture_logs() as logs:
            with pytest.raises(RuntimeError) as exc_info:
                run(LoggingMiddleware(), message, RecordingHandler(error=boom))

        assert exc_info.value is boom
        assert [e["event"] for e in logs] == ["message.failed"]
        assert logs[0]["log_level"] == "error"
        assert logs[0]["error"] == "kaput"
        assert logs[0]["kind"] == "query"
        assert logs[0]["exc_info"] is False

    def test_slow_success_logged_as_warning(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from typebus.application.pipeline import middlewares

        monkeypatch.setattr(middlewares, "SLOW_THRESHOLD_MS", -1.0)
        message = factory.create_event("User.Created", {}, "u1", 1)
        with capture_logs() as logs:
            run(LoggingMiddleware(), message, RecordingHandler())
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["kind"] == "event"

    def test_error_level_logs_failures_only(self) -> None:
        message = factory.create_command("C", {}, "a")
        with capture_logs() as logs:
            run(LoggingMiddleware("error"), message, RecordingHandler())
        assert logs == []


class TestLoggingMiddlewareVerbosity:
    def test_debug_logs_start_result_and_exc_info(self) -> None:
        message = factory.create_command("C", {}, "a")
        with capture_logs() as logs:
            run(LoggingMiddleware("debug"), message, RecordingHandler({"id": 1}))

        assert [e["event"] for e in logs] == ["message.started", "message.succeeded"]
        assert logs[0]["timestamp"] == "2026-01-01T12:00:00+00:00"
        assert logs[1]["result"] == {"id": 1}

    def test_debug_failure_includes_exc_info(self) -> None:
        message = factory.create_command("C", {}, "a")
        with capture_logs() as logs:
            with pytest.raises(ValueError):
                run(LoggingMiddleware("debug"), message, RecordingHandler(error=ValueError("x")))
        assert logs[-1]["exc_info"] is True

    def test_verbose_logs_start_without_result(self) -> None:
        message = factory.create_command("C", {}, "a")
        with capture_logs() as logs:
            run(LoggingMiddleware("verbose"), message, RecordingHandler("r"))
        assert [e["event"] for e in logs] == ["message.started", "message.succeeded"]
        assert "result" not in logs[1]


class TestLoggingMiddlewarePayloads:
    def test_sensitive_data_redacted(self) -> None:
        message = factory.create_command("User.Login", {"user": "ada", "password": "hunter2"}, "u1")
        with capture_logs() as logs:
            run(LoggingMiddleware("verbose", include_data=True), message, RecordingHandler())
        assert logs[0]["data"] == {"user": "ada", "password": "[REDACTED]"}

    def test_query_params_used_as_data(self) -> None:
        message = factory.create_query("User.Search", {"name": "ada"})
        with capture_logs() as logs:
            run(LoggingMiddleware("verbose", include_data=True), message, RecordingHandler())
        assert logs[0]["data"] == {"name": "ada"}

    def test_dataclass_payload_converted(self) -> None:
        @dataclasses.dataclass
        class Login:
            user: str
            token: str

        message = factory.create_command("User.Login", Login("ada", "t0k3n"), "u1")
        with capture_logs() as logs:
            run(LoggingMiddleware("verbose", include_data=True), message, RecordingHandler())
        assert logs[0]["data"] == {"user": "ada", "token": "[REDACTED]"}

    def test_long_payload_truncated(self) -> None:
        message = factory.create_command("C", {"text": "x" * 500}, "a")
        with capture_logs() as logs:
            run(LoggingMiddleware("verbose", include_data=True, max_data_length=20), message, RecordingHandler())
        data = logs[0]["data"]
        assert isinstance(data, str)
        assert data.endswith("...")
        assert len(data) == 23

    def test_metadata_included_and_redacted(self) -> None:
        message = factory.create_command("C", {}, "a", {"tenant": "t1", "authorization": "Bearer x"})
        with capture_logs() as logs:
            run(LoggingMiddleware("verbose", include_metadata=True), message, RecordingHandler())
        assert logs[0]["metadata"] == {"tenant": "t1", "authorization": "[REDACTED]"}

    def test_data_omitted_by_default(self) -> None:
        message = factory.create_command("C", {"a": 1}, "a", {"m": 1})
        with capture_logs() as logs:
            run(LoggingMiddleware("verbose"), message, RecordingHandler())
        assert "data" not in logs[0]
        assert "metadata" not in logs[0]


class TestWithLogging:
    def test_includes_metadata(self) -> None:
        message = factory.create_command("C", {"a": 1}, "a", {"m": 1})
        with capture_logs() as logs:
            run(with_logging("verbose"), message, RecordingHandler())
        assert logs[0]["metadata"] == {"m": 1}
        assert "data" not in logs[0]

    def test_include_data_flag(self) -> None:
        message = factory.create_command("C", {"a": 1}, "a")
        with capture_logs() as logs:
            run(with_logging("debug", include_data=True), message, RecordingHandler())
        assert logs[0]["data"] == {"a": 1}
