"""Unit tests for HandlerRegistry."""

from __future__ import annotations

import pytest

from typebus.application.cqrs import DuplicateRegistrationError, HandlerRegistry
from typebus.testing import RecordingHandler


class TestCommandAndQueryRegistration:
    def test_lookup_absent_returns_none(self) -> None:
        registry = HandlerRegistry()
        assert registry.lookup_command("Missing") is None
        assert registry.lookup_query("Missing") is None

    def test_register_and_lookup_command(self) -> None:
        registry = HandlerRegistry()
        handler = RecordingHandler()
        registry.register_command_handler("User.CreateUser", handler)
        assert registry.lookup_command("User.CreateUser") is handler

    def test_duplicate_command_rejected_and_original_kept(self) -> None:
        registry = HandlerRegistry()
        original, second = RecordingHandler(), RecordingHandler()
        registry.register_command_handler("User.CreateUser", original)

        with pytest.raises(DuplicateRegistrationError) as exc_info:
            registry.register_command_handler("User.CreateUser", second)

        assert exc_info.value.kind == "command"
        assert registry.lookup_command("User.CreateUser") is original
        assert registry.command_types == ("User.CreateUser",)

    def test_duplicate_query_rejected(self) -> None:
        registry = HandlerRegistry()
        registry.register_query_handler("User.GetUser", RecordingHandler())
        with pytest.raises(DuplicateRegistrationError, match="Query handler for 'User.GetUser'"):
            registry.register_query_handler("User.GetUser", RecordingHandler())

    def test_command_and_query_namespaces_are_independent(self) -> None:
        registry = HandlerRegistry()
        registry.register_command_handler("Same.Name", RecordingHandler())
        registry.register_query_handler("Same.Name", RecordingHandler())
        assert registry.counts() == (1, 1, 0)


class TestEventRegistration:
    def test_lookup_absent_returns_empty(self) -> None:
        assert HandlerRegistry().lookup_events("Nothing") == ()

    def test_multiple_handlers_kept_in_order(self) -> None:
        registry = HandlerRegistry()
        handlers = [RecordingHandler(name=str(i)) for i in range(3)]
        for i, handler in enumerate(handlers, start=1):
            assert registry.register_event_handler("User.Created", handler) == i
        assert registry.lookup_events("User.Created") == tuple(handlers)

    def test_same_handler_may_subscribe_twice(self) -> None:
        registry = HandlerRegistry()
        handler = RecordingHandler()
        registry.register_event_handler("E", handler)
        registry.register_event_handler("E", handler)
        assert registry.lookup_events("E") == (handler, handler)

    def test_lookup_returns_snapshot(self) -> None:
        registry = HandlerRegistry()
        registry.register_event_handler("E", RecordingHandler())
        snapshot = registry.lookup_events("E")
        registry.register_event_handler("E", RecordingHandler())
        assert len(snapshot) == 1


class TestIntrospectionAndClear:
    def test_counts_sum_event_bindings(self) -> None:
        registry = HandlerRegistry()
        registry.register_command_handler("C", RecordingHandler())
        registry.register_event_handler("E1", RecordingHandler())
        registry.register_event_handler("E1", RecordingHandler())
        registry.register_event_handler("E2", RecordingHandler())
        assert registry.counts() == (1, 0, 3)
        assert registry.event_types == ("E1", "E2")

    def test_clear_empties_everything(self) -> None:
        registry = HandlerRegistry()
        registry.register_command_handler("C", RecordingHandler())
        registry.register_query_handler("Q", RecordingHandler())
        registry.register_event_handler("E", RecordingHandler())

        registry.clear()

        assert registry.counts() == (0, 0, 0)
        assert registry.command_types == registry.query_types == registry.event_types == ()
        registry.register_command_handler("C", RecordingHandler())
