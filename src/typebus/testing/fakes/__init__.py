"""Testing fakes – in-memory doubles for handlers, middleware and time."""
from typebus.testing.fakes.clock import FakeClock
from typebus.testing.fakes.recording import RecordingHandler, RecordingMiddleware

__all__ = ["FakeClock", "RecordingHandler", "RecordingMiddleware"]
