"""Testing support – fakes and fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["typebus.testing.fixtures"]
"""

from typebus.testing.fakes import FakeClock, RecordingHandler, RecordingMiddleware

__all__ = ["FakeClock", "RecordingHandler", "RecordingMiddleware"]
