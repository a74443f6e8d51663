"""Testing fixtures – pytest fixtures for the bus.

Enable in ``conftest.py``::

    pytest_plugins = ["typebus.testing.fixtures"]
"""
from typebus.testing.fixtures.bus import frozen_clock, type_bus

__all__ = ["frozen_clock", "type_bus"]
