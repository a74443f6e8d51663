"""Shared fixtures for unit tests."""

from typebus.testing.fixtures import frozen_clock, type_bus  # noqa: F401
