"""Kernel time – Clock port + implementations."""
from typebus.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
