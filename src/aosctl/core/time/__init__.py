"""Time operations abstraction for testing."""

from aosctl.core.time.abc import Time
from aosctl.core.time.fake import FakeTime
from aosctl.core.time.real import RealTime

__all__ = ["FakeTime", "RealTime", "Time"]
