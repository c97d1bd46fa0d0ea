"""Test helpers package."""

from tests.helpers.clock import FakeClock, FakeScheduler
from tests.helpers.wait import wait_until

__all__ = ["FakeClock", "FakeScheduler", "wait_until"]
