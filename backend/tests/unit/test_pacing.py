"""
Unit tests for notifications/pacing.py
"""

import unittest

from notifications.pacing import RateLimiter


class FakeClock:
    """Clock whose sleep() just advances time."""

    def __init__(self, start: float = 100.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class TestRateLimiter(unittest.TestCase):
    """Tests for RateLimiter"""

    def setUp(self):
        self.clock = FakeClock()
        self.limiter = RateLimiter(1.0, clock=self.clock, sleep=self.clock.sleep)

    def test_first_wait_does_not_sleep(self):
        self.limiter.wait()

        self.assertEqual(self.clock.sleeps, [])

    def test_back_to_back_waits_are_spaced(self):
        for _ in range(3):
            self.limiter.wait()

        self.assertEqual(self.clock.sleeps, [1.0, 1.0])

    def test_elapsed_time_is_credited(self):
        self.limiter.wait()
        self.clock.now += 0.4

        self.limiter.wait()

        self.assertEqual(len(self.clock.sleeps), 1)
        self.assertAlmostEqual(self.clock.sleeps[0], 0.6)

    def test_no_sleep_after_interval_passed(self):
        self.limiter.wait()
        self.clock.now += 5

        self.limiter.wait()

        self.assertEqual(self.clock.sleeps, [])

    def test_zero_interval_never_sleeps(self):
        limiter = RateLimiter(0, clock=self.clock, sleep=self.clock.sleep)
        for _ in range(3):
            limiter.wait()

        self.assertEqual(self.clock.sleeps, [])

    def test_negative_interval_rejected(self):
        with self.assertRaises(ValueError):
            RateLimiter(-1)


if __name__ == "__main__":
    unittest.main()
