import math
import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from echoveil_ui.scheduling import DelayedActionScheduler, ManualScheduler, TimerSlot


class _CountingScheduler(ManualScheduler):
    """Records how many timers were already pending each time one is started."""

    def __init__(self) -> None:
        super().__init__()
        self.armed_at_start: list[int] = []

    def start(self, interval, repeats, callback):
        self.armed_at_start.append(self.pending)
        return super().start(interval, repeats, callback)


class DelayedActionSchedulerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = ManualScheduler()
        self.delays = DelayedActionScheduler(self.clock)
        self.fired: list[float] = []

    def _record(self) -> None:
        self.fired.append(self.clock.now)

    def test_one_shot_fires_once_after_delay(self) -> None:
        attachment = self.delays.schedule_on_appear(1.5, self._record)
        attachment.attach()

        self.clock.advance(1.4)
        self.assertEqual(self.fired, [])

        self.clock.advance(10)
        self.assertEqual(self.fired, [1.5])
        self.assertFalse(attachment.owner.armed)
        self.assertEqual(self.clock.pending, 0)

    def test_nothing_fires_before_owner_appears(self) -> None:
        self.delays.schedule_on_appear(0.5, self._record)

        self.clock.advance(5)
        self.assertEqual(self.fired, [])

    def test_repeating_fires_every_interval(self) -> None:
        attachment = self.delays.schedule_on_appear(0.5, self._record, repeats=True)
        attachment.attach()

        self.clock.advance(3.0)

        self.assertEqual(len(self.fired), 6)
        gaps = [later - earlier for earlier, later in zip(self.fired, self.fired[1:])]
        self.assertTrue(all(gap >= 0.5 for gap in gaps))
        self.assertTrue(attachment.attached)
        self.assertEqual(attachment.owner.handle.fire_count, 6)

    def test_fractional_interval_fires_on_every_tick(self) -> None:
        attachment = self.delays.schedule_on_appear(0.1, self._record, repeats=True)
        attachment.attach()

        self.clock.advance(0.3)
        self.assertEqual(len(self.fired), 3)

        for _ in range(7):
            self.clock.advance(0.1)
        self.assertEqual(len(self.fired), 10)
        self.assertEqual(attachment.owner.handle.fire_count, 10)

    def test_rearming_cancels_previous_timer(self) -> None:
        owner = TimerSlot()
        first: list[str] = []
        second: list[str] = []
        self.delays.schedule_on_appear(1.0, lambda: first.append("a"), owner=owner).attach()
        self.clock.advance(0.5)

        self.delays.schedule_on_appear(1.0, lambda: second.append("b"), owner=owner).attach()
        self.clock.advance(5)

        self.assertEqual(first, [])
        self.assertEqual(second, ["b"])

    def test_rearming_never_holds_two_timers(self) -> None:
        clock = _CountingScheduler()
        delays = DelayedActionScheduler(clock)
        owner = TimerSlot()
        attachment = delays.schedule_on_appear(1.0, self._record, owner=owner)

        attachment.attach()
        delays.schedule_on_appear(1.0, self._record, owner=owner).attach()
        attachment.attach()

        self.assertEqual(clock.armed_at_start, [0, 0, 0])
        self.assertEqual(clock.pending, 1)

    def test_teardown_before_delay_prevents_firing(self) -> None:
        attachment = self.delays.schedule_on_appear(1.0, self._record, repeats=True)
        attachment.attach()
        self.clock.advance(0.9)

        attachment.detach()
        self.clock.advance(10)

        self.assertEqual(self.fired, [])
        self.assertFalse(attachment.owner.armed)

    def test_teardown_stops_repeating_timer(self) -> None:
        attachment = self.delays.schedule_on_appear(1.0, self._record, repeats=True)
        attachment.attach()
        self.clock.advance(2.5)
        attachment.detach()
        self.clock.advance(10)

        self.assertEqual(self.fired, [1.0, 2.0])

    def test_stale_detach_keeps_newer_timer(self) -> None:
        owner = TimerSlot()
        stale = self.delays.schedule_on_appear(1.0, lambda: None, owner=owner)
        stale.attach()
        current = self.delays.schedule_on_appear(1.0, self._record, owner=owner)
        current.attach()

        stale.detach()
        self.clock.advance(1.0)

        self.assertEqual(self.fired, [1.0])

    def test_reappearing_restarts_the_delay(self) -> None:
        attachment = self.delays.schedule_on_appear(1.0, self._record)
        attachment.attach()
        self.clock.advance(0.75)
        attachment.detach()
        attachment.attach()

        self.clock.advance(0.75)
        self.assertEqual(self.fired, [])
        self.clock.advance(0.25)
        self.assertEqual(self.fired, [1.75])

    def test_schedule_once_survives_owner_teardown(self) -> None:
        attachment = self.delays.schedule_on_appear(0.5, lambda: None)
        attachment.attach()
        self.delays.schedule_once(0.5, self._record)

        attachment.detach()
        self.clock.advance(0.5)
        self.clock.advance(5)

        self.assertEqual(self.fired, [0.5])

    def test_timers_fire_in_due_order(self) -> None:
        order: list[str] = []
        self.delays.schedule_on_appear(2.0, lambda: order.append("slow")).attach()
        self.delays.schedule_on_appear(1.0, lambda: order.append("fast")).attach()
        self.delays.schedule_once(1.0, lambda: order.append("once"))

        self.clock.advance(3)

        self.assertEqual(order, ["fast", "once", "slow"])

    def test_rejects_invalid_delays(self) -> None:
        for delay in (0, -1, math.nan, math.inf):
            with self.subTest(delay=delay):
                with self.assertRaises(ValueError):
                    self.delays.schedule_on_appear(delay, self._record)
                with self.assertRaises(ValueError):
                    self.delays.schedule_once(delay, self._record)
        self.assertEqual(self.clock.pending, 0)

    def test_raising_action_propagates_and_leaves_nothing_armed(self) -> None:
        def explode() -> None:
            raise RuntimeError("boom")

        attachment = self.delays.schedule_on_appear(1.0, explode)
        attachment.attach()

        with self.assertRaises(RuntimeError):
            self.clock.advance(1.0)
        self.assertFalse(attachment.owner.armed)

        self.clock.advance(5)
        self.assertEqual(self.clock.pending, 0)

    def test_manual_clock_refuses_to_rewind(self) -> None:
        with self.assertRaises(ValueError):
            self.clock.advance(-1)


if __name__ == "__main__":
    unittest.main()
