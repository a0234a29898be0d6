"""Delayed and repeating UI actions bound to an owner's visible lifetime."""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

Action = Callable[[], None]

# Float slack when deciding whether a manual timer is due.
_TOLERANCE = 1e-9


class PlatformTimer(Protocol):
    """Opaque timer reference returned by a :class:`UiScheduler`."""

    def stop(self) -> None: ...


class UiScheduler(Protocol):
    """Runs callbacks on the UI thread after a delay."""

    def start(self, interval: float, repeats: bool, callback: Action) -> PlatformTimer: ...


def validate_delay(delay: float) -> float:
    """Return ``delay`` as a float, rejecting non-positive or non-finite values."""

    value = float(delay)
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"Delay must be a positive number of seconds, got {delay!r}")
    return value


class TimerHandle:
    """At most one armed timer, exclusively owning its platform reference."""

    def __init__(
        self,
        scheduler: UiScheduler,
        interval_seconds: float,
        action: Action,
        is_repeating: bool = False,
    ) -> None:
        self.interval_seconds = validate_delay(interval_seconds)
        self.is_repeating = is_repeating
        self.fire_count = 0
        self._action = action
        self._timer: Optional[PlatformTimer] = scheduler.start(
            self.interval_seconds, is_repeating, self._fire
        )
        logger.debug(
            "Armed %s timer every %.3fs", "repeating" if is_repeating else "one-shot",
            self.interval_seconds,
        )

    @property
    def active(self) -> bool:
        return self._timer is not None

    def cancel(self) -> None:
        """Stop the timer and release its platform resource. Idempotent."""

        if self._timer is None:
            return
        timer, self._timer = self._timer, None
        timer.stop()
        logger.debug("Cancelled timer after %d firing(s)", self.fire_count)

    def _fire(self) -> None:
        if self._timer is None:
            return
        self.fire_count += 1
        if not self.is_repeating:
            # Released before the action runs so a raising action leaves nothing armed.
            self._timer = None
        self._action()


class TimerSlot:
    """The owner side of a timer: holds at most one live :class:`TimerHandle`."""

    def __init__(self) -> None:
        self._handle: Optional[TimerHandle] = None

    @property
    def handle(self) -> Optional[TimerHandle]:
        if self._handle is not None and not self._handle.active:
            self._handle = None
        return self._handle

    @property
    def armed(self) -> bool:
        return self.handle is not None

    def replace(self, handle: TimerHandle) -> None:
        """Install ``handle``, cancelling whatever was armed before."""

        if self._handle is not None and self._handle is not handle:
            self._handle.cancel()
        self._handle = handle

    def release(self, handle: Optional[TimerHandle] = None) -> None:
        """Cancel the held handle, or only ``handle`` when it is still the one held."""

        if self._handle is None:
            return
        if handle is not None and handle is not self._handle:
            return
        self._handle.cancel()
        self._handle = None


class TimerAttachment:
    """Declarative "on appear" timer; the host calls :meth:`attach` and :meth:`detach`."""

    def __init__(
        self,
        scheduler: UiScheduler,
        owner: TimerSlot,
        delay: float,
        action: Action,
        repeats: bool = False,
    ) -> None:
        self.scheduler = scheduler
        self.owner = owner
        self.delay = validate_delay(delay)
        self.action = action
        self.repeats = repeats
        self._handle: Optional[TimerHandle] = None

    @property
    def attached(self) -> bool:
        return self._handle is not None and self._handle is self.owner.handle

    def attach(self) -> TimerHandle:
        """Owner became visible: arm a fresh timer, superseding the owner's previous one."""

        self.owner.release()
        handle = TimerHandle(self.scheduler, self.delay, self.action, self.repeats)
        self.owner.replace(handle)
        self._handle = handle
        return handle

    def detach(self) -> None:
        """Owner was removed: cancel the timer this attachment armed, if still held."""

        if self._handle is None:
            return
        self.owner.release(self._handle)
        self._handle.cancel()
        self._handle = None


class DelayedActionScheduler:
    """Entry point for delayed UI actions.

    ``schedule_on_appear`` returns an attachment tied to an owner's lifetime;
    ``schedule_once`` is fire-and-forget and nothing cancels it.
    """

    def __init__(self, scheduler: UiScheduler) -> None:
        self.scheduler = scheduler

    def schedule_on_appear(
        self,
        delay: float,
        action: Action,
        repeats: bool = False,
        owner: Optional[TimerSlot] = None,
    ) -> TimerAttachment:
        return TimerAttachment(
            self.scheduler,
            owner if owner is not None else TimerSlot(),
            delay,
            action,
            repeats,
        )

    def schedule_once(self, delay: float, action: Action) -> None:
        interval = validate_delay(delay)
        self.scheduler.start(interval, False, action)
        logger.debug("Scheduled fire-and-forget action in %.3fs", interval)


class _ManualTimer:
    def __init__(self, origin: float, interval: float, repeats: bool, callback: Action) -> None:
        self.origin = origin
        self.firings = 0
        self.interval = interval
        self.repeats = repeats
        self.callback = callback
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class ManualScheduler:
    """Deterministic scheduler driven by :meth:`advance` instead of a wall clock."""

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[tuple[float, int, _ManualTimer]] = []
        self._sequence = itertools.count()

    def start(self, interval: float, repeats: bool, callback: Action) -> _ManualTimer:
        timer = _ManualTimer(self.now, interval, repeats, callback)
        self._push(self.now + interval, timer)
        return timer

    @property
    def pending(self) -> int:
        """Number of timers still waiting to fire."""

        return sum(1 for _, _, timer in self._queue if not timer.stopped)

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing every timer that comes due, in due order."""

        if seconds < 0:
            raise ValueError("Cannot move the clock backwards")
        target = self.now + seconds
        while self._queue and self._queue[0][0] <= target + _TOLERANCE:
            due, _, timer = heapq.heappop(self._queue)
            if timer.stopped:
                continue
            self.now = due
            timer.firings += 1
            if timer.repeats:
                # Multiplied from the origin so rounding does not accumulate.
                self._push(timer.origin + (timer.firings + 1) * timer.interval, timer)
            else:
                timer.stopped = True
            timer.callback()
        self.now = max(self.now, target)

    def _push(self, due: float, timer: _ManualTimer) -> None:
        heapq.heappush(self._queue, (due, next(self._sequence), timer))
