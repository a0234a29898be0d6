"""Qt event-loop scheduling and widget lifecycle binding for delayed actions."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QEvent, QObject, Qt, QTimer
from PySide6.QtWidgets import QWidget

from .scheduling import Action, DelayedActionScheduler, TimerAttachment, TimerSlot, UiScheduler

logger = logging.getLogger(__name__)


class _StoppableTimer:
    def __init__(self, scheduler: "QtScheduler", timer: QTimer) -> None:
        self._scheduler = scheduler
        self._timer = timer

    def stop(self) -> None:
        self._scheduler._release(self._timer)


class QtScheduler:
    """Run callbacks on the Qt main thread through ``QTimer``."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self.parent = parent
        self._live: set[QTimer] = set()

    def start(self, interval: float, repeats: bool, callback: Action) -> _StoppableTimer:
        timer = QTimer(self.parent)
        timer.setTimerType(Qt.TimerType.PreciseTimer)
        timer.setInterval(max(1, round(interval * 1000)))
        timer.setSingleShot(not repeats)
        timer.timeout.connect(lambda: self._on_timeout(timer, callback))  # type: ignore[arg-type]
        # Held here until it fires or stops so parentless one-shots are not collected.
        self._live.add(timer)
        timer.destroyed.connect(lambda *_: self._live.discard(timer))
        timer.start()
        return _StoppableTimer(self, timer)

    @property
    def live_timers(self) -> int:
        return len(self._live)

    def _on_timeout(self, timer: QTimer, callback: Action) -> None:
        if not timer.isSingleShot():
            callback()
            return
        self._release(timer)
        callback()

    def _release(self, timer: QTimer) -> None:
        if timer in self._live:
            self._live.discard(timer)
            timer.stop()
            timer.deleteLater()


class _LifecycleFilter(QObject):
    """Forward a widget's Show/Hide events and destruction to a timer attachment."""

    def __init__(self, widget: QWidget, attachment: TimerAttachment) -> None:
        super().__init__(widget)
        self.widget = widget
        self.attachment = attachment
        # A plain callable, so it still runs if this child goes before the signal.
        self._on_destroyed = lambda *_: attachment.detach()
        widget.installEventFilter(self)
        widget.destroyed.connect(self._on_destroyed)

    def unbind(self) -> None:
        """Stop forwarding and cancel the attachment's timer."""

        self.widget.removeEventFilter(self)
        self.widget.destroyed.disconnect(self._on_destroyed)
        self.attachment.detach()
        self.deleteLater()

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802 - Qt override
        if event.type() == QEvent.Type.Show:
            if not self.attachment.attached:
                self.attachment.attach()
        elif event.type() == QEvent.Type.Hide:
            self.attachment.detach()
        return False


_FILTER_ATTR = "_echoveil_timer_filter"
_SLOT_ATTR = "_echoveil_timer_slot"


def _slot_for(widget: QWidget) -> TimerSlot:
    slot = getattr(widget, _SLOT_ATTR, None)
    if slot is None:
        slot = TimerSlot()
        setattr(widget, _SLOT_ATTR, slot)
    return slot


def on_timer(
    widget: QWidget,
    delay: float,
    action: Action,
    repeats: bool = False,
    scheduler: Optional[UiScheduler] = None,
) -> TimerAttachment:
    """Run ``action`` ``delay`` seconds after ``widget`` appears, optionally repeating.

    Hiding or destroying the widget cancels the timer. A second call for the
    same widget replaces the first binding.
    """

    if scheduler is None:
        scheduler = QtScheduler(widget)
    attachment = DelayedActionScheduler(scheduler).schedule_on_appear(
        delay, action, repeats=repeats, owner=_slot_for(widget)
    )

    previous: Optional[_LifecycleFilter] = getattr(widget, _FILTER_ATTR, None)
    if previous is not None:
        previous.unbind()

    setattr(widget, _FILTER_ATTR, _LifecycleFilter(widget, attachment))

    if widget.isVisible():
        attachment.attach()
    logger.debug("Bound %s timer to %s", "repeating" if repeats else "one-shot", type(widget).__name__)
    return attachment


def after_delay(delay: float, action: Action, scheduler: Optional[UiScheduler] = None) -> None:
    """Fire-and-forget: run ``action`` once after ``delay`` seconds."""

    DelayedActionScheduler(scheduler or QtScheduler()).schedule_once(delay, action)
