import os

import pytest

pytest.importorskip("PySide6")
pytest.importorskip("PySide6.QtWidgets")
pytest.importorskip("PySide6.QtTest")

import shiboken6
from PySide6.QtCore import SIGNAL
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication, QWidget

from echoveil_ui.qt_timers import QtScheduler, after_delay, on_timer
from echoveil_ui.scheduling import ManualScheduler


@pytest.fixture(scope="module")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


def test_show_arms_and_hide_cancels(qapp):
    clock = ManualScheduler()
    widget = QWidget()
    fired: list[str] = []
    on_timer(widget, 1.0, lambda: fired.append("tick"), scheduler=clock)

    assert clock.pending == 0

    widget.show()
    assert clock.pending == 1
    clock.advance(0.5)
    widget.hide()
    clock.advance(5)
    assert fired == []

    widget.show()
    clock.advance(1.0)
    assert fired == ["tick"]
    widget.close()


def test_binding_to_visible_widget_arms_immediately(qapp):
    clock = ManualScheduler()
    widget = QWidget()
    widget.show()
    fired: list[int] = []

    attachment = on_timer(widget, 0.25, lambda: fired.append(1), repeats=True, scheduler=clock)
    clock.advance(1.0)

    assert attachment.attached
    assert fired == [1, 1, 1, 1]
    widget.close()


def test_rebinding_replaces_previous_timer(qapp):
    clock = ManualScheduler()
    widget = QWidget()
    widget.show()
    fired: list[str] = []

    on_timer(widget, 1.0, lambda: fired.append("old"), scheduler=clock)
    clock.advance(0.5)
    on_timer(widget, 1.0, lambda: fired.append("new"), scheduler=clock)
    clock.advance(5)

    assert fired == ["new"]
    widget.close()


def test_rebinding_does_not_pile_up_destroy_handlers(qapp):
    clock = ManualScheduler()
    widget = QWidget()
    widget.show()
    fired: list[str] = []
    destroyed = SIGNAL("destroyed(QObject*)")

    first = on_timer(widget, 1.0, lambda: fired.append("first"), scheduler=clock)
    connections = widget.receivers(destroyed)
    for _ in range(3):
        latest = on_timer(widget, 1.0, lambda: fired.append("latest"), scheduler=clock)

    assert widget.receivers(destroyed) == connections
    assert not first.attached
    assert latest.attached
    assert clock.pending == 1

    widget.deleteLater()
    QTest.qWait(50)
    assert clock.pending == 0
    clock.advance(5)
    assert fired == []


def test_destroying_widget_before_delay_cancels_timer(qapp):
    clock = ManualScheduler()
    widget = QWidget()
    widget.show()
    fired: list[str] = []
    attachment = on_timer(widget, 1.0, lambda: fired.append("late"), scheduler=clock)
    clock.advance(0.5)

    widget.deleteLater()
    QTest.qWait(50)

    assert not shiboken6.isValid(widget)
    assert not attachment.attached
    assert clock.pending == 0
    clock.advance(5)
    assert fired == []


def test_destroying_widget_stops_its_qt_timer(qapp):
    widget = QWidget()
    widget.show()
    ticks: list[int] = []
    on_timer(widget, 0.05, lambda: ticks.append(1), repeats=True)

    widget.deleteLater()
    QTest.qWait(200)

    assert not shiboken6.isValid(widget)
    assert ticks == []


def test_qt_scheduler_runs_one_shot_on_event_loop(qapp):
    scheduler = QtScheduler()
    fired: list[str] = []
    after_delay(0.02, lambda: fired.append("done"), scheduler=scheduler)

    assert scheduler.live_timers == 1
    QTest.qWait(200)

    assert fired == ["done"]
    assert scheduler.live_timers == 0


def test_repeating_widget_timer_stops_when_hidden(qapp):
    widget = QWidget()
    ticks: list[int] = []
    on_timer(widget, 0.02, lambda: ticks.append(1), repeats=True)

    widget.show()
    QTest.qWait(200)
    assert len(ticks) >= 3

    widget.hide()
    seen = len(ticks)
    QTest.qWait(120)
    assert len(ticks) == seen
    widget.close()
