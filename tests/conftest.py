"""Shared fixtures: a display-free stand-in for the host text field."""

from __future__ import annotations

import pytest

from TimePickerController import TimePickerController


class FakeHost:
    """Records renders and runs after() callbacks on demand."""

    def __init__(self):
        self.shown: list[tuple[str, int, int]] = []
        self.timers: dict[str, tuple[int, object]] = {}
        self.cancelled: list[str] = []
        self._next_id = 0

    # host interface
    def show(self, text, start, end):
        self.shown.append((text, start, end))

    def after(self, ms, func):
        self._next_id += 1
        timer_id = f"after#{self._next_id}"
        self.timers[timer_id] = (ms, func)
        return timer_id

    def after_cancel(self, timer_id):
        self.cancelled.append(timer_id)
        self.timers.pop(timer_id, None)

    # test helpers
    def fire_timers(self):
        pending = list(self.timers.items())
        self.timers.clear()
        for _, (_, func) in pending:
            func()

    @property
    def last(self) -> tuple[str, int, int]:
        return self.shown[-1]


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def controller(host) -> TimePickerController:
    return TimePickerController(host)
