"""Pytest configuration and shared fixtures."""

from typing import Callable, List

import pytest

from notepublish.storage.note_store import NoteStore
from notepublish.sync.publish_controller import PublishController

SIMPERIUM_KEY = "ABCDEF123456"
SECOND_KEY = "QWFPGJL4567890"
PUBLISH_URL = "http://x/y"


class FakeTimer:
    def __init__(self, seconds: float, callback: Callable[[], None]):
        self.seconds = seconds
        self.callback = callback
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        if self.started and not self.cancelled:
            self.callback()


class FakeTimerFactory:
    def __init__(self):
        self.timers: List[FakeTimer] = []

    def __call__(self, seconds: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(seconds, callback)
        self.timers.append(timer)
        return timer


@pytest.fixture
def storage() -> NoteStore:
    return NoteStore()


@pytest.fixture
def timer_factory() -> FakeTimerFactory:
    return FakeTimerFactory()


@pytest.fixture
def controller(timer_factory: FakeTimerFactory) -> PublishController:
    publish_controller = PublishController(timer_factory=timer_factory, confirmation_timeout=5.0)
    yield publish_controller
    publish_controller.shutdown()
