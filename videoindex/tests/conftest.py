"""Shared fixtures for videoindex tests."""

from collections.abc import Callable

import pytest


class ManualTimer:
    """Timer handle for ManualScheduler."""

    def __init__(self, when: float, callback: Callable[[], None]) -> None:
        self.when = when
        self.callback = callback
        self.fired = False
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    def cancelled(self) -> bool:
        return self._cancelled


class ManualScheduler:
    """Virtual-clock scheduler: timers only fire when the test advances time."""

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: list[ManualTimer] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self.now + delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[ManualTimer]:
        return [t for t in self.timers if not t.fired and not t.cancelled()]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due timers in time order."""
        target = self.now + seconds
        while True:
            due = [t for t in self.pending if t.when <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.when)
            self.now = timer.when
            timer.fired = True
            timer.callback()
        self.now = target


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset cached settings between tests."""
    yield

    from videoindex.config import get_settings

    get_settings.cache_clear()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def mock_settings(monkeypatch):
    """Provide a Settings object with safe test defaults."""
    from videoindex.config import Settings, get_settings

    test_settings = Settings(
        submit_latency=1.5,
        auto_close_delay=2.0,
        media_base_url="https://videoindex.test",
        media_image_prefix="/srv/store/../recallhq",
        media_temp_marker="/recallhq/temp/",
        media_static_prefix="static_media",
    )

    get_settings.cache_clear()
    monkeypatch.setattr("videoindex.config.get_settings", lambda: test_settings)

    # Modules that did `from videoindex.config import get_settings` hold
    # their own binding
    for mod_path in [
        "videoindex.services.feedback_modal",
        "videoindex.services.media_urls",
    ]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    return test_settings
