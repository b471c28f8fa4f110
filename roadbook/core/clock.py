"""Wall clock abstraction for use cases."""

import time
from datetime import date


class Clock:
    """System clock returning epoch milliseconds and the local calendar date."""

    def now_ms(self) -> int:
        return int(time.time() * 1000)

    def today(self) -> date:
        return date.today()


class FixedClock(Clock):
    """Clock frozen at a given instant."""

    def __init__(self, now_ms: int, today: date | None = None):
        self._now_ms = now_ms
        self._today = today or date(2024, 1, 1)

    def now_ms(self) -> int:
        return self._now_ms

    def today(self) -> date:
        return self._today

    def advance(self, millis: int) -> None:
        self._now_ms += millis


system_clock = Clock()
