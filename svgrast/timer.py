"""A simple monotonic stopwatch."""

from __future__ import annotations

import time


class Timer:
    """Measures the time between a call to :meth:`start` and :meth:`stop`."""

    def __init__(self) -> None:
        self._t0 = 0.0
        self._t1 = 0.0

    def start(self) -> None:
        """Record the start time."""
        self._t0 = time.monotonic()

    def stop(self) -> None:
        """Record the stop time."""
        self._t1 = time.monotonic()

    def duration(self) -> float:
        """Seconds between the last start and the last stop."""
        return self._t1 - self._t0

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()