"""Console countdown that overwrites a single line until a phase ends."""

from __future__ import annotations

import logging
import sys
import time
from typing import Callable, TextIO

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 0.5


def remaining_seconds(total: float, elapsed: float) -> float:
    """Time left in a phase, never negative."""
    return max(0.0, total - elapsed)


def format_remaining(seconds: float) -> str:
    """Format remaining time as MM:SS, truncating partial seconds."""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


class CountdownDisplay:
    """Renders the remaining time of a phase on one console line.

    Usage:
        display = CountdownDisplay()
        display.run("Work", 25 * 60)  # blocks for 25 minutes
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        poll_interval: float = POLL_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._stream = stream
        self.poll_interval = poll_interval
        self._clock = clock
        self._sleep = sleep

    def run(self, label: str, total_seconds: float) -> None:
        """Block until `total_seconds` have elapsed, redrawing every tick."""
        stream = self._stream or sys.stdout
        started_at = self._clock()

        logger.debug(f"Countdown started: {label} ({total_seconds}s)")

        elapsed = self._clock() - started_at
        while elapsed < total_seconds:
            remaining = remaining_seconds(total_seconds, elapsed)
            stream.write(f"\r{label} time remaining: {format_remaining(remaining)}")
            stream.flush()

            self._sleep(self.poll_interval)
            elapsed = self._clock() - started_at
