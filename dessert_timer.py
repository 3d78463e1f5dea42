from __future__ import annotations
import logging
from typing import Any, Optional

logger = logging.getLogger("dessert.timer")

class DessertTimer:
    """Counts seconds while the window is on screen.

    ``scheduler`` is usually the Tk root; only ``after`` and ``after_cancel``
    are used.
    """

    def __init__(self, scheduler: Any, interval_ms: int = 1000):
        self.scheduler = scheduler
        self.interval_ms = interval_ms
        self.seconds_count = 0
        self._job: Optional[str] = None

    @property
    def running(self) -> bool:
        return self._job is not None

    def start(self) -> None:
        if self._job is not None:
            return
        self._job = self.scheduler.after(self.interval_ms, self._tick)

    def stop(self) -> None:
        if self._job is None:
            return
        self.scheduler.after_cancel(self._job)
        self._job = None

    def _tick(self) -> None:
        self.seconds_count += 1
        logger.info("Timer is at : %d", self.seconds_count)
        self._job = self.scheduler.after(self.interval_ms, self._tick)
