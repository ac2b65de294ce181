import logging

from breakpeak.entity import Interval, MINUTES_PER_DAY, PeakWindow, Rejection
from .IntervalParser import IntervalParser

logger = logging.getLogger(__name__)


class BreakAccumulatorService:
    """Per-minute count of accepted break intervals over one day.

    The table only ever grows: there is no way to withdraw an accepted
    interval. Every peak request rescans all 1440 minutes.
    """

    def __init__(self, parser: IntervalParser | None = None):
        self._counts = [0] * MINUTES_PER_DAY
        self._accepted = 0
        self._parser = parser or IntervalParser()

    @property
    def counts(self) -> list[int]:
        return list(self._counts)

    @property
    def area(self) -> int:
        return sum(self._counts)

    @property
    def accepted(self) -> int:
        return self._accepted

    def apply(self, interval: Interval) -> None:
        for minute in range(interval.start_minute, interval.end_minute + 1):
            self._counts[minute] += 1
        self._accepted += 1
        logger.debug("Applied break %s (%d accepted so far)", interval, self._accepted)

    def find_peak(self) -> PeakWindow:
        max_val = max(self._counts)

        best_start, best_end = 0, 0  # end exclusive
        run_start = None

        # Sentinel step past the last minute closes a run that reaches 23:59.
        for minute in range(MINUTES_PER_DAY + 1):
            at_max = minute < MINUTES_PER_DAY and self._counts[minute] == max_val
            if at_max:
                if run_start is None:
                    run_start = minute
                continue
            if run_start is not None:
                # Only a strictly longer run replaces the best, so the earliest of equal runs wins.
                if minute - run_start > best_end - best_start:
                    best_start, best_end = run_start, minute
                run_start = None

        return PeakWindow(start_minute=best_start, end_minute=best_end - 1, drivers=max_val)

    def submit(self, line: str) -> PeakWindow | Rejection:
        result = self._parser.parse(line)
        if isinstance(result, Rejection):
            logger.info("Rejected %r: %s", line, result.reason)
            return result

        self.apply(result)
        return self.find_peak()
