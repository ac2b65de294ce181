import re

from breakpeak.entity import Interval, Rejection, RejectionKind

class IntervalParser:
    _TIME_RANGE_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2})([0-9]{2}):([0-9]{2})")
    _MAX_HOUR = 23
    _MAX_MINUTE = 59

    def _reject(
            self,
            line: str,
            kind: RejectionKind,
            reason: str,
            field: str | None = None
    ) -> Rejection:
        return Rejection(line=line, kind=kind, field=field, reason=reason)

    def parse(self, line: str) -> Interval | Rejection:
        match = self._TIME_RANGE_PATTERN.fullmatch(line.strip())
        if match is None:
            return self._reject(line, RejectionKind.FORMAT, "Pattern does not match.")

        start_hour, start_minute, end_hour, end_minute = (int(group) for group in match.groups())

        bounds = [
            ("start hour", start_hour, self._MAX_HOUR),
            ("start minute", start_minute, self._MAX_MINUTE),
            ("end hour", end_hour, self._MAX_HOUR),
            ("end minute", end_minute, self._MAX_MINUTE),
        ]
        for field, value, limit in bounds:
            if value > limit:
                return self._reject(
                    line,
                    RejectionKind.RANGE,
                    f"{field.capitalize()} value is too large.",
                    field=field,
                )

        start = start_hour * 60 + start_minute
        end = end_hour * 60 + end_minute
        if start > end:
            return self._reject(line, RejectionKind.ORDERING, "Start time exceeds end time.")

        return Interval(start_minute=start, end_minute=end)
