from .Interval import Interval, MINUTES_PER_DAY, format_minute
from .PeakWindow import PeakWindow
from .Rejection import Rejection, RejectionKind

__all__ = [
    "Interval",
    "MINUTES_PER_DAY",
    "PeakWindow",
    "Rejection",
    "RejectionKind",
    "format_minute",
]
