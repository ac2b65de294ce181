from .BreakAccumulatorService import BreakAccumulatorService
from .IntervalParser import IntervalParser

__all__ = ["BreakAccumulatorService", "IntervalParser"]
