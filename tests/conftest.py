import pytest

from breakpeak.service import BreakAccumulatorService, IntervalParser


@pytest.fixture
def parser():
    return IntervalParser()


@pytest.fixture
def accumulator():
    return BreakAccumulatorService()
