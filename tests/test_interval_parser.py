import pytest

from breakpeak.entity import Interval, Rejection, RejectionKind


def test_parses_plain_range(parser):
    assert parser.parse("07:3012:15") == Interval(start_minute=450, end_minute=735)


def test_single_minute_break_is_allowed(parser):
    assert parser.parse("09:0009:00") == Interval(start_minute=540, end_minute=540)


def test_whole_day(parser):
    assert parser.parse("00:0023:59") == Interval(start_minute=0, end_minute=1439)


def test_surrounding_whitespace_is_ignored(parser):
    assert parser.parse("  09:0010:00\r") == Interval(start_minute=540, end_minute=600)


@pytest.mark.parametrize("line", [
    "10:0010:0",
    "",
    "9:0010:00",
    "09:00-10:00",
    "09:0010:00x",
    "x09:0010:00",
    "ab:cdef:gh",
    "09:0010:00 11:00",
])
def test_pattern_mismatch(parser, line):
    result = parser.parse(line)
    assert isinstance(result, Rejection)
    assert result.kind == RejectionKind.FORMAT
    assert result.field is None
    assert result.reason == "Pattern does not match."


@pytest.mark.parametrize("line, field, reason", [
    ("24:0010:00", "start hour", "Start hour value is too large."),
    ("10:6011:00", "start minute", "Start minute value is too large."),
    ("10:0024:00", "end hour", "End hour value is too large."),
    ("10:0011:60", "end minute", "End minute value is too large."),
])
def test_range_errors_name_the_field(parser, line, field, reason):
    result = parser.parse(line)
    assert isinstance(result, Rejection)
    assert result.kind == RejectionKind.RANGE
    assert result.field == field
    assert result.reason == reason


def test_first_bad_field_wins(parser):
    result = parser.parse("99:9999:99")
    assert result.field == "start hour"

    result = parser.parse("23:9999:99")
    assert result.field == "start minute"


def test_start_after_end_is_rejected(parser):
    result = parser.parse("10:0009:00")
    assert isinstance(result, Rejection)
    assert result.kind == RejectionKind.ORDERING
    assert result.reason == "Start time exceeds end time."


def test_cross_midnight_is_rejected(parser):
    result = parser.parse("23:5000:10")
    assert result.kind == RejectionKind.ORDERING


def test_message_quotes_the_line(parser):
    result = parser.parse("24:0010:00")
    assert result.message == "Failed parsing time range `24:0010:00`! Start hour value is too large."
