"Tests for the date utility functions."

from datetime import datetime, timedelta, timezone

import pytest

from jira_mcp_server.utils import format_local_date, parse_date


def test_parse_date_invalid_input():
    """Test that parse_date raises for strings that are not dates."""
    with pytest.raises(ValueError):
        parse_date("invalid")


@pytest.mark.parametrize("value", [None, ""])
def test_parse_date_empty(value):
    assert parse_date(value) is None


def test_parse_date_valid():
    assert str(parse_date("2021-01-01")) == "2021-01-01 00:00:00"


def test_parse_date_epoch_as_str():
    assert str(parse_date("1612156800000")) == "2021-02-01 05:20:00+00:00"


def test_parse_date_epoch_as_int():
    assert str(parse_date(1612156800000)) == "2021-02-01 05:20:00+00:00"


def test_parse_date_jira_timestamp():
    """Test the timestamp format the Jira REST API returns."""
    assert parse_date("2024-01-15T10:30:00.000+0000") == datetime(
        2024, 1, 15, 10, 30, tzinfo=timezone.utc
    )


def test_parse_date_keeps_offset():
    parsed = parse_date("2024-01-15T10:30:00.000-0500")
    assert parsed.utcoffset() == timedelta(hours=-5)


@pytest.mark.parametrize("value", [None, ""])
def test_format_local_date_empty(value):
    assert format_local_date(value) is None


def test_format_local_date_month_day_year():
    """Test that month and day are not zero padded."""
    assert format_local_date("2024-03-05T12:00:00.000") == "3/5/2024"


def test_format_local_date_converts_to_local_timezone():
    """Test that the calendar date is taken in the local timezone."""
    local = datetime(2024, 1, 15, 23, 30, tzinfo=timezone.utc).astimezone()
    expected = f"{local.month}/{local.day}/{local.year}"

    assert format_local_date("2024-01-15T23:30:00.000+0000") == expected


def test_format_local_date_unparseable():
    """Test that values that are not dates are shown unchanged."""
    assert format_local_date("sometime next week") == "sometime next week"
