"""Unit tests for the usury-rate quarter tables"""

import calendar
import pytest
from datetime import date, timedelta
from quote_gateway.domain.rate_caps import RATE_CAP_TABLE, get_quarter, quarter_start


def _quarter_months(name: str) -> list[int]:
    index = int(name[-1])
    return [3 * (index - 1) + m for m in (1, 2, 3)]


def test_get_quarter_matches_label():
    quarter = get_quarter("2025-Q3")

    assert quarter is not None
    assert quarter.name == "2025-Q3"
    assert quarter.year == 2025


def test_get_quarter_normalizes_label():
    assert get_quarter(" 2024-q1 ") == get_quarter("2024-Q1")


@pytest.mark.parametrize("label", [None, "", "2019-Q1", "Q1", "garbage"])
def test_get_quarter_unknown_label(label):
    assert get_quarter(label) is None


def test_rate_cap_table_is_read_only():
    with pytest.raises(TypeError):
        RATE_CAP_TABLE["2030-Q1"] = RATE_CAP_TABLE["2025-Q1"]


def test_quarter_start_leap_year():
    assert quarter_start(get_quarter("2024-Q1"), 59) == date(2024, 2, 29)
    assert quarter_start(get_quarter("2025-Q1"), 58) == date(2025, 2, 28)
    assert quarter_start(get_quarter("2024-Q4"), 365) == date(2024, 12, 31)


@pytest.mark.parametrize("name", sorted(RATE_CAP_TABLE))
def test_start_offsets_are_month_boundaries(name):
    """Test every start offset is the first or last day of a month of the quarter"""
    quarter = RATE_CAP_TABLE[name]
    months = _quarter_months(name)

    for offset in quarter.start_offsets:
        start = quarter_start(quarter, offset)
        assert start.year == quarter.year
        assert start.month in months
        assert start.day == 1 or (start + timedelta(days=1)).day == 1


@pytest.mark.parametrize("name", sorted(RATE_CAP_TABLE))
def test_deferred_days_are_month_lengths(name):
    quarter = RATE_CAP_TABLE[name]

    expected = tuple(calendar.monthrange(quarter.year, m)[1] for m in _quarter_months(name))
    assert quarter.deferred_days == expected
