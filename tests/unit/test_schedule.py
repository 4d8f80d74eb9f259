"""Unit tests for payment dates, day counts and amount phasing"""

import math
import pytest
from datetime import date
from quote_gateway.domain.exceptions import InvalidPlanInputError
from quote_gateway.domain.models import SchedulePolicy
from quote_gateway.domain.schedule import (
    build_plan_days,
    day_gaps,
    discount_factor,
    purchase_amount_phasing,
    schedule_payment_dates,
    time_between_payments,
)
from quote_gateway.utils.date_utils import next_weekday


def test_schedule_payment_dates_weekly():
    """Test weekly steps of 7 days from the start date"""
    dates = schedule_payment_dates(4, date(2025, 1, 1))

    assert dates == [date(2025, 1, 1), date(2025, 1, 8), date(2025, 1, 15), date(2025, 1, 22)]


def test_schedule_payment_dates_monthly_month_end():
    """Test month-end start keeps its day where the month allows it"""
    dates = schedule_payment_dates(4, date(2024, 1, 31), policy=SchedulePolicy.MONTHLY)

    assert dates == [date(2024, 1, 31), date(2024, 2, 29), date(2024, 3, 31), date(2024, 4, 30)]


def test_schedule_payment_dates_anchor_and_offset():
    """Test rounding up to the anchor weekday, then shifting by whole weeks"""
    # 2025-01-01 is a Wednesday
    assert schedule_payment_dates(1, date(2025, 1, 1), anchor_weekday=0) == [date(2025, 1, 6)]
    assert schedule_payment_dates(1, date(2025, 1, 1), anchor_weekday=2) == [date(2025, 1, 1)]
    assert schedule_payment_dates(2, date(2025, 1, 1), anchor_weekday=0, offset_weeks=2) == [
        date(2025, 1, 20),
        date(2025, 1, 27),
    ]


def test_schedule_payment_dates_strictly_increasing():
    for policy in SchedulePolicy:
        dates = schedule_payment_dates(24, date(2025, 3, 31), policy=policy)
        assert all(a < b for a, b in zip(dates, dates[1:]))


def test_schedule_payment_dates_rejects_zero_count():
    with pytest.raises(InvalidPlanInputError):
        schedule_payment_dates(0, date(2025, 1, 1))


def test_next_weekday_rejects_invalid_weekday():
    with pytest.raises(ValueError):
        next_weekday(date(2025, 1, 1), 7)


def test_time_between_payments_and_plan_days():
    """Test day 0 for the first payment and actual days afterwards"""
    dates = time_between_payments(3, date(2025, 1, 15))

    assert dates == [date(2025, 1, 15), date(2025, 2, 15), date(2025, 3, 15)]
    assert build_plan_days(3, dates) == [0, 31, 59]
    assert build_plan_days(3, dates, start_date=date(2025, 1, 10)) == [5, 36, 64]
    assert build_plan_days(2, dates) == [0, 31]


def test_build_plan_days_rejects_missing_dates():
    with pytest.raises(InvalidPlanInputError):
        build_plan_days(3, [date(2025, 1, 1)])


def test_day_gaps():
    assert day_gaps([0, 31, 59]) == [0, 31, 28]
    assert day_gaps([7, 14]) == [7, 7]


def test_discount_factor():
    assert discount_factor(0.0, 100) == 1.0
    assert discount_factor(0.1, 365) == pytest.approx(1 / 1.1)
    assert discount_factor(0.1, 0) == 1.0
    assert math.isnan(discount_factor(-1.0, 30))


def test_purchase_amount_phasing_rounding():
    """Test last part absorbs remainder"""
    assert purchase_amount_phasing(4, 40003) == [10000, 10000, 10000, 10003]
    assert purchase_amount_phasing(4, 40000) == [10000] * 4
    assert purchase_amount_phasing(3, 0) == [0, 0, 0]
    assert purchase_amount_phasing(1, 12345) == [12345]


def test_purchase_amount_phasing_exact_total():
    for count in (1, 2, 3, 7, 16, 37):
        for total in (0, 1, 99, 312660, 1_000_001):
            parts = purchase_amount_phasing(count, total)
            assert len(parts) == count
            assert sum(parts) == total
            assert all(abs(p - total / count) < count for p in parts)


def test_purchase_amount_phasing_rejects_zero_count():
    with pytest.raises(InvalidPlanInputError):
        purchase_amount_phasing(0, 100)
