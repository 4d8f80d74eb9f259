"""Payment calendar: due dates, day counts and integer amount phasing"""

import math
from datetime import date
from typing import List, Optional, Sequence

from quote_gateway.domain.exceptions import InvalidPlanInputError
from quote_gateway.domain.models import SchedulePolicy
from quote_gateway.utils.date_utils import add_months, add_weeks, days_between, next_weekday

DAYS_PER_YEAR = 365  # actual/365 day count


def require_positive_count(count: int) -> None:
    if count <= 0:
        raise InvalidPlanInputError(f"Installment count must be >= 1, got {count}")


def schedule_payment_dates(
    count: int,
    start_date: date,
    policy: SchedulePolicy = SchedulePolicy.WEEKLY,
    anchor_weekday: Optional[int] = None,
    offset_weeks: int = 0,
) -> List[date]:
    """
    Generate ``count`` due dates stepping from the first due date.

    The first due date is ``start_date``, rounded up to ``anchor_weekday`` when
    one is given, then pushed ``offset_weeks`` weeks forward.

    Installment N is always computed from the first due date (first + N steps),
    never by chaining steps, so a month-end start keeps its day where the month
    allows it: Jan 31 -> Feb 28/29 -> Mar 31.
    """
    require_positive_count(count)

    first = start_date
    if anchor_weekday is not None:
        first = next_weekday(first, anchor_weekday)
    first = add_weeks(first, offset_weeks)

    if policy == SchedulePolicy.MONTHLY:
        return [add_months(first, n) for n in range(count)]
    return [add_weeks(first, n) for n in range(count)]


def time_between_payments(
    count: int,
    start_date: date,
    policy: SchedulePolicy = SchedulePolicy.MONTHLY,
) -> List[date]:
    """Target dates of a financed plan; the first one is due on start_date (day 0)"""
    return schedule_payment_dates(count, start_date, policy)


def build_plan_days(
    count: int,
    dates: Sequence[date],
    start_date: Optional[date] = None,
) -> List[int]:
    """Whole days from start_date (default: first date) to each of the first count dates"""
    require_positive_count(count)
    if len(dates) < count:
        raise InvalidPlanInputError(f"Expected at least {count} dates, got {len(dates)}")

    origin = start_date if start_date is not None else dates[0]
    return [days_between(origin, d) for d in dates[:count]]


def day_gaps(plan_days: Sequence[int]) -> List[int]:
    """Days elapsed since the previous payment (the first one is measured from day 0)"""
    gaps = []
    previous = 0
    for day in plan_days:
        gaps.append(day - previous)
        previous = day
    return gaps


def discount_factor(rate: float, days: int) -> float:
    """(1 + rate)^(-days/365), NaN where it is not defined"""
    if 1 + rate <= 0:
        return math.nan
    try:
        return (1 + rate) ** (-days / DAYS_PER_YEAR)
    except OverflowError:
        return math.nan


def purchase_amount_phasing(count: int, total: int) -> List[int]:
    """
    Split an integer amount into ``count`` near-equal integer parts.

    Every part but the last is ``total // count``; the last one absorbs the
    remainder so that the parts always sum back to ``total``.

    Example:
        40003 cents in 4 -> [10000, 10000, 10000, 10003]
    """
    require_positive_count(count)

    base_amount = total // count
    parts = [base_amount] * (count - 1)
    parts.append(total - sum(parts))
    return parts
