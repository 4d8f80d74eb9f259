"""Usury-rate checker - maximum fee a plan may carry under a quarter's rate ceiling"""

import math
from datetime import date
from typing import List, Optional

from quote_gateway.domain.models import Quarter, SchedulePolicy
from quote_gateway.domain.rate_caps import get_quarter, quarter_start
from quote_gateway.domain.schedule import (
    build_plan_days,
    discount_factor,
    require_positive_count,
    time_between_payments,
)

BPS = 10_000
PNX_MAX_INSTALLMENTS = 4


def _discount_sum(rate: float, plan_days: List[int]) -> float:
    total = 0.0
    for days in plan_days:
        total += discount_factor(rate, days)
    return total


def _bound_bps(count: int, rate: float, repayment_days: List[int]) -> Optional[int]:
    discount_sum = _discount_sum(rate, repayment_days)
    # far-off repayments can underflow every discount factor to 0
    if discount_sum <= 0 or not math.isfinite(discount_sum):
        return None
    bound = (count / discount_sum - 1) * BPS
    if not math.isfinite(bound):
        return None
    return math.floor(bound)


def _amortized_max_bps(count: int, rate: float, start: date, deferred_days: int) -> Optional[int]:
    """Annuity plan started on ``start``: monthly repayments, shifted by deferred_days"""
    dates = time_between_payments(count + 1, start, SchedulePolicy.MONTHLY)
    plan_days = build_plan_days(count + 1, dates, start)
    repayment_days = [days + deferred_days for days in plan_days[1:]]

    # annuity installment per unit of principal is 1 / S; the plan repays count of them
    return _bound_bps(count, rate, repayment_days)


def _pnx_max_bps(count: int, rate: float, spacing: int, deferred_days: int) -> Optional[int]:
    """
    Short plan: one unit disbursed on day 0, then count unit repayments from
    deferred_days every spacing days.

    The day-0 disbursement is the "+1" of the count + 1 cash flows; only the
    count repayments are discounted into S.
    """
    repayment_days = [deferred_days + k * spacing for k in range(count)]

    return _bound_bps(count, rate, repayment_days)


def _quarter_candidates(count: int, rate: float, quarter: Quarter, deferred_days: int) -> List[Optional[int]]:
    if count > PNX_MAX_INSTALLMENTS:
        return [
            _amortized_max_bps(count, rate, quarter_start(quarter, offset), deferred_days)
            for offset in quarter.start_offsets
        ]
    return [_pnx_max_bps(count, rate, spacing, deferred_days) for spacing in quarter.deferred_days]


def max_rate_bps(
    count: int,
    cap_rate_bps: Optional[int],
    quarter_label: Optional[str],
    deferred_days: int = 0,
) -> Optional[int]:
    """
    Maximum fee, in bps of the purchase amount, keeping the plan's TAEG under the cap.

    The cap is evaluated for every representative start date of the quarter
    (or every month length for plans of 4 installments or fewer) and the
    tightest result is returned. Candidates whose discount sum is not usable
    (underflow on very distant repayments) are skipped.

    Returns None when the quarter label is unknown, no cap rate is given or no
    candidate can be evaluated.
    """
    require_positive_count(count)

    if cap_rate_bps is None or cap_rate_bps < 0:
        return None
    quarter = get_quarter(quarter_label)
    if quarter is None:
        return None

    rate = cap_rate_bps / BPS
    candidates = [c for c in _quarter_candidates(count, rate, quarter, deferred_days) if c is not None]
    if not candidates:
        return None
    return min(candidates)
