"""Reducing-balance amortization and TAEG (effective annual rate) solving"""

import logging
from datetime import date
from typing import List, Optional, Sequence

from quote_gateway.domain.models import AmortizedPlan, Installment, SchedulePolicy
from quote_gateway.domain.newton import optimize
from quote_gateway.domain.schedule import (
    DAYS_PER_YEAR,
    build_plan_days,
    day_gaps,
    discount_factor,
    purchase_amount_phasing,
    require_positive_count,
    time_between_payments,
)

logger = logging.getLogger(__name__)

MIN_TAEG = 0.0
MAX_TAEG = 10.0  # 1000 %


def present_value(rate: float, totals: Sequence[int], plan_days: Sequence[int]) -> float:
    """Sum of the totals discounted back to day 0 (actual/365, annual compounding)"""
    return sum(total * discount_factor(rate, days) for total, days in zip(totals, plan_days))


def _phase_plan(principal_cents: int, fee_cents: int, count: int, start_date: date, policy: SchedulePolicy):
    require_positive_count(count)
    dates = time_between_payments(count + 1, start_date, policy)
    totals = purchase_amount_phasing(count + 1, principal_cents + fee_cents)
    plan_days = build_plan_days(count + 1, dates, start_date)
    return dates, totals, plan_days


def _solve(principal_cents: int, totals: List[int], plan_days: List[int]) -> Optional[float]:
    if sum(totals) == 0:
        logger.debug("Zero plan total, no rate to solve")
        return None

    loan_amount = principal_cents - totals[0]
    financed_totals = totals[1:]
    financed_days = plan_days[1:]

    def npv(rate: float) -> float:
        return loan_amount - present_value(rate, financed_totals, financed_days)

    taeg = optimize(npv)
    if taeg is None:
        logger.debug("TAEG solver did not converge")
        return None
    if taeg < MIN_TAEG or taeg > MAX_TAEG:
        logger.debug("Rejected out-of-range TAEG %s", taeg)
        return None
    return taeg


def solve_taeg(
    principal_cents: int,
    fee_cents: int,
    count: int,
    start_date: date,
    policy: SchedulePolicy = SchedulePolicy.MONTHLY,
) -> Optional[float]:
    """Effective annual rate implied by the plan, or None if it cannot be solved"""
    _, totals, plan_days = _phase_plan(principal_cents, fee_cents, count, start_date, policy)
    return _solve(principal_cents, totals, plan_days)


def build_amortized_plan(
    principal_cents: int,
    fee_cents: int,
    count: int,
    start_date: date,
    policy: SchedulePolicy = SchedulePolicy.MONTHLY,
) -> AmortizedPlan:
    """
    Build a reducing-balance payment plan and its TAEG.

    ``principal + fee`` is phased over ``count + 1`` payments. The first one is
    an upfront payment due on ``start_date``; only the ``count`` following
    payments amortize the financed balance ``principal - upfront``.

    Each financed payment is split into interest on the remaining balance over
    the days since the previous payment, and principal. The remaining balance is
    carried as a float and the last payment absorbs the rounding residue, so
    principals sum to ``principal_cents`` exactly.

    Returns:
        AmortizedPlan with ``count + 1`` installments, or with no installment
        and ``taeg=None`` when no acceptable rate exists.
    """
    dates, totals, plan_days = _phase_plan(principal_cents, fee_cents, count, start_date, policy)

    taeg = _solve(principal_cents, totals, plan_days)
    if taeg is None:
        return AmortizedPlan(taeg=None, installments=[])

    loan_amount = principal_cents - totals[0]
    installments = [
        Installment(
            due_date=dates[0],
            total_amount_cents=totals[0],
            purchase_amount_cents=totals[0],
            customer_interest_cents=0,
        )
    ]

    remaining_principal = float(loan_amount)
    allocated_principal = 0
    gaps = day_gaps(plan_days)
    for i in range(1, count + 1):
        total = totals[i]
        if i == count:
            # Last payment clears whatever is left of the financed balance
            principal_part = loan_amount - allocated_principal
            interest = total - principal_part
        else:
            period_rate = (1 + taeg) ** (gaps[i] / DAYS_PER_YEAR) - 1
            interest = round(remaining_principal * period_rate)
            principal_part = total - interest
            remaining_principal -= principal_part
            allocated_principal += principal_part

        installments.append(
            Installment(
                due_date=dates[i],
                total_amount_cents=total,
                purchase_amount_cents=principal_part,
                customer_interest_cents=interest,
            )
        )

    return AmortizedPlan(taeg=taeg, installments=installments)
