"""Flat weekly installment plans (no rate solving)"""

from datetime import date
from typing import List, Optional

from quote_gateway.domain.models import Installment, SchedulePolicy
from quote_gateway.domain.schedule import purchase_amount_phasing, schedule_payment_dates


def generate_installment_plan(
    principal_cents: int,
    fee_cents: int,
    count: int,
    start_date: date,
    anchor_weekday: Optional[int] = None,
    offset_weeks: int = 0,
) -> List[Installment]:
    """
    Generate equal weekly installments for the flat product.

    Requirements:
    - ``count`` installments, 7 days apart
    - First due date on start_date, or on the next ``anchor_weekday`` when set,
      pushed ``offset_weeks`` weeks forward
    - Principal and fee phased separately; the last installment absorbs the
      rounding remainder of both

    Args:
        principal_cents: Purchase amount
        fee_cents: Customer fee (paid amount - purchase amount)
        count: Number of installments
        start_date: Purchase date
        anchor_weekday: Weekday the due dates are aligned on (0=Monday)
        offset_weeks: Posting offset in weeks

    Returns:
        List of Installment objects with due dates and amounts

    Example:
        300000 + 12660 cents over 16 weeks
        principal 18750 each, fee 791 x 15 then 795
        totals 19541 x 15 then 19545
    """
    due_dates = schedule_payment_dates(
        count,
        start_date,
        policy=SchedulePolicy.WEEKLY,
        anchor_weekday=anchor_weekday,
        offset_weeks=offset_weeks,
    )
    principal_parts = purchase_amount_phasing(count, principal_cents)
    fee_parts = purchase_amount_phasing(count, fee_cents)

    return [
        Installment(
            due_date=due_date,
            total_amount_cents=principal + fee,
            purchase_amount_cents=principal,
            customer_interest_cents=fee,
        )
        for due_date, principal, fee in zip(due_dates, principal_parts, fee_parts)
    ]
