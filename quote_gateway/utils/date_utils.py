"""Date manipulation utilities"""

from datetime import date, timedelta
from dateutil.relativedelta import relativedelta


def add_weeks(from_date: date, weeks: int) -> date:
    """Add whole weeks to a date"""
    return from_date + timedelta(weeks=weeks)


def add_months(from_date: date, months: int) -> date:
    """Add calendar months (Jan 31 + 1 month -> Feb 28/29)"""
    return from_date + relativedelta(months=months)


def next_weekday(from_date: date, weekday: int) -> date:
    """First date on or after from_date falling on weekday (0=Monday .. 6=Sunday)"""
    if not 0 <= weekday <= 6:
        raise ValueError(f"weekday must be between 0 and 6, got {weekday}")
    return from_date + timedelta(days=(weekday - from_date.weekday()) % 7)


def days_between(start: date, end: date) -> int:
    """Whole days from start to end"""
    return (end - start).days
