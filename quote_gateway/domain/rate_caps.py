"""Usury-rate reference quarters

Each quarter lists the contract start dates the cap is checked against (first
and last day of each of its months, as day-of-year offsets) and the month
lengths spacing the installments of short plans started in that quarter.
"""

from datetime import date, timedelta
from types import MappingProxyType
from typing import Mapping, Optional

from quote_gateway.domain.models import Quarter

_QUARTERS = (
    # 2024 is a leap year
    Quarter("2024-Q1", 2024, (0, 30, 31, 59, 60, 90), (31, 29, 31)),
    Quarter("2024-Q2", 2024, (91, 120, 121, 151, 152, 181), (30, 31, 30)),
    Quarter("2024-Q3", 2024, (182, 212, 213, 243, 244, 273), (31, 31, 30)),
    Quarter("2024-Q4", 2024, (274, 304, 305, 334, 335, 365), (31, 30, 31)),
    Quarter("2025-Q1", 2025, (0, 30, 31, 58, 59, 89), (31, 28, 31)),
    Quarter("2025-Q2", 2025, (90, 119, 120, 150, 151, 180), (30, 31, 30)),
    Quarter("2025-Q3", 2025, (181, 211, 212, 242, 243, 272), (31, 31, 30)),
    Quarter("2025-Q4", 2025, (273, 303, 304, 333, 334, 364), (31, 30, 31)),
    Quarter("2026-Q1", 2026, (0, 30, 31, 58, 59, 89), (31, 28, 31)),
    Quarter("2026-Q2", 2026, (90, 119, 120, 150, 151, 180), (30, 31, 30)),
    Quarter("2026-Q3", 2026, (181, 211, 212, 242, 243, 272), (31, 31, 30)),
    Quarter("2026-Q4", 2026, (273, 303, 304, 333, 334, 364), (31, 30, 31)),
)

RATE_CAP_TABLE: Mapping[str, Quarter] = MappingProxyType({q.name: q for q in _QUARTERS})


def get_quarter(label: Optional[str]) -> Optional[Quarter]:
    """Quarter matching a publication label such as "2025-Q3" (case-insensitive)"""
    if not label:
        return None
    return RATE_CAP_TABLE.get(label.strip().upper())


def quarter_start(quarter: Quarter, offset: int) -> date:
    """Calendar date of a day-of-year offset within the quarter's year"""
    return date(quarter.year, 1, 1) + timedelta(days=offset)
