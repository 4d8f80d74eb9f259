"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional, Tuple


class SchedulePolicy(str, Enum):
    """Stepping policy between two consecutive due dates"""

    WEEKLY = "weekly"
    MONTHLY = "monthly"


@dataclass(frozen=True)
class Installment:
    """Single payment in a repayment plan"""

    due_date: date
    total_amount_cents: int
    purchase_amount_cents: int
    customer_interest_cents: int


PaymentPlan = List[Installment]


@dataclass(frozen=True)
class AmortizedPlan:
    """Output of the amortization engine

    ``installments`` is empty whenever ``taeg`` could not be solved.
    """

    taeg: Optional[float]
    installments: PaymentPlan = field(default_factory=list)


@dataclass(frozen=True)
class Quarter:
    """Reference period of the usury-rate tables"""

    name: str
    year: int
    start_offsets: Tuple[int, ...]  # day-of-year offsets, 0 = 1 January
    deferred_days: Tuple[int, ...]  # month lengths spacing short "Pnx" plans
