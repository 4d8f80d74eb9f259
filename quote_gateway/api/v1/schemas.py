"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, model_validator
from datetime import date
from typing import List, Literal, Optional

# Above this, cent-level NPV residuals fall below float resolution and the
# rate solver cannot reach its tolerance
MAX_AMORTIZED_AMOUNT_CENTS = 100_000_000


class AmortizedQuoteRequest(BaseModel):
    """Request body for POST /v1/quote/amortized"""

    purchase_amount_cents: int = Field(
        ..., ge=0, le=MAX_AMORTIZED_AMOUNT_CENTS, description="Purchase price in cents"
    )
    paid_amount_cents: int = Field(
        ..., ge=0, le=MAX_AMORTIZED_AMOUNT_CENTS, description="Total paid by the customer in cents"
    )
    installment_count: int = Field(..., gt=0, le=120, description="Number of financed installments")
    start_date: date
    schedule: Optional[Literal["monthly", "weekly"]] = None
    include_upfront: bool = Field(True, description="Return the upfront payment as first installment")

    @model_validator(mode="after")
    def check_paid_covers_purchase(self) -> "AmortizedQuoteRequest":
        if self.paid_amount_cents < self.purchase_amount_cents:
            raise ValueError("paid_amount_cents must be >= purchase_amount_cents")
        return self


class FlatQuoteRequest(BaseModel):
    """Request body for POST /v1/quote/flat"""

    purchase_amount_cents: int = Field(..., ge=0, description="Purchase price in cents")
    paid_amount_cents: int = Field(..., ge=0, description="Total paid by the customer in cents")
    installment_count: int = Field(..., gt=0, le=520, description="Number of weekly installments")
    start_date: date
    posting_offset_weeks: int = Field(0, ge=0, description="Weeks before the first installment")

    @model_validator(mode="after")
    def check_paid_covers_purchase(self) -> "FlatQuoteRequest":
        if self.paid_amount_cents < self.purchase_amount_cents:
            raise ValueError("paid_amount_cents must be >= purchase_amount_cents")
        return self


class InstallmentSchema(BaseModel):
    """Single installment in a payment plan"""

    due_date: date
    total_amount_cents: int
    purchase_amount_cents: int
    customer_interest_cents: int


class QuoteResponse(BaseModel):
    """Response for POST /v1/quote/*"""

    taeg: Optional[float] = None
    taeg_display: str
    total_cents: int
    installments: List[InstallmentSchema]


class RateCapResponse(BaseModel):
    """Response for GET /v1/rate-cap"""

    max_bps: Optional[int] = None
    display: str
