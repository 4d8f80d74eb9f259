"""POST /v1/quote/* - Payment-plan quotes"""

import time
import logging
from typing import List
from fastapi import APIRouter, HTTPException, Request

from quote_gateway.api.v1.schemas import (
    AmortizedQuoteRequest,
    FlatQuoteRequest,
    InstallmentSchema,
    QuoteResponse,
)
from quote_gateway.api.dependencies import get_request_id
from quote_gateway.config import settings
from quote_gateway.domain.amortization import build_amortized_plan
from quote_gateway.domain.exceptions import InvalidPlanInputError
from quote_gateway.domain.installments import generate_installment_plan
from quote_gateway.domain.models import Installment, SchedulePolicy
from quote_gateway.infrastructure.observability.logging import log_quote
from quote_gateway.infrastructure.observability.metrics import record_quote
from quote_gateway.utils.formatting import format_taeg

router = APIRouter()


def _to_schema(installments: List[Installment]) -> List[InstallmentSchema]:
    return [
        InstallmentSchema(
            due_date=inst.due_date,
            total_amount_cents=inst.total_amount_cents,
            purchase_amount_cents=inst.purchase_amount_cents,
            customer_interest_cents=inst.customer_interest_cents,
        )
        for inst in installments
    ]


@router.post("/quote/amortized", response_model=QuoteResponse)
def quote_amortized(request_body: AmortizedQuoteRequest, request: Request):
    """
    Quote a reducing-balance plan and its TAEG.

    Flow:
    1. Derive the fee from purchase and paid amounts
    2. Solve the TAEG and split each installment into principal and interest
    3. Drop the upfront installment if the caller does not display it

    An unsolvable plan is not an error: it is returned with a null TAEG, the
    placeholder display and no installment.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    policy = SchedulePolicy(request_body.schedule or settings.default_schedule)

    try:
        plan = build_amortized_plan(
            principal_cents=request_body.purchase_amount_cents,
            fee_cents=request_body.paid_amount_cents - request_body.purchase_amount_cents,
            count=request_body.installment_count,
            start_date=request_body.start_date,
            policy=policy,
        )
    except InvalidPlanInputError as e:
        logging.warning(f"Invalid plan input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    installments = plan.installments
    if not request_body.include_upfront:
        installments = installments[1:]

    solved = plan.taeg is not None
    duration_ms = (time.time() - start_time) * 1000
    record_quote("amortized", taeg=plan.taeg, solved=solved)
    log_quote(request_id, "amortized", request_body.installment_count, solved, duration_ms)

    return QuoteResponse(
        taeg=plan.taeg,
        taeg_display=format_taeg(plan.taeg),
        total_cents=sum(inst.total_amount_cents for inst in installments),
        installments=_to_schema(installments),
    )


@router.post("/quote/flat", response_model=QuoteResponse)
def quote_flat(request_body: FlatQuoteRequest, request: Request):
    """
    Quote an equal-installment weekly plan.

    Due dates are aligned on the configured weekday anchor, if any, and pushed
    back by the posting offset.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        installments = generate_installment_plan(
            principal_cents=request_body.purchase_amount_cents,
            fee_cents=request_body.paid_amount_cents - request_body.purchase_amount_cents,
            count=request_body.installment_count,
            start_date=request_body.start_date,
            anchor_weekday=settings.flat_plan_anchor_weekday,
            offset_weeks=request_body.posting_offset_weeks,
        )
    except InvalidPlanInputError as e:
        logging.warning(f"Invalid plan input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_quote("flat")
    log_quote(request_id, "flat", request_body.installment_count, True, duration_ms)

    return QuoteResponse(
        taeg=None,
        taeg_display=format_taeg(None),
        total_cents=sum(inst.total_amount_cents for inst in installments),
        installments=_to_schema(installments),
    )
