"""GET /v1/rate-cap - Maximum fee allowed by the quarter's usury rate"""

import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Query, Request

from quote_gateway.api.v1.schemas import RateCapResponse
from quote_gateway.api.dependencies import get_request_id
from quote_gateway.domain.exceptions import InvalidPlanInputError
from quote_gateway.domain.usury import max_rate_bps
from quote_gateway.infrastructure.observability.metrics import record_rate_cap
from quote_gateway.utils.formatting import format_bps

router = APIRouter()

MAX_DEFERRED_DAYS = 3650  # ten years


@router.get("/rate-cap", response_model=RateCapResponse)
def get_rate_cap(
    request: Request,
    installment_count: int = Query(..., gt=0, le=120, description="Number of installments"),
    cap_rate_bps: Optional[int] = Query(None, ge=0, description="Usury rate in bps"),
    quarter: Optional[str] = Query(None, description="Publication label, e.g. 2025-Q3"),
    deferred_days: int = Query(0, ge=0, le=MAX_DEFERRED_DAYS, description="Deferral of the first repayment in days"),
):
    """
    Compute the maximum fee (bps of the purchase amount) allowed by the cap.

    Returns:
        The tightest bound over the quarter, or a placeholder when the quarter
        or the rate is unknown
    """
    try:
        max_bps = max_rate_bps(installment_count, cap_rate_bps, quarter, deferred_days)
    except InvalidPlanInputError as e:
        logging.warning(f"Invalid plan input: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_rate_cap(max_bps)
    return RateCapResponse(max_bps=max_bps, display=format_bps(max_bps))
