"""POST /api/calculate-credit-score - stateless score calculator"""

import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request

from creditbridge.api.dependencies import get_request_id, get_settings
from creditbridge.api.schemas import (
    CalculateScoreRequest,
    CalculateScoreResponse,
    ScoreBreakdownSchema,
    ScoreFactorsSchema,
    ScoreWeightsSchema,
)
from creditbridge.config import Settings
from creditbridge.domain.analytics import calculate_score
from creditbridge.domain.normalizer import normalize_profile, profile_payload
from creditbridge.domain.scoring import score_breakdown
from creditbridge.infrastructure.observability.logging import log_score_calculated
from creditbridge.infrastructure.observability.metrics import record_score

router = APIRouter()


@router.post("/calculate-credit-score", response_model=CalculateScoreResponse)
def calculate_credit_score(
    request_body: CalculateScoreRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Score a raw financial-data payload without touching storage.

    Malformed fields inside the payload fall back to defaults rather than
    failing; only a missing financialData object is rejected (422).
    """
    request_id = get_request_id(request)

    try:
        profile = normalize_profile(profile_payload(request_body.financial_data, request_body.traditional_credit))
        result = calculate_score(profile, clamp_cash_flow=config.clamp_cash_flow)
        weights = asdict(result.weights)
        breakdown = score_breakdown(result, profile.traditional_credit)

    except Exception as e:
        logging.error(f"Failed to calculate credit score: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Failed to calculate credit score")

    record_score(result.final_score, "calculator")
    log_score_calculated(request_id, result.final_score, weights)

    return CalculateScoreResponse(
        score=result.final_score,
        factors=ScoreFactorsSchema.from_domain(result.factors),
        weights=ScoreWeightsSchema(**weights),
        breakdown=ScoreBreakdownSchema.from_domain(breakdown),
    )
