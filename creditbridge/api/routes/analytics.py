"""Analytics endpoints - generate, fetch and loan offer cache"""

import logging
import random
import time
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from creditbridge.api.dependencies import get_request_id, get_rng, get_settings
from creditbridge.api.schemas import (
    AnalyticsResponse,
    AnalyticsSchema,
    AnalyticsSummarySchema,
    LoanOfferSchema,
    LoanOffersResponse,
)
from creditbridge.config import Settings
from creditbridge.domain.analytics import generate_analytics, summarize
from creditbridge.domain.exceptions import ProfileNotFoundError
from creditbridge.domain.normalizer import normalize_profile, profile_payload
from creditbridge.infrastructure.database.repositories import (
    AnalyticsRepository,
    CreditHistoryRepository,
    LoanOfferRepository,
    ProfileRepository,
    as_utc,
)
from creditbridge.infrastructure.database.session import get_db
from creditbridge.infrastructure.observability.logging import log_analytics_generated
from creditbridge.infrastructure.observability.metrics import record_analytics

router = APIRouter()


@router.post("/analytics/{user_id}/generate", response_model=AnalyticsResponse)
def create_analytics(
    user_id: str,
    request: Request,
    db: Session = Depends(get_db),
    rng: random.Random = Depends(get_rng),
    config: Settings = Depends(get_settings),
):
    """
    Score a stored profile and persist the resulting analytics.

    Flow:
    1. Load and normalize the user's stored profile
    2. Score factors, blend, analyze, build offers and trend
    3. Replace the analytics snapshot and loan offer cache
    4. Append the score to credit history and refresh the profile summary
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        profile_repo = ProfileRepository(db)
        stored = profile_repo.get(user_id)
        if stored is None:
            raise ProfileNotFoundError(f"No profile for user {user_id}")

        profile = normalize_profile(
            profile_payload(stored.financial_data, stored.traditional_credit, stored.personal_info)
        )
        analytics = generate_analytics(
            profile,
            rng,
            clamp_cash_flow=config.clamp_cash_flow,
            history_baseline=config.history_baseline_score,
            history_months=config.history_months,
            history_jitter=config.history_jitter,
        )

        payload = AnalyticsSchema.from_domain(analytics)
        serialized = payload.model_dump(mode="json", by_alias=True)

        AnalyticsRepository(db).save(user_id, serialized, analytics.generated_at)
        LoanOfferRepository(db).save(
            user_id,
            serialized["loanOffers"],
            analytics.generated_at,
            ttl_days=config.loan_offer_ttl_days,
        )

        result = analytics.current_score
        CreditHistoryRepository(db).add_entry(
            user_id,
            analytics.generated_at.date(),
            result.final_score,
            serialized["currentScore"]["factors"],
        )
        summary = AnalyticsSummarySchema.from_domain(summarize(analytics))
        profile_repo.update_analytics_summary(user_id, summary.model_dump(mode="json", by_alias=True))

        db.commit()

        duration_ms = (time.time() - start_time) * 1000
        record_analytics(
            result.final_score,
            analytics.analysis.risk_profile,
            [offer.loan_type for offer in analytics.loan_offers],
        )
        log_analytics_generated(
            request_id,
            user_id,
            result.final_score,
            analytics.analysis.risk_profile,
            len(analytics.loan_offers),
            duration_ms,
        )

        return AnalyticsResponse(analytics=payload)

    except ProfileNotFoundError as e:
        db.rollback()
        logging.warning(f"Profile not found: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail="User not found")

    except Exception as e:
        db.rollback()
        logging.error(f"Failed to generate analytics: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Failed to generate analytics")


@router.get("/analytics/{user_id}", response_model=AnalyticsResponse)
def get_analytics(user_id: str, db: Session = Depends(get_db)):
    """Return the last generated analytics snapshot unchanged"""
    snapshot = AnalyticsRepository(db).get(user_id)
    if snapshot is None:
        raise HTTPException(status_code=404, detail="Analytics not found. Please generate analytics first.")

    return AnalyticsResponse(analytics=AnalyticsSchema.model_validate(snapshot.analytics))


@router.get("/analytics/{user_id}/loan-offers", response_model=LoanOffersResponse)
def get_loan_offers(user_id: str, db: Session = Depends(get_db)):
    """Cached loan offers; 404 once the cache window has passed"""
    cache = LoanOfferRepository(db).get_current(user_id, now=datetime.now(timezone.utc))
    if cache is None:
        raise HTTPException(status_code=404, detail="No current loan offers. Please generate analytics first.")

    return LoanOffersResponse(
        offers=[LoanOfferSchema.model_validate(offer) for offer in cache.offers],
        expires_at=as_utc(cache.expires_at).isoformat(),
    )
