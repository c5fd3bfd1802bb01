"""User profile and credit history endpoints"""

import logging
from datetime import datetime, timezone
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from creditbridge.api.dependencies import get_request_id
from creditbridge.api.schemas import (
    CreditHistoryEntrySchema,
    CreditHistoryResponse,
    SaveUserDataRequest,
    SaveUserDataResponse,
    ScoreFactorsSchema,
    UpdateCreditScoreRequest,
    UpdateCreditScoreResponse,
    UserDataResponse,
    UserDataSchema,
)
from creditbridge.domain.exceptions import ProfileNotFoundError
from creditbridge.infrastructure.database.models import CreditHistoryEntry, UserProfile
from creditbridge.infrastructure.database.repositories import CreditHistoryRepository, ProfileRepository
from creditbridge.infrastructure.database.session import get_db
from creditbridge.utils.numbers import round_half_up

router = APIRouter()

# Used when a manual score update omits its factors
DEFAULT_FACTORS = ScoreFactorsSchema(
    rent_payments=80,
    utility_payments=75,
    cash_flow=65,
    employment_history=85,
    traditional_credit=0,
)


def _user_schema(profile: UserProfile) -> UserDataSchema:
    return UserDataSchema(
        user_id=profile.user_id,
        email=profile.email,
        personal_info=profile.personal_info or {},
        traditional_credit=profile.traditional_credit or {},
        financial_data=profile.financial_data or {},
        analytics=profile.analytics_summary,
        created_at=profile.created_at.isoformat(),
        updated_at=profile.updated_at.isoformat(),
    )


def _history_schema(entries: List[CreditHistoryEntry]) -> List[CreditHistoryEntrySchema]:
    return [
        CreditHistoryEntrySchema(date=e.entry_date.isoformat(), score=e.score, factors=e.factors)
        for e in entries
    ]


@router.post("/users/data", response_model=SaveUserDataResponse)
def save_user_data(request: Request, request_body: SaveUserDataRequest, db: Session = Depends(get_db)):
    """Create or replace a user's profile sections"""
    try:
        profile = ProfileRepository(db).save(
            user_id=request_body.user_id,
            email=request_body.email,
            personal_info=request_body.personal_info,
            traditional_credit=request_body.traditional_credit,
            financial_data=request_body.financial_data,
        )
        db.commit()

        return SaveUserDataResponse(message="User data saved successfully", user=_user_schema(profile))

    except Exception as e:
        db.rollback()
        logging.error(f"Failed to save user data: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=500, detail="Failed to save user data")


@router.get("/users/{user_id}/data", response_model=UserDataResponse)
def get_user_data(user_id: str, db: Session = Depends(get_db)):
    profile = ProfileRepository(db).get(user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="User not found")

    return UserDataResponse(user=_user_schema(profile))


@router.post("/users/{user_id}/credit-score", response_model=UpdateCreditScoreResponse)
def update_credit_score(
    user_id: str,
    request: Request,
    request_body: UpdateCreditScoreRequest,
    db: Session = Depends(get_db),
):
    """
    Append a manually supplied score to the user's history.

    Returns:
        The new entry plus the last 12 entries
    """
    request_id = get_request_id(request)

    try:
        if not ProfileRepository(db).get(user_id):
            raise ProfileNotFoundError(f"No profile for user {user_id}")

        factors = request_body.factors or DEFAULT_FACTORS
        history_repo = CreditHistoryRepository(db)
        entry = history_repo.add_entry(
            user_id,
            datetime.now(timezone.utc).date(),
            round_half_up(request_body.score),
            factors.model_dump(mode="json", by_alias=True),
        )
        db.commit()

        new_entry = _history_schema([entry])[0]
        return UpdateCreditScoreResponse(
            message="Credit score updated successfully",
            new_score=new_entry,
            history=_history_schema(history_repo.get_recent(user_id, limit=12)),
        )

    except ProfileNotFoundError as e:
        db.rollback()
        logging.warning(f"Profile not found: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail="User not found")

    except Exception as e:
        db.rollback()
        logging.error(f"Failed to update credit score: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Failed to update credit score")


@router.get("/users/{user_id}/credit-history", response_model=CreditHistoryResponse)
def get_credit_history(
    user_id: str,
    months: int = Query(12, ge=1, le=120, description="Number of most recent entries"),
    db: Session = Depends(get_db),
):
    """
    Recent recorded scores, oldest first.

    trend is the change between the last two entries (0 with fewer than two).
    """
    if not ProfileRepository(db).get(user_id):
        raise HTTPException(status_code=404, detail="User not found")

    entries = CreditHistoryRepository(db).get_recent(user_id, limit=months)
    current_score = entries[-1].score if entries else 0
    trend = entries[-1].score - entries[-2].score if len(entries) > 1 else 0

    return CreditHistoryResponse(history=_history_schema(entries), current_score=current_score, trend=trend)
