"""GET /api/stats - aggregate platform numbers"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from creditbridge.api.schemas import StatsResponse
from creditbridge.infrastructure.database.repositories import CreditHistoryRepository, ProfileRepository
from creditbridge.infrastructure.database.session import get_db
from creditbridge.utils.numbers import round_half_up

# Approximate data sources per user: rent, utilities, banking, employment
DATA_POINTS_PER_USER = 4

router = APIRouter()


@router.get("/stats", response_model=StatsResponse)
def get_stats(db: Session = Depends(get_db)):
    """
    Platform totals.

    averageScore divides the sum of each user's latest score by all users,
    so users without a score pull the average down.
    """
    user_ids = ProfileRepository(db).list_user_ids()
    history_repo = CreditHistoryRepository(db)

    total_scores = 0
    for user_id in user_ids:
        latest = history_repo.latest_score(user_id)
        if latest is not None:
            total_scores += latest

    total_users = len(user_ids)
    return StatsResponse(
        total_users=total_users,
        average_score=round_half_up(total_scores / total_users) if total_users else 0,
        active_users=total_users,
        data_points=total_users * DATA_POINTS_PER_USER,
    )
