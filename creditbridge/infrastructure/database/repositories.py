"""Data access layer for profiles, score history and cached analytics"""

from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from creditbridge.infrastructure.database.models import (
    AnalyticsSnapshot,
    CreditHistoryEntry,
    LoanOfferCache,
    UserProfile,
)


def as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo; stored values are always UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ProfileRepository:
    """Repository for user profiles"""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> Optional[UserProfile]:
        return self.db.get(UserProfile, user_id)

    def save(
        self,
        user_id: str,
        personal_info: Dict[str, Any],
        traditional_credit: Dict[str, Any],
        financial_data: Dict[str, Any],
        email: Optional[str] = None,
    ) -> UserProfile:
        """Create or replace a profile; created_at and analytics summary survive updates"""
        profile = self.get(user_id)
        if profile is None:
            profile = UserProfile(user_id=user_id)
            self.db.add(profile)

        profile.email = email
        profile.personal_info = personal_info
        profile.traditional_credit = traditional_credit
        profile.financial_data = financial_data
        profile.updated_at = datetime.now(timezone.utc)

        self.db.flush()
        self.db.refresh(profile)
        return profile

    def update_analytics_summary(self, user_id: str, summary: Dict[str, Any]) -> None:
        profile = self.get(user_id)
        if profile is not None:
            profile.analytics_summary = summary
            profile.updated_at = datetime.now(timezone.utc)
            self.db.flush()

    def list_user_ids(self) -> List[str]:
        return [row[0] for row in self.db.query(UserProfile.user_id).order_by(UserProfile.user_id).all()]


class CreditHistoryRepository:
    """Repository for recorded scores"""

    def __init__(self, db: Session):
        self.db = db

    def add_entry(self, user_id: str, entry_date: date, score: int, factors: Dict[str, Any]) -> CreditHistoryEntry:
        entry = CreditHistoryEntry(user_id=user_id, entry_date=entry_date, score=score, factors=factors)
        self.db.add(entry)
        self.db.flush()
        return entry

    def get_recent(self, user_id: str, limit: int = 12) -> List[CreditHistoryEntry]:
        """Most recent `limit` entries, oldest first"""
        if limit <= 0:
            return []
        newest_first = (
            self.db.query(CreditHistoryEntry)
            .filter(CreditHistoryEntry.user_id == user_id)
            .order_by(CreditHistoryEntry.id.desc())
            .limit(limit)
            .all()
        )
        return list(reversed(newest_first))

    def latest_score(self, user_id: str) -> Optional[int]:
        recent = self.get_recent(user_id, limit=1)
        return recent[0].score if recent else None


class AnalyticsRepository:
    """Repository for the latest analytics snapshot"""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> Optional[AnalyticsSnapshot]:
        return self.db.get(AnalyticsSnapshot, user_id)

    def save(self, user_id: str, analytics: Dict[str, Any], generated_at: datetime) -> AnalyticsSnapshot:
        snapshot = self.get(user_id)
        if snapshot is None:
            snapshot = AnalyticsSnapshot(user_id=user_id)
            self.db.add(snapshot)
        snapshot.analytics = analytics
        snapshot.generated_at = generated_at
        self.db.flush()
        return snapshot


class LoanOfferRepository:
    """Repository for the time-limited loan offer cache"""

    def __init__(self, db: Session):
        self.db = db

    def save(
        self,
        user_id: str,
        offers: List[Dict[str, Any]],
        generated_at: datetime,
        ttl_days: int = 7,
    ) -> LoanOfferCache:
        cache = self.db.get(LoanOfferCache, user_id)
        if cache is None:
            cache = LoanOfferCache(user_id=user_id)
            self.db.add(cache)
        cache.offers = offers
        cache.generated_at = generated_at
        cache.expires_at = generated_at + timedelta(days=ttl_days)
        self.db.flush()
        return cache

    def get_current(self, user_id: str, now: Optional[datetime] = None) -> Optional[LoanOfferCache]:
        """Cached offers, or None when missing or expired"""
        cache = self.db.get(LoanOfferCache, user_id)
        if cache is None:
            return None
        now = now or datetime.now(timezone.utc)
        if as_utc(cache.expires_at) < as_utc(now):
            return None
        return cache
