"""SQLAlchemy ORM models for profiles, score history and cached analytics"""

from sqlalchemy import Column, Date, DateTime, Integer, JSON, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class UserProfile(Base):
    """Raw profile sections exactly as submitted by the client"""

    __tablename__ = "user_profile"

    user_id = Column(Text, primary_key=True)
    email = Column(Text, nullable=True, index=True)
    personal_info = Column(JSON, nullable=False, default=dict)
    traditional_credit = Column(JSON, nullable=False, default=dict)
    financial_data = Column(JSON, nullable=False, default=dict)
    analytics_summary = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class CreditHistoryEntry(Base):
    """One recorded score; append-only"""

    __tablename__ = "credit_history_entry"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, nullable=False, index=True)
    entry_date = Column(Date, nullable=False)
    score = Column(Integer, nullable=False)
    factors = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class AnalyticsSnapshot(Base):
    """Latest analytics per user, replaced wholesale on each run"""

    __tablename__ = "analytics_snapshot"

    user_id = Column(Text, primary_key=True)
    analytics = Column(JSON, nullable=False)
    generated_at = Column(DateTime(timezone=True), nullable=False)


class LoanOfferCache(Base):
    """Loan offers valid until expires_at"""

    __tablename__ = "loan_offer_cache"

    user_id = Column(Text, primary_key=True)
    offers = Column(JSON, nullable=False)
    generated_at = Column(DateTime(timezone=True), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
