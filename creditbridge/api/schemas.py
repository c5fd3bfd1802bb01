"""Pydantic schemas for API request/response validation (camelCase on the wire)"""

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from creditbridge.domain.models import (
    AnalysisResult,
    Analytics,
    AnalyticsSummary,
    HistoricalPoint,
    LoanEligibility,
    LoanOffer,
    ProfileItem,
    ScoreBreakdown,
    ScoreFactors,
    ScoreResult,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScoreFactorsSchema(CamelModel):
    rent_payments: int
    utility_payments: int
    cash_flow: int
    employment_history: int
    traditional_credit: int = 0

    @classmethod
    def from_domain(cls, factors: ScoreFactors) -> "ScoreFactorsSchema":
        return cls(**asdict(factors))


class ScoreWeightsSchema(CamelModel):
    traditional: float
    alternative: float


class CurrentScoreSchema(CamelModel):
    score: int
    factors: ScoreFactorsSchema
    weights: ScoreWeightsSchema
    alternative_score: int
    alternative_data_strength: int

    @classmethod
    def from_domain(cls, result: ScoreResult) -> "CurrentScoreSchema":
        return cls(
            score=result.final_score,
            factors=ScoreFactorsSchema.from_domain(result.factors),
            weights=ScoreWeightsSchema(**asdict(result.weights)),
            alternative_score=result.alternative_score,
            alternative_data_strength=result.alternative_data_strength,
        )


class HistoricalPointSchema(CamelModel):
    date: str
    score: int
    month: str

    @classmethod
    def from_domain(cls, point: HistoricalPoint) -> "HistoricalPointSchema":
        return cls(date=point.date.isoformat(), score=point.score, month=point.month)


class ProfileItemSchema(CamelModel):
    title: str
    description: str
    score: float
    impact: str

    @classmethod
    def from_domain(cls, item: ProfileItem) -> "ProfileItemSchema":
        return cls(**asdict(item))


class LoanEligibilitySchema(CamelModel):
    credit_cards: bool
    personal_loans: bool
    auto_loans: bool
    mortgages: bool

    @classmethod
    def from_domain(cls, eligibility: LoanEligibility) -> "LoanEligibilitySchema":
        return cls(**asdict(eligibility))


class AnalysisSchema(CamelModel):
    strengths: List[ProfileItemSchema]
    weaknesses: List[ProfileItemSchema]
    recommendations: List[str]
    risk_profile: str
    loan_eligibility: LoanEligibilitySchema
    overall_strength: float

    @classmethod
    def from_domain(cls, analysis: AnalysisResult) -> "AnalysisSchema":
        return cls(
            strengths=[ProfileItemSchema.from_domain(s) for s in analysis.strengths],
            weaknesses=[ProfileItemSchema.from_domain(w) for w in analysis.weaknesses],
            recommendations=analysis.recommendations,
            risk_profile=analysis.risk_profile,
            loan_eligibility=LoanEligibilitySchema.from_domain(analysis.loan_eligibility),
            overall_strength=analysis.overall_strength,
        )


class LoanOfferSchema(CamelModel):
    bank_id: str
    bank_name: str
    loan_type: str
    product_name: str
    interest_rate: float
    max_amount: int
    terms: str
    requirements: List[str]
    approval_likelihood: int
    features: List[str]

    @classmethod
    def from_domain(cls, offer: LoanOffer) -> "LoanOfferSchema":
        return cls(**asdict(offer))


class AnalyticsSchema(CamelModel):
    current_score: CurrentScoreSchema
    historical_data: List[HistoricalPointSchema]
    analysis: AnalysisSchema
    loan_offers: List[LoanOfferSchema]
    generated_at: str

    @classmethod
    def from_domain(cls, analytics: Analytics) -> "AnalyticsSchema":
        return cls(
            current_score=CurrentScoreSchema.from_domain(analytics.current_score),
            historical_data=[HistoricalPointSchema.from_domain(p) for p in analytics.historical_data],
            analysis=AnalysisSchema.from_domain(analytics.analysis),
            loan_offers=[LoanOfferSchema.from_domain(o) for o in analytics.loan_offers],
            generated_at=analytics.generated_at.isoformat(),
        )


class AnalyticsResponse(CamelModel):
    """Response for POST /api/analytics/{user_id}/generate and GET /api/analytics/{user_id}"""

    success: bool = True
    analytics: AnalyticsSchema


class LoanOffersResponse(CamelModel):
    """Response for GET /api/analytics/{user_id}/loan-offers"""

    success: bool = True
    offers: List[LoanOfferSchema]
    expires_at: str


class AnalyticsSummarySchema(CamelModel):
    strengths: List[str]
    weaknesses: List[str]
    recommendations: List[str]
    risk_profile: str
    loan_eligibility: LoanEligibilitySchema

    @classmethod
    def from_domain(cls, summary: AnalyticsSummary) -> "AnalyticsSummarySchema":
        return cls(
            strengths=summary.strengths,
            weaknesses=summary.weaknesses,
            recommendations=summary.recommendations,
            risk_profile=summary.risk_profile,
            loan_eligibility=LoanEligibilitySchema.from_domain(summary.loan_eligibility),
        )


class CalculateScoreRequest(CamelModel):
    """Request body for POST /api/calculate-credit-score; sections are normalized leniently"""

    financial_data: Dict[str, Any]
    traditional_credit: Dict[str, Any] = Field(default_factory=dict)


class ScoreBreakdownSchema(CamelModel):
    base_score: int
    rent_contribution: float
    utility_contribution: float
    cash_flow_contribution: float
    employment_contribution: float
    alternative_score: int
    alternative_contribution: float
    traditional_contribution: float
    alternative_data_bonus: int

    @classmethod
    def from_domain(cls, breakdown: ScoreBreakdown) -> "ScoreBreakdownSchema":
        return cls(**asdict(breakdown))


class CalculateScoreResponse(CamelModel):
    score: int
    factors: ScoreFactorsSchema
    weights: ScoreWeightsSchema
    breakdown: ScoreBreakdownSchema


class SaveUserDataRequest(CamelModel):
    """Request body for POST /api/users/data"""

    user_id: str = Field(..., min_length=1, description="User identifier")
    email: Optional[str] = None
    personal_info: Dict[str, Any] = Field(default_factory=dict)
    traditional_credit: Dict[str, Any] = Field(default_factory=dict)
    financial_data: Dict[str, Any] = Field(default_factory=dict)


class UserDataSchema(CamelModel):
    user_id: str
    email: Optional[str] = None
    personal_info: Dict[str, Any]
    traditional_credit: Dict[str, Any]
    financial_data: Dict[str, Any]
    analytics: Optional[Dict[str, Any]] = None
    created_at: str
    updated_at: str


class SaveUserDataResponse(CamelModel):
    success: bool = True
    message: str
    user: UserDataSchema


class UserDataResponse(CamelModel):
    user: UserDataSchema


class CreditHistoryEntrySchema(CamelModel):
    date: str
    score: int
    factors: Dict[str, Any]


class UpdateCreditScoreRequest(CamelModel):
    """Request body for POST /api/users/{user_id}/credit-score"""

    score: float = Field(..., gt=0, allow_inf_nan=False)
    factors: Optional[ScoreFactorsSchema] = None


class UpdateCreditScoreResponse(CamelModel):
    success: bool = True
    message: str
    new_score: CreditHistoryEntrySchema
    history: List[CreditHistoryEntrySchema]


class CreditHistoryResponse(CamelModel):
    history: List[CreditHistoryEntrySchema]
    current_score: int
    trend: int


class StatsResponse(CamelModel):
    total_users: int
    average_score: int
    active_users: int
    data_points: int
