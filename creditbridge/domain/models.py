"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

EMPLOYMENT_TYPES = frozenset({"full-time", "part-time", "contract", "self-employed"})
HOUSING_TYPES = frozenset({"rent", "own", "family", "other"})
CREDIT_CATEGORIES = frozenset({"yes", "no", "limited", "unsure"})
ON_TIME = "on-time"


@dataclass(frozen=True)
class PaymentRecord:
    """Single rent or utility payment"""

    date: Optional[date]
    amount: float
    status: str  # "on-time", "late" or "missed"


@dataclass(frozen=True)
class Employment:
    employer_name: str = ""
    job_title: str = ""
    annual_salary: float = 0.0
    start_date: Optional[date] = None
    employment_type: Optional[str] = None


@dataclass(frozen=True)
class Housing:
    housing_type: Optional[str] = None
    monthly_rent: float = 0.0
    rent_payment_history: List[PaymentRecord] = field(default_factory=list)


@dataclass(frozen=True)
class UtilityAccount:
    provider: str = ""
    type: str = ""
    monthly_amount: float = 0.0
    payment_history: List[PaymentRecord] = field(default_factory=list)


@dataclass(frozen=True)
class Banking:
    """Money fields use 0 for 'not provided'"""

    bank_name: str = ""
    account_type: str = ""
    monthly_income: float = 0.0
    monthly_expenses: float = 0.0
    average_balance: float = 0.0


@dataclass(frozen=True)
class TraditionalCredit:
    has_credit: str = "unsure"  # yes | no | limited | unsure
    score: Optional[int] = None


@dataclass(frozen=True)
class FinancialProfile:
    """Normalized scoring input, one snapshot per request"""

    employment: Employment = field(default_factory=Employment)
    housing: Housing = field(default_factory=Housing)
    utilities: List[UtilityAccount] = field(default_factory=list)
    banking: Banking = field(default_factory=Banking)
    traditional_credit: TraditionalCredit = field(default_factory=TraditionalCredit)


@dataclass
class ScoreFactors:
    """Sub-scores nominally in [0, 100]; cash_flow may fall outside when unclamped"""

    rent_payments: int
    utility_payments: int
    cash_flow: int
    employment_history: int
    traditional_credit: int = 0

    def alternative_mean(self) -> float:
        return (self.rent_payments + self.utility_payments + self.cash_flow + self.employment_history) / 4


@dataclass
class ScoreWeights:
    traditional: float
    alternative: float


@dataclass
class ScoreResult:
    """Output of the score blender"""

    final_score: int
    factors: ScoreFactors
    weights: ScoreWeights
    alternative_score: int
    alternative_data_strength: int
    bonus: int


@dataclass
class ScoreBreakdown:
    base_score: int
    rent_contribution: float
    utility_contribution: float
    cash_flow_contribution: float
    employment_contribution: float
    alternative_score: int
    alternative_contribution: float
    traditional_contribution: float
    alternative_data_bonus: int


@dataclass
class ProfileItem:
    """A strength or weakness line shown to the user"""

    title: str
    description: str
    score: float
    impact: str  # "high", "medium" or "low"


@dataclass
class LoanEligibility:
    credit_cards: bool
    personal_loans: bool
    auto_loans: bool
    mortgages: bool


@dataclass
class AnalysisResult:
    strengths: List[ProfileItem]
    weaknesses: List[ProfileItem]
    recommendations: List[str]
    risk_profile: str  # "low", "medium" or "high"
    loan_eligibility: LoanEligibility
    overall_strength: float


@dataclass
class LoanOffer:
    bank_id: str
    bank_name: str
    loan_type: str  # "credit-card", "personal", "auto" or "mortgage"
    product_name: str
    interest_rate: float
    max_amount: int
    terms: str
    requirements: List[str]
    approval_likelihood: int
    features: List[str]


@dataclass
class HistoricalPoint:
    date: date
    score: int
    month: str


@dataclass
class Analytics:
    """Everything produced by one "generate analytics" run"""

    current_score: ScoreResult
    historical_data: List[HistoricalPoint]
    analysis: AnalysisResult
    loan_offers: List[LoanOffer]
    generated_at: datetime


@dataclass
class AnalyticsSummary:
    """Titles-only digest stored on the user profile"""

    strengths: List[str]
    weaknesses: List[str]
    recommendations: List[str]
    risk_profile: str
    loan_eligibility: LoanEligibility
