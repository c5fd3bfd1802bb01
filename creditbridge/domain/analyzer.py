"""Profile analysis - strengths, weaknesses, recommendations, risk tier and eligibility"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from creditbridge.domain.models import (
    AnalysisResult,
    FinancialProfile,
    LoanEligibility,
    ProfileItem,
    ScoreFactors,
    ScoreResult,
)
from creditbridge.utils.numbers import clamp

MIN_ITEMS = 5

# Bound on savings and debt-to-income percentages
RATIO_LIMIT = 1_000_000.0

# Minimum final score per product category, strictly increasing
ELIGIBILITY_THRESHOLDS = {
    "credit_cards": 600,
    "personal_loans": 620,
    "auto_loans": 650,
    "mortgages": 680,
}

DEFAULT_RECOMMENDATION = "Continue your excellent financial habits to maintain your strong credit profile"


@dataclass(frozen=True)
class ProfileMetrics:
    """Values the analysis rules read"""

    factors: ScoreFactors
    final_score: int
    income: float
    expenses: float
    salary: float
    savings_rate: float  # percent of income
    debt_to_income: float  # percent of income
    bank_name: str
    employment_type: Optional[str]
    housing_type: Optional[str]
    has_credit: str


@dataclass(frozen=True)
class ProfileRule:
    """
    One analysis category.

    The strength check runs first; the weakness check only runs when the
    strength did not fire. Every recorded weakness adds the recommendation.
    """

    category: str
    is_strength: Callable[[ProfileMetrics], bool]
    strength: Callable[[ProfileMetrics], ProfileItem]
    is_weakness: Callable[[ProfileMetrics], bool]
    weakness: Callable[[ProfileMetrics], ProfileItem]
    recommendation: str


def build_metrics(profile: FinancialProfile, result: ScoreResult) -> ProfileMetrics:
    income = profile.banking.monthly_income
    expenses = profile.banking.monthly_expenses
    savings_rate = (income - expenses) / income * 100 if income > 0 else 0.0
    debt_to_income = expenses / income * 100 if expenses > 0 and income > 0 else 0.0
    # item scores multiply these; keep them finite for extreme incomes
    savings_rate = clamp(savings_rate, -RATIO_LIMIT, 100.0)
    debt_to_income = clamp(debt_to_income, 0.0, RATIO_LIMIT)

    return ProfileMetrics(
        factors=result.factors,
        final_score=result.final_score,
        income=income,
        expenses=expenses,
        salary=profile.employment.annual_salary,
        savings_rate=savings_rate,
        debt_to_income=debt_to_income,
        bank_name=profile.banking.bank_name,
        employment_type=profile.employment.employment_type,
        housing_type=profile.housing.housing_type,
        has_credit=profile.traditional_credit.has_credit,
    )


PROFILE_RULES: List[ProfileRule] = [
    ProfileRule(
        category="rent",
        is_strength=lambda m: m.factors.rent_payments >= 80,
        strength=lambda m: ProfileItem(
            "Excellent Rent Payment History",
            "You have consistently paid rent on time, showing strong housing responsibility",
            m.factors.rent_payments,
            "high",
        ),
        is_weakness=lambda m: m.factors.rent_payments < 60,
        weakness=lambda m: ProfileItem(
            "Inconsistent Rent Payments",
            "Improving rent payment consistency could significantly boost your score",
            m.factors.rent_payments,
            "high",
        ),
        recommendation="Set up automatic rent payments to ensure consistency",
    ),
    ProfileRule(
        category="utility",
        is_strength=lambda m: m.factors.utility_payments >= 75,
        strength=lambda m: ProfileItem(
            "Reliable Utility Payments",
            "Your utility payment history demonstrates financial responsibility",
            m.factors.utility_payments,
            "medium",
        ),
        is_weakness=lambda m: m.factors.utility_payments < 65,
        weakness=lambda m: ProfileItem(
            "Utility Payment Issues",
            "Late utility payments are affecting your credit profile",
            m.factors.utility_payments,
            "medium",
        ),
        recommendation="Set up autopay for all utilities to avoid late payments",
    ),
    ProfileRule(
        category="employment_stability",
        is_strength=lambda m: m.factors.employment_history >= 80,
        strength=lambda m: ProfileItem(
            "Stable Employment History",
            "Your employment stability shows reliable income potential",
            m.factors.employment_history,
            "medium",
        ),
        is_weakness=lambda m: m.factors.employment_history < 60,
        weakness=lambda m: ProfileItem(
            "Employment Instability",
            "Frequent job changes may be impacting your creditworthiness",
            m.factors.employment_history,
            "medium",
        ),
        recommendation="Focus on job stability and building tenure with current employer",
    ),
    ProfileRule(
        category="cash_flow",
        is_strength=lambda m: m.factors.cash_flow >= 70,
        strength=lambda m: ProfileItem(
            "Strong Cash Flow Management",
            "You manage your finances well with positive cash flow patterns",
            m.factors.cash_flow,
            "high",
        ),
        is_weakness=lambda m: m.factors.cash_flow < 50,
        weakness=lambda m: ProfileItem(
            "Cash Flow Challenges",
            "Improving your savings rate and reducing expenses could help",
            m.factors.cash_flow,
            "high",
        ),
        recommendation="Build an emergency fund and reduce monthly expenses",
    ),
    ProfileRule(
        category="income_level",
        is_strength=lambda m: m.salary >= 75000,
        strength=lambda m: ProfileItem(
            "Strong Income Level",
            f"Your annual salary of ${m.salary:,.0f} provides good financial foundation",
            min(100.0, m.salary / 100000 * 100),
            "high",
        ),
        is_weakness=lambda m: 0 < m.salary < 35000,
        weakness=lambda m: ProfileItem(
            "Lower Income Level",
            "Increasing income through skills development or career advancement could improve your profile",
            m.salary / 35000 * 100,
            "medium",
        ),
        recommendation="Consider skills training or career advancement opportunities to increase income",
    ),
    ProfileRule(
        category="savings_rate",
        is_strength=lambda m: m.savings_rate >= 20,
        strength=lambda m: ProfileItem(
            "Excellent Savings Discipline",
            f"You save {m.savings_rate:.1f}% of your income, showing strong financial planning",
            min(100.0, m.savings_rate * 5),
            "high",
        ),
        is_weakness=lambda m: m.savings_rate < 5 and m.income > 0,
        weakness=lambda m: ProfileItem(
            "Low Savings Rate",
            "Building emergency savings is crucial for financial stability and credit health",
            m.savings_rate * 20,
            "high",
        ),
        recommendation="Aim to save at least 10-20% of your income for financial security",
    ),
    ProfileRule(
        category="debt_to_income",
        is_strength=lambda m: m.debt_to_income <= 30 and m.income > 0,
        strength=lambda m: ProfileItem(
            "Healthy Debt-to-Income Ratio",
            f"Your DTI of {m.debt_to_income:.1f}% shows responsible debt management",
            100 - m.debt_to_income,
            "medium",
        ),
        is_weakness=lambda m: m.debt_to_income > 50 and m.income > 0,
        weakness=lambda m: ProfileItem(
            "High Debt-to-Income Ratio",
            "High debt levels relative to income may limit credit opportunities",
            max(0.0, 100 - m.debt_to_income),
            "high",
        ),
        recommendation="Focus on reducing monthly expenses or increasing income to improve DTI ratio",
    ),
    ProfileRule(
        category="banking_relationship",
        is_strength=lambda m: bool(m.bank_name),
        strength=lambda m: ProfileItem(
            "Established Banking Relationship",
            f"Banking with {m.bank_name} shows financial stability",
            85,
            "low",
        ),
        is_weakness=lambda m: not m.bank_name,
        weakness=lambda m: ProfileItem(
            "Limited Banking History",
            "Establishing primary banking relationships helps build credit foundation",
            30,
            "medium",
        ),
        recommendation="Open checking and savings accounts with a major bank to build financial history",
    ),
    ProfileRule(
        category="employment_type",
        is_strength=lambda m: m.employment_type == "full-time",
        strength=lambda m: ProfileItem(
            "Full-time Employment Status",
            "Full-time employment provides stable income verification for lenders",
            90,
            "medium",
        ),
        is_weakness=lambda m: m.employment_type == "self-employed",
        weakness=lambda m: ProfileItem(
            "Self-employment Income Variability",
            "Self-employed income may require additional documentation for loan approval",
            65,
            "medium",
        ),
        recommendation="Maintain detailed financial records and consider business banking accounts",
    ),
    ProfileRule(
        category="housing_type",
        is_strength=lambda m: m.housing_type == "own",
        strength=lambda m: ProfileItem(
            "Homeownership",
            "Property ownership demonstrates financial stability and investment capacity",
            95,
            "high",
        ),
        is_weakness=lambda m: m.housing_type == "family",
        weakness=lambda m: ProfileItem(
            "Limited Housing Payment History",
            "Living with family may limit verifiable housing payment history",
            40,
            "medium",
        ),
        recommendation="Consider documenting any financial contributions to household expenses",
    ),
    ProfileRule(
        category="traditional_credit",
        is_strength=lambda m: m.has_credit == "yes",
        strength=lambda m: ProfileItem(
            "Existing Credit History",
            "Having traditional credit products provides additional credit verification",
            85,
            "medium",
        ),
        is_weakness=lambda m: m.has_credit == "no",
        weakness=lambda m: ProfileItem(
            "No Traditional Credit History",
            "Limited traditional credit may restrict loan options and interest rates",
            20,
            "high",
        ),
        recommendation="Consider secured credit cards or credit-building loans to establish traditional credit",
    ),
]


def _strength_filler(final_score: int) -> ProfileItem:
    if final_score >= 700:
        return ProfileItem(
            "Good Overall Credit Score",
            f"Your CreditBridge score of {final_score} opens many lending opportunities",
            final_score / 8.5,
            "medium",
        )
    return ProfileItem(
        "Credit Building Progress",
        "You're actively working to build your credit profile through alternative data",
        75,
        "low",
    )


def _weakness_fillers(final_score: int) -> List[ProfileItem]:
    """The two fillers used alternately when padding weaknesses"""
    if final_score < 650:
        tier = ProfileItem(
            "Credit Score Below Prime",
            "Improving your score above 650 will unlock better interest rates",
            final_score / 8.5,
            "high",
        )
    else:
        tier = ProfileItem(
            "Credit Profile Depth",
            "Adding more data sources could provide a more comprehensive credit picture",
            60,
            "low",
        )
    mix = ProfileItem(
        "Credit Mix Diversification",
        "Consider diversifying your financial relationships and payment history types",
        55,
        "low",
    )
    return [tier, mix]


def pad_items(items: List[ProfileItem], fillers: List[ProfileItem], minimum: int = MIN_ITEMS) -> List[ProfileItem]:
    """Append fillers in rotation until `minimum` entries exist; never truncates"""
    padded = list(items)
    index = 0
    while len(padded) < minimum:
        padded.append(fillers[index % len(fillers)])
        index += 1
    return padded


def determine_risk_profile(factors: ScoreFactors) -> str:
    average = factors.alternative_mean()
    if average >= 75:
        return "low"
    elif average >= 60:
        return "medium"
    return "high"


def determine_loan_eligibility(final_score: int) -> LoanEligibility:
    return LoanEligibility(
        **{product: final_score >= floor for product, floor in ELIGIBILITY_THRESHOLDS.items()}
    )


def analyze_profile(profile: FinancialProfile, result: ScoreResult) -> AnalysisResult:
    """
    Run every rule over the profile and assemble the analysis.

    Strengths and weaknesses always contain at least MIN_ITEMS entries; padding
    stops at exactly MIN_ITEMS.
    """
    metrics = build_metrics(profile, result)
    strengths: List[ProfileItem] = []
    weaknesses: List[ProfileItem] = []
    recommendations: List[str] = []

    for rule in PROFILE_RULES:
        if rule.is_strength(metrics):
            strengths.append(rule.strength(metrics))
        elif rule.is_weakness(metrics):
            weaknesses.append(rule.weakness(metrics))
            recommendations.append(rule.recommendation)

    strengths = pad_items(strengths, [_strength_filler(result.final_score)])
    weaknesses = pad_items(weaknesses, _weakness_fillers(result.final_score))

    if not recommendations:
        recommendations.append(DEFAULT_RECOMMENDATION)

    return AnalysisResult(
        strengths=strengths,
        weaknesses=weaknesses,
        recommendations=recommendations,
        risk_profile=determine_risk_profile(result.factors),
        loan_eligibility=determine_loan_eligibility(result.final_score),
        overall_strength=result.factors.alternative_mean(),
    )
