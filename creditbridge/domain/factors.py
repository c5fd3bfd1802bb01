"""Alternative-data factor scoring: rent, utilities, cash flow and employment"""

import math
from datetime import date
from typing import List

from creditbridge.domain.models import (
    ON_TIME,
    Banking,
    Employment,
    FinancialProfile,
    Housing,
    ScoreFactors,
    UtilityAccount,
)
from creditbridge.utils.numbers import clamp, round_half_up

# Tenure credit per calendar year and its cap, plus the salary component cap
YEAR_POINTS = 20
MAX_STABILITY_POINTS = 80
MAX_SALARY_POINTS = 20


def rent_payment_score(housing: Housing) -> int:
    """
    On-time share of rent payments, 0-100.

    With no recorded history a renter gets a neutral 50; anyone else gets 0.
    """
    history = housing.rent_payment_history
    if not history:
        return 50 if housing.housing_type == "rent" else 0

    on_time = sum(1 for payment in history if payment.status == ON_TIME)
    return round_half_up(on_time / len(history) * 100)


def utility_payment_score(utilities: List[UtilityAccount]) -> int:
    """On-time share across every utility payment pooled together (not averaged per account)"""
    total_payments = 0
    total_on_time = 0
    for account in utilities:
        total_payments += len(account.payment_history)
        total_on_time += sum(1 for payment in account.payment_history if payment.status == ON_TIME)

    if total_payments == 0:
        return 0
    return round_half_up(total_on_time / total_payments * 100)


def cash_flow_score(banking: Banking, clamp_result: bool = False) -> int:
    """
    Blend of savings rate (60%) and balance-to-income ratio (40%).

    The raw value is not bounded: heavy overspending goes negative and a large
    balance pushes it past 100. Pass clamp_result=True to bound it to [0, 100].
    A blend that overflows to infinity scores 0.
    """
    income = banking.monthly_income
    expenses = banking.monthly_expenses
    if not income or not expenses:
        return 0

    savings_rate = (income - expenses) / income
    balance_ratio = banking.average_balance / income
    raw = (savings_rate * 0.6 + balance_ratio * 0.4) * 100
    if not math.isfinite(raw):
        return 0
    score = round_half_up(raw)

    if clamp_result:
        return int(clamp(score, 0, 100))
    return score


def employment_score(employment: Employment, today: date | None = None) -> int:
    """Tenure by calendar-year difference (20/yr, max 80) plus salary/1000 (max 20)"""
    if employment.start_date is None:
        return 0

    current_year = (today or date.today()).year
    years_employed = max(0, current_year - employment.start_date.year)

    stability = min(years_employed * YEAR_POINTS, MAX_STABILITY_POINTS)
    salary = min(employment.annual_salary / 1000, MAX_SALARY_POINTS)
    return round_half_up(stability + salary)


def score_factors(
    profile: FinancialProfile,
    today: date | None = None,
    clamp_cash_flow: bool = False,
) -> ScoreFactors:
    """Compute every factor for a profile. Missing data scores as documented defaults, never errors."""
    return ScoreFactors(
        rent_payments=rent_payment_score(profile.housing),
        utility_payments=utility_payment_score(profile.utilities),
        cash_flow=cash_flow_score(profile.banking, clamp_result=clamp_cash_flow),
        employment_history=employment_score(profile.employment, today),
        traditional_credit=profile.traditional_credit.score or 0,
    )
