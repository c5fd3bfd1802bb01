"""Full analytics run: factors -> blended score -> analysis, offers and trend"""

import random
from datetime import date, datetime, timezone

from creditbridge.domain.analyzer import analyze_profile
from creditbridge.domain.factors import score_factors
from creditbridge.domain.history import generate_historical_series
from creditbridge.domain.loan_offers import generate_loan_offers
from creditbridge.domain.models import Analytics, AnalyticsSummary, FinancialProfile, ScoreResult
from creditbridge.domain.scoring import blend_score


def calculate_score(
    profile: FinancialProfile,
    today: date | None = None,
    clamp_cash_flow: bool = False,
) -> ScoreResult:
    """Factor scoring plus blending; deterministic for a fixed `today`"""
    factors = score_factors(profile, today=today, clamp_cash_flow=clamp_cash_flow)
    return blend_score(factors, profile.traditional_credit)


def generate_analytics(
    profile: FinancialProfile,
    rng: random.Random,
    today: date | None = None,
    now: datetime | None = None,
    clamp_cash_flow: bool = False,
    history_baseline: int = 580,
    history_months: int = 12,
    history_jitter: float = 10.0,
) -> Analytics:
    """
    Main entry point: derive every analytics artifact for one profile.

    Only the historical series uses `rng`; everything else is deterministic.
    """
    now = now or datetime.now(timezone.utc)
    today = today or now.date()

    result = calculate_score(profile, today=today, clamp_cash_flow=clamp_cash_flow)

    return Analytics(
        current_score=result,
        historical_data=generate_historical_series(
            result.final_score,
            rng,
            today=today,
            baseline=history_baseline,
            months=history_months,
            jitter=history_jitter,
        ),
        analysis=analyze_profile(profile, result),
        loan_offers=generate_loan_offers(result.final_score),
        generated_at=now,
    )


def summarize(analytics: Analytics) -> AnalyticsSummary:
    analysis = analytics.analysis
    return AnalyticsSummary(
        strengths=[item.title for item in analysis.strengths],
        weaknesses=[item.title for item in analysis.weaknesses],
        recommendations=list(analysis.recommendations),
        risk_profile=analysis.risk_profile,
        loan_eligibility=analysis.loan_eligibility,
    )
