"""Hybrid score engine - blends alternative-data factors with a traditional bureau score"""

from creditbridge.domain.models import (
    ScoreBreakdown,
    ScoreFactors,
    ScoreResult,
    ScoreWeights,
    TraditionalCredit,
)
from creditbridge.utils.numbers import clamp, round_half_up

MIN_SCORE = 300
MAX_SCORE = 850
BASE_ALTERNATIVE_SCORE = 500

# Points each factor adds to the alternative score at a factor value of 100
FACTOR_POINTS = {
    "rent_payments": 80,
    "utility_payments": 60,
    "cash_flow": 70,
    "employment_history": 50,
}


def determine_weights(traditional_credit: TraditionalCredit) -> ScoreWeights:
    """
    Pick the traditional/alternative split.

    - yes + score:     40 / 60
    - limited + score: 25 / 75
    - anything else:   fully alternative
    """
    if traditional_credit.score:
        if traditional_credit.has_credit == "yes":
            return ScoreWeights(traditional=0.4, alternative=0.6)
        if traditional_credit.has_credit == "limited":
            return ScoreWeights(traditional=0.25, alternative=0.75)
    return ScoreWeights(traditional=0.0, alternative=1.0)


def _factor_contribution(factors: ScoreFactors, name: str) -> float:
    value = getattr(factors, name)
    if value > 0:
        return value / 100 * FACTOR_POINTS[name]
    return 0.0


def calculate_alternative_score(factors: ScoreFactors) -> float:
    """500 plus a weighted share of each positive factor, bounded to [300, 850]"""
    score = BASE_ALTERNATIVE_SCORE + sum(_factor_contribution(factors, name) for name in FACTOR_POINTS)
    return clamp(score, MIN_SCORE, MAX_SCORE)


def alternative_data_bonus(factors: ScoreFactors, traditional_credit: TraditionalCredit) -> int:
    """Reward thin-file users (no/limited credit) whose alternative data is strong"""
    if traditional_credit.has_credit not in ("no", "limited"):
        return 0

    strength = factors.alternative_mean()
    if strength > 80:
        return 20
    elif strength > 70:
        return 15
    elif strength > 60:
        return 10
    return 0


def blend_score(factors: ScoreFactors, traditional_credit: TraditionalCredit) -> ScoreResult:
    """
    Main entry point: combine factors into the final 300-850 hybrid score.

    Deterministic for a given input. The final score is always clamped and the
    two weights always sum to 1.0.
    """
    weights = determine_weights(traditional_credit)
    alternative_score = calculate_alternative_score(factors)

    if weights.traditional > 0:
        hybrid = traditional_credit.score * weights.traditional + alternative_score * weights.alternative
    else:
        hybrid = alternative_score

    bonus = alternative_data_bonus(factors, traditional_credit)
    final_score = round_half_up(clamp(hybrid + bonus, MIN_SCORE, MAX_SCORE))

    return ScoreResult(
        final_score=final_score,
        factors=factors,
        weights=weights,
        alternative_score=round_half_up(alternative_score),
        alternative_data_strength=round_half_up(factors.alternative_mean()),
        bonus=bonus,
    )


def score_breakdown(result: ScoreResult, traditional_credit: TraditionalCredit) -> ScoreBreakdown:
    """Itemize how the final score was assembled, for the stateless calculator"""
    factors = result.factors
    traditional_contribution = 0.0
    if result.weights.traditional > 0:
        traditional_contribution = traditional_credit.score * result.weights.traditional

    return ScoreBreakdown(
        base_score=BASE_ALTERNATIVE_SCORE,
        rent_contribution=round(_factor_contribution(factors, "rent_payments"), 2),
        utility_contribution=round(_factor_contribution(factors, "utility_payments"), 2),
        cash_flow_contribution=round(_factor_contribution(factors, "cash_flow"), 2),
        employment_contribution=round(_factor_contribution(factors, "employment_history"), 2),
        alternative_score=result.alternative_score,
        alternative_contribution=round(calculate_alternative_score(factors) * result.weights.alternative, 2),
        traditional_contribution=round(traditional_contribution, 2),
        alternative_data_bonus=result.bonus,
    )


def score_band(score: int) -> str:
    """Coarse label used for distribution metrics"""
    if score < 580:
        return "poor"
    elif score < 670:
        return "fair"
    elif score < 740:
        return "good"
    return "excellent"
