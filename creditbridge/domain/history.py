"""Synthetic monthly score trend for charting"""

import random
from datetime import date
from typing import List

from creditbridge.domain.models import HistoricalPoint
from creditbridge.domain.scoring import MAX_SCORE, MIN_SCORE
from creditbridge.utils.date_utils import subtract_months
from creditbridge.utils.numbers import clamp, round_half_up


def generate_historical_series(
    final_score: int,
    rng: random.Random,
    today: date | None = None,
    baseline: int = 580,
    months: int = 12,
    jitter: float = 10.0,
) -> List[HistoricalPoint]:
    """
    Interpolate from `baseline` to `final_score` over the past `months` months.

    Demo data only, not a real history. Each point gets uniform noise in
    [-jitter, +jitter) drawn from `rng` and is clamped to [300, 850]. Points are
    oldest first; the last one is dated `today`.

    Example (jitter=0, final 700):
        month 1 -> 590, month 6 -> 640, month 12 -> 700
    """
    today = today or date.today()
    points = []

    for months_back in range(months - 1, -1, -1):
        point_date = subtract_months(today, months_back)
        progress = (months - months_back) / months
        noise = (rng.random() - 0.5) * 2 * jitter
        score = round_half_up(baseline + (final_score - baseline) * progress + noise)

        points.append(
            HistoricalPoint(
                date=point_date,
                score=int(clamp(score, MIN_SCORE, MAX_SCORE)),
                month=point_date.strftime("%b %Y"),
            )
        )

    return points
