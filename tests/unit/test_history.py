"""Unit tests for the synthetic score history"""

import random
from datetime import date
from creditbridge.domain.history import generate_historical_series

TODAY = date(2026, 10, 19)


def test_twelve_points_oldest_first():
    points = generate_historical_series(720, random.Random(7), today=TODAY)

    assert len(points) == 12
    assert points[0].date == date(2025, 11, 19)
    assert points[-1].date == TODAY
    assert points[-1].month == "Oct 2026"
    assert [p.date for p in points] == sorted(p.date for p in points)


def test_linear_ramp_without_jitter():
    points = generate_historical_series(700, random.Random(0), today=TODAY, jitter=0)

    assert points[0].score == 590
    assert points[5].score == 640
    assert points[-1].score == 700


def test_seeded_series_is_reproducible():
    first = generate_historical_series(768, random.Random(1234), today=TODAY)
    second = generate_historical_series(768, random.Random(1234), today=TODAY)
    assert first == second


def test_noise_stays_within_jitter():
    points = generate_historical_series(700, random.Random(42), today=TODAY, jitter=10)
    for index, point in enumerate(points, start=1):
        expected = 580 + 120 * index / 12
        assert abs(point.score - expected) <= 11


def test_scores_clamped_to_range():
    high = generate_historical_series(850, random.Random(3), today=TODAY, baseline=850, jitter=50)
    low = generate_historical_series(300, random.Random(3), today=TODAY, baseline=300, jitter=50)

    assert all(point.score <= 850 for point in high)
    assert all(point.score >= 300 for point in low)


def test_month_end_dates_clamp():
    points = generate_historical_series(700, random.Random(0), today=date(2026, 3, 31))

    assert points[-2].date == date(2026, 2, 28)
    assert points[0].date == date(2025, 4, 30)
    assert points[0].month == "Apr 2025"


def test_custom_length():
    points = generate_historical_series(700, random.Random(0), today=TODAY, months=6)
    assert len(points) == 6
    assert points[0].date == date(2026, 5, 19)
