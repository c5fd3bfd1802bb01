"""Numeric helpers shared by the scoring modules"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going toward +infinity (2.5 -> 3, -2.5 -> -2)"""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))
