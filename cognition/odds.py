"""Conversions between probability space and odds space."""

from __future__ import annotations

import math


def clamp01(value: float) -> float:
    """Clamp a value into [0, 1]. NaN clamps to 0."""
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


def probability_to_odds(probability: float) -> float:
    """Convert P to odds P / (1 - P).

    Certainty maps to ``math.inf`` and impossibility to ``0.0`` so the
    boundaries never go through a division.
    """
    if probability >= 1:
        return math.inf
    if probability <= 0:
        return 0.0
    return probability / (1 - probability)


def odds_to_probability(odds: float) -> float:
    """Convert odds O to probability O / (1 + O)."""
    if odds == math.inf:
        return 1.0
    # Negative odds only come from out-of-range likelihoods.
    if odds <= 0:
        return 0.0
    return odds / (1 + odds)
