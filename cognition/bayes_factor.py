"""Likelihood ratio calculation."""

from __future__ import annotations

import math


def bayes_factor(likelihood_if_true: float, likelihood_if_false: float) -> float:
    """Return P(E|H) / P(E|not H).

    A zero denominator gives ``math.inf`` when the numerator is positive and
    1.0 when both likelihoods are zero (the evidence tells us nothing).
    """
    if likelihood_if_false == 0:
        return math.inf if likelihood_if_true > 0 else 1.0
    return likelihood_if_true / likelihood_if_false
