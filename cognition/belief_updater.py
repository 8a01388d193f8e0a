"""Belief update in odds form, plus the draft preview and Kelly sizing."""

from __future__ import annotations

from dataclasses import dataclass

from cognition.bayes_factor import bayes_factor
from cognition.odds import clamp01, odds_to_probability, probability_to_odds


def scale_odds(odds: float, factor: float) -> float:
    """Multiply odds by a Bayes factor.

    A zero on either side wins, so ``inf * 0`` is 0 rather than NaN:
    certainty multiplied by impossible evidence collapses to impossibility.
    """
    if odds == 0 or factor == 0:
        return 0.0
    return odds * factor


def update_belief(prior_probability: float, factor: float) -> float:
    """Return the posterior probability after applying one Bayes factor."""
    posterior_odds = scale_odds(probability_to_odds(prior_probability), factor)
    return odds_to_probability(posterior_odds)


@dataclass(frozen=True)
class BeliefBreakdown:
    """Intermediate terms of one Bayes update, for display."""

    p_h: float
    p_not_h: float
    p_e_given_h: float
    p_e_given_not_h: float
    weight_h: float
    weight_not_h: float
    p_e: float
    posterior_h: float
    bayes_factor: float

    @property
    def posterior_not_h(self) -> float:
        return 1.0 - self.posterior_h


def preview_update(
    current_probability: float,
    likelihood_if_true: float,
    likelihood_if_false: float,
) -> BeliefBreakdown:
    """Work through Bayes' theorem in probability form without committing anything.

    P(H|E) = P(H) P(E|H) / P(E). When P(E) is zero the evidence could not
    have been observed under either hypothesis and the prior is kept.
    """
    p_h = clamp01(current_probability)
    p_not_h = clamp01(1 - p_h)
    p_e_given_h = clamp01(likelihood_if_true)
    p_e_given_not_h = clamp01(likelihood_if_false)

    weight_h = p_h * p_e_given_h
    weight_not_h = p_not_h * p_e_given_not_h
    p_e = weight_h + weight_not_h
    posterior_h = weight_h / p_e if p_e > 0 else p_h

    return BeliefBreakdown(
        p_h=p_h,
        p_not_h=p_not_h,
        p_e_given_h=p_e_given_h,
        p_e_given_not_h=p_e_given_not_h,
        weight_h=weight_h,
        weight_not_h=weight_not_h,
        p_e=p_e,
        posterior_h=posterior_h,
        bayes_factor=bayes_factor(p_e_given_h, p_e_given_not_h),
    )


def kelly_fraction(probability: float, odds_offered: float = 3.0) -> float:
    """Kelly criterion stake f* = (p*b - q) / b, floored at zero."""
    if odds_offered <= 0:
        return 0.0
    p = probability
    q = 1 - probability
    return max(0.0, (p * odds_offered - q) / odds_offered)
