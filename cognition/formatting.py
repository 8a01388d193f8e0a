"""Human-readable rendering of probabilities and Bayes factors."""

from __future__ import annotations

import math
from enum import Enum


class Interpretation(str, Enum):
    """Qualitative strength of a Bayes factor, strongest contradiction first."""

    STRONG_CONTRADICTION = "Strong Contradiction"
    MODERATE_CONTRADICTION = "Moderate Contradiction"
    WEAK_CONTRADICTION = "Weak Contradiction"
    UNINFORMATIVE = "Uninformative"
    WEAK_SUPPORT = "Weak Support"
    MODERATE_SUPPORT = "Moderate Support"
    STRONG_SUPPORT = "Strong Support"

    @property
    def tone(self) -> str:
        if self is Interpretation.UNINFORMATIVE:
            return "neutral"
        if self.value.endswith("Support"):
            return "support"
        return "contradiction"


def format_percent(value: float, decimals: int = 1) -> str:
    """Render a fraction as a percentage, e.g. 0.7 -> '70.0%'."""
    return f"{value * 100:.{decimals}f}%"


def format_bayes_factor(factor: float) -> str:
    """Render a Bayes factor as a multiplier with precision shrinking as it grows."""
    if factor == math.inf:
        return "∞×"
    if factor >= 100:
        return f"{factor:.0f}×"
    if factor >= 10:
        return f"{factor:.1f}×"
    return f"{factor:.2f}×"


def interpret_bayes_factor(factor: float) -> Interpretation:
    """Map a Bayes factor onto one of seven ordered labels."""
    if factor > 10:
        return Interpretation.STRONG_SUPPORT
    if factor > 3:
        return Interpretation.MODERATE_SUPPORT
    if factor > 1:
        return Interpretation.WEAK_SUPPORT
    if factor == 1:
        return Interpretation.UNINFORMATIVE
    if factor > 0.33:
        return Interpretation.WEAK_CONTRADICTION
    if factor > 0.1:
        return Interpretation.MODERATE_CONTRADICTION
    return Interpretation.STRONG_CONTRADICTION
