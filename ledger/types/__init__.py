"""Typed ledger models."""

from ledger.types.belief_state import BeliefState
from ledger.types.evidence import EvidenceDraft, EvidenceEntry

__all__ = [
    "BeliefState",
    "EvidenceDraft",
    "EvidenceEntry",
]
