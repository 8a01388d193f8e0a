"""Belief state root model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ledger.types.evidence import EvidenceEntry


class BeliefState(BaseModel):
    """Snapshot of the ledger: thesis, global prior, and the ordered evidence chain.

    ``current_probability`` is the last entry's posterior, or the prior when
    there is no evidence. Transitions in ``ledger.recalculation`` keep it in
    step; nothing else should write it.
    """

    model_config = ConfigDict(frozen=True)

    thesis: str = ""
    prior_probability: float = 0.5
    current_probability: float = 0.5
    evidence: tuple[EvidenceEntry, ...] = ()

    def find(self, evidence_id: str) -> EvidenceEntry | None:
        for entry in self.evidence:
            if entry.id == evidence_id:
                return entry
        return None
