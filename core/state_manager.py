"""Session owner for the belief ledger."""

from __future__ import annotations

import logging

from cognition.odds import clamp01
from core.event_bus import (
    EVIDENCE_ADDED,
    EVIDENCE_DELETED,
    EVIDENCE_REJECTED,
    PRIOR_CHANGED,
    THESIS_CHANGED,
    EventBus,
)
from ledger import recalculation
from ledger.recalculation import TransitionResult
from ledger.types import BeliefState, EvidenceDraft

logger = logging.getLogger("bc.state_manager")


class StateManager:
    """Holds the single ``BeliefState`` of a session and applies transitions to it.

    Each call swaps in a new snapshot; callers that kept an older ``state``
    reference still see the old values.
    """

    def __init__(
        self,
        event_bus: EventBus | None = None,
        *,
        initial_prior: float = 0.5,
        clamp_inputs: bool = True,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self.clamp_inputs = clamp_inputs
        if clamp_inputs:
            initial_prior = clamp01(initial_prior)
        self.state = recalculation.initial_state(prior_probability=initial_prior)

    def set_thesis(self, thesis: str) -> BeliefState:
        self.state = recalculation.set_thesis(self.state, thesis)
        self.event_bus.emit(THESIS_CHANGED, {"thesis": thesis})
        return self.state

    def set_global_prior(self, prior_probability: float) -> BeliefState:
        before = self.state
        self.state = recalculation.set_global_prior(
            before, prior_probability, clamp=self.clamp_inputs
        )
        if self.state is before:
            logger.warning("Prior ignored, not a finite number: %s", prior_probability)
            return self.state

        logger.info(
            "Prior set to %.4f; %d entries re-derived, current=%.4f",
            self.state.prior_probability,
            len(self.state.evidence),
            self.state.current_probability,
        )
        self.event_bus.emit(
            PRIOR_CHANGED,
            {
                "prior_probability": self.state.prior_probability,
                "current_probability": self.state.current_probability,
            },
        )
        return self.state

    def add_evidence(
        self,
        summary: str,
        source_url: str,
        likelihood_if_true: float,
        likelihood_if_false: float,
    ) -> TransitionResult:
        draft = EvidenceDraft(
            summary=summary,
            source_url=source_url,
            likelihood_if_true=likelihood_if_true,
            likelihood_if_false=likelihood_if_false,
        )
        result = recalculation.add_evidence(self.state, draft, clamp=self.clamp_inputs)
        if not result.accepted:
            logger.warning("Evidence rejected: %s", result.reason)
            self.event_bus.emit(EVIDENCE_REJECTED, {"reason": result.reason})
            return result

        self.state = result.state
        entry = result.entry
        logger.info(
            "Evidence %s added: bf=%s prior=%.4f posterior=%.4f",
            entry.id,
            entry.bayes_factor,
            entry.prior_prob,
            entry.posterior_prob,
        )
        self.event_bus.emit(
            EVIDENCE_ADDED,
            {"evidence_id": entry.id, "current_probability": self.state.current_probability},
        )
        return result

    def delete_evidence(self, evidence_id: str) -> BeliefState:
        before = self.state
        self.state = recalculation.delete_evidence(before, evidence_id)
        if self.state is before:
            logger.debug("Delete ignored, no evidence with id %s", evidence_id)
            return self.state

        logger.info(
            "Evidence %s deleted; %d entries re-derived, current=%.4f",
            evidence_id,
            len(self.state.evidence),
            self.state.current_probability,
        )
        self.event_bus.emit(
            EVIDENCE_DELETED,
            {"evidence_id": evidence_id, "current_probability": self.state.current_probability},
        )
        return self.state
