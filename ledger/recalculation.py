"""Pure state transitions for the evidence ledger.

Every transition takes a ``BeliefState`` and returns a new one; the input is
never mutated. Whenever the chain's starting point or membership changes,
the whole chain is re-derived from the global prior so that

    entries[0].prior_prob == state.prior_probability
    entries[i].prior_prob == entries[i - 1].posterior_prob

holds after the call. Appending is the one exception: a new tail entry
cannot change anything upstream of it.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from cognition.bayes_factor import bayes_factor
from cognition.belief_updater import update_belief
from cognition.odds import clamp01
from ledger.types import BeliefState, EvidenceDraft, EvidenceEntry


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of a transition that may be rejected."""

    state: BeliefState
    accepted: bool = True
    reason: str = ""
    entry: EvidenceEntry | None = None


def initial_state(prior_probability: float = 0.5, thesis: str = "") -> BeliefState:
    """Fresh session state with no evidence."""
    return BeliefState(
        thesis=thesis,
        prior_probability=prior_probability,
        current_probability=prior_probability,
    )


def rewalk(
    entries: Iterable[EvidenceEntry], prior_probability: float
) -> tuple[tuple[EvidenceEntry, ...], float]:
    """Re-derive every entry's prior/posterior in order, starting from ``prior_probability``.

    Stored Bayes factors are reused as-is. Returns the rebuilt entries and the
    final running probability.
    """
    current = prior_probability
    rebuilt: list[EvidenceEntry] = []
    for entry in entries:
        posterior = update_belief(current, entry.bayes_factor)
        rebuilt.append(entry.model_copy(update={"prior_prob": current, "posterior_prob": posterior}))
        current = posterior
    return tuple(rebuilt), current


def set_thesis(state: BeliefState, thesis: str) -> BeliefState:
    return state.model_copy(update={"thesis": thesis})


def set_global_prior(state: BeliefState, new_prior: float, *, clamp: bool = True) -> BeliefState:
    """Replace the starting belief and re-derive the chain.

    A NaN or infinite prior has no place in [0, 1]; the same state is
    returned so the caller can tell nothing changed.
    """
    if not math.isfinite(new_prior):
        return state
    prior = clamp01(new_prior) if clamp else new_prior
    entries, current = rewalk(state.evidence, prior)
    return state.model_copy(
        update={
            "prior_probability": prior,
            "current_probability": current,
            "evidence": entries,
        }
    )


def validate_draft(draft: EvidenceDraft) -> str:
    """Return a rejection reason, or an empty string when the draft is usable."""
    if not draft.summary.strip():
        return "Please provide an evidence summary."
    if not (math.isfinite(draft.likelihood_if_true) and math.isfinite(draft.likelihood_if_false)):
        return "Likelihoods must be finite numbers."
    return ""


def add_evidence(state: BeliefState, draft: EvidenceDraft, *, clamp: bool = True) -> TransitionResult:
    """Append one piece of evidence to the end of the chain.

    A rejected draft returns the original state untouched.
    """
    reason = validate_draft(draft)
    if reason:
        return TransitionResult(state=state, accepted=False, reason=reason)

    likelihood_if_true = draft.likelihood_if_true
    likelihood_if_false = draft.likelihood_if_false
    if clamp:
        likelihood_if_true = clamp01(likelihood_if_true)
        likelihood_if_false = clamp01(likelihood_if_false)

    factor = bayes_factor(likelihood_if_true, likelihood_if_false)
    prior = state.current_probability
    entry = EvidenceEntry(
        summary=draft.summary.strip(),
        source_url=draft.source_url.strip(),
        likelihood_if_true=likelihood_if_true,
        likelihood_if_false=likelihood_if_false,
        bayes_factor=factor,
        prior_prob=prior,
        posterior_prob=update_belief(prior, factor),
    )
    new_state = state.model_copy(
        update={
            "current_probability": entry.posterior_prob,
            "evidence": (*state.evidence, entry),
        }
    )
    return TransitionResult(state=new_state, entry=entry)


def delete_evidence(state: BeliefState, evidence_id: str) -> BeliefState:
    """Remove one entry and re-derive the chain from the global prior.

    Unknown ids are ignored and the same state is returned.
    """
    if state.find(evidence_id) is None:
        return state
    remaining = [entry for entry in state.evidence if entry.id != evidence_id]
    entries, current = rewalk(remaining, state.prior_probability)
    return state.model_copy(update={"current_probability": current, "evidence": entries})
