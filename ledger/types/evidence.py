"""Evidence entry models."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Return UTC datetime for default timestamps."""
    return datetime.now(UTC)


def new_evidence_id() -> str:
    return str(uuid.uuid4())


class EvidenceDraft(BaseModel):
    """Evidence as submitted by the caller, before it joins the chain."""

    summary: str
    source_url: str = ""
    likelihood_if_true: float
    likelihood_if_false: float


class EvidenceEntry(BaseModel):
    """One observation applied to the belief chain.

    ``prior_prob`` is the belief just before this entry and ``posterior_prob``
    the belief just after. ``bayes_factor`` is fixed when the entry is created;
    only the chain position moves the prior and posterior.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_evidence_id)
    summary: str
    source_url: str = ""
    likelihood_if_true: float
    likelihood_if_false: float
    bayes_factor: float
    prior_prob: float
    posterior_prob: float
    timestamp: datetime = Field(default_factory=utc_now)
