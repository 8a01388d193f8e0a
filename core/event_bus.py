"""In-process event bus for ledger change notifications."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from typing import Any

THESIS_CHANGED = "thesis_changed"
PRIOR_CHANGED = "prior_changed"
EVIDENCE_ADDED = "evidence_added"
EVIDENCE_REJECTED = "evidence_rejected"
EVIDENCE_DELETED = "evidence_deleted"

LEDGER_EVENTS = (
    THESIS_CHANGED,
    PRIOR_CHANGED,
    EVIDENCE_ADDED,
    EVIDENCE_REJECTED,
    EVIDENCE_DELETED,
)

EventHandler = Callable[[dict[str, Any]], None]


class EventBus:
    """Dispatches ledger events to subscribers by event name."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        """Register a callback for an event."""
        self._handlers[event_name].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Register a callback for every ledger event."""
        for event_name in LEDGER_EVENTS:
            self.subscribe(event_name, handler)

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        """Emit an event to all subscribers, tagging the payload with its name."""
        event = {"event": event_name, **payload}
        for handler in self._handlers.get(event_name, []):
            handler(event)
