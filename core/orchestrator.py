"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.event_bus import EventBus
from core.policy_runtime import load_effective_config
from core.state_manager import StateManager


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    event_bus: EventBus
    state_manager: StateManager


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root)
        engine_cfg = config.get("engine", {})

        event_bus = EventBus()
        state_manager = StateManager(
            event_bus=event_bus,
            initial_prior=float(engine_cfg.get("initial_prior", 0.5)),
            clamp_inputs=bool(engine_cfg.get("clamp_inputs", True)),
        )
        return RuntimeBundle(config=config, event_bus=event_bus, state_manager=state_manager)
