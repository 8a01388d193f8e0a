"""Typer command handlers."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any

import typer
import yaml

from cognition.bayes_factor import bayes_factor
from cognition.belief_updater import kelly_fraction, preview_update, update_belief
from cognition.formatting import format_bayes_factor, format_percent, interpret_bayes_factor
from core.orchestrator import Orchestrator, RuntimeBundle
from core.policy_runtime import configure_logging, load_yaml
from core.state_manager import StateManager
from ledger.types import BeliefState

logger = logging.getLogger("bc.cli")

_SESSION_HELP = """\
Commands:
  thesis <text>        set the thesis
  prior <p>            set the starting probability
  add                  add evidence (prompts for details)
  preview <lt> <lf>    show the update a draft would make, without adding it
  delete <n|id>        delete evidence by position (1-based) or id
  show                 print the ledger
  help                 show this help
  exit                 leave the session"""


def _runtime(root: Path | None = None) -> RuntimeBundle:
    bundle = Orchestrator(root=root).build()
    configure_logging(bundle.config)
    return bundle


def _decimals(config: dict[str, Any]) -> int:
    return int(config.get("formatting", {}).get("percent_decimals", 1))


def render_ledger(state: BeliefState, decimals: int = 1) -> list[str]:
    """Render the ledger as text lines, one per evidence entry."""
    lines = [
        f"Thesis: {state.thesis or '(none)'}",
        f"Prior: {format_percent(state.prior_probability, decimals)}",
    ]
    if not state.evidence:
        lines.append("No evidence yet.")
    for index, entry in enumerate(state.evidence, start=1):
        label = interpret_bayes_factor(entry.bayes_factor).value
        lines.append(
            f"{index}. {entry.summary} | BF {format_bayes_factor(entry.bayes_factor)} ({label}) | "
            f"{format_percent(entry.prior_prob, decimals)} -> "
            f"{format_percent(entry.posterior_prob, decimals)}"
        )
        if entry.source_url:
            lines.append(f"   source: {entry.source_url}")
        lines.append(f"   id: {entry.id}")
    lines.append(f"Current: {format_percent(state.current_probability, decimals)}")
    return lines


def _render_preview(current: float, likelihood_if_true: float, likelihood_if_false: float, decimals: int) -> list[str]:
    breakdown = preview_update(current, likelihood_if_true, likelihood_if_false)
    return [
        f"P(H) = {format_percent(breakdown.p_h, decimals)}  P(not H) = {format_percent(breakdown.p_not_h, decimals)}",
        f"P(E|H) = {breakdown.p_e_given_h:.2f}  P(E|not H) = {breakdown.p_e_given_not_h:.2f}",
        f"P(H)P(E|H) = {breakdown.weight_h:.4f}  P(not H)P(E|not H) = {breakdown.weight_not_h:.4f}",
        f"P(E) = {breakdown.p_e:.4f}",
        f"Bayes factor = {format_bayes_factor(breakdown.bayes_factor)} "
        f"({interpret_bayes_factor(breakdown.bayes_factor).value})",
        f"P(H|E) = {format_percent(breakdown.posterior_h, decimals)}",
    ]


def factor(likelihood_if_true: float, likelihood_if_false: float) -> None:
    """Print a Bayes factor and its interpretation."""
    value = bayes_factor(likelihood_if_true, likelihood_if_false)
    typer.echo(f"{format_bayes_factor(value)} ({interpret_bayes_factor(value).value})")


def update(prior_probability: float, factor_value: float) -> None:
    """Print the posterior for one update."""
    bundle = _runtime()
    posterior = update_belief(prior_probability, factor_value)
    typer.echo(format_percent(posterior, _decimals(bundle.config)))


def interpret(factor_value: float) -> None:
    """Print the qualitative label for a Bayes factor."""
    typer.echo(interpret_bayes_factor(factor_value).value)


def kelly(probability: float, odds_offered: float | None = None) -> None:
    """Print the Kelly stake for a probability."""
    bundle = _runtime()
    if odds_offered is None:
        odds_offered = float(bundle.config.get("kelly", {}).get("odds_offered", 3.0))
    stake = kelly_fraction(probability, odds_offered)
    typer.echo(f"Kelly stake at {odds_offered:g}:1 = {format_percent(stake, _decimals(bundle.config))}")


def preview(current_probability: float, likelihood_if_true: float, likelihood_if_false: float) -> None:
    """Print the worked Bayes update for a draft."""
    bundle = _runtime()
    for line in _render_preview(
        current_probability, likelihood_if_true, likelihood_if_false, _decimals(bundle.config)
    ):
        typer.echo(line)


def replay(path: Path) -> None:
    """Build a ledger from a YAML scenario file and print it."""
    bundle = _runtime()
    logger.info("Replaying scenario %s", path)
    try:
        scenario = load_yaml(path)
    except (ValueError, yaml.YAMLError) as exc:
        typer.echo(f"Invalid scenario {path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    if not scenario:
        typer.echo(f"Scenario not found or empty: {path}", err=True)
        raise typer.Exit(code=1)

    manager = bundle.state_manager
    if "thesis" in scenario:
        manager.set_thesis(str(scenario["thesis"]))
    if "prior" in scenario:
        prior = _to_float(scenario["prior"])
        if prior is None:
            typer.echo(f"Invalid prior: {scenario['prior']!r}", err=True)
            raise typer.Exit(code=1)
        manager.set_global_prior(prior)

    evidence = scenario.get("evidence") or []
    if not isinstance(evidence, list):
        typer.echo("Scenario 'evidence' must be a list.", err=True)
        raise typer.Exit(code=1)

    rejected = 0
    for index, item in enumerate(evidence, start=1):
        reason = _replay_item(manager, item)
        if reason:
            rejected += 1
            typer.echo(f"Evidence #{index} rejected: {reason}", err=True)

    for line in render_ledger(manager.state, _decimals(bundle.config)):
        typer.echo(line)
    if rejected:
        raise typer.Exit(code=1)


def _replay_item(manager: StateManager, item: object) -> str:
    """Add one scenario item, returning a rejection reason or an empty string."""
    if not isinstance(item, dict):
        return "Each evidence item must be a mapping."
    likelihood_if_true = _to_float(item.get("likelihood_if_true", 0.5))
    likelihood_if_false = _to_float(item.get("likelihood_if_false", 0.5))
    if likelihood_if_true is None or likelihood_if_false is None:
        return "Likelihoods must be finite numbers."
    result = manager.add_evidence(
        summary=str(item.get("summary") or ""),
        source_url=str(item.get("source_url") or ""),
        likelihood_if_true=likelihood_if_true,
        likelihood_if_false=likelihood_if_false,
    )
    return result.reason


def session() -> None:
    """Run an interactive ledger session."""
    bundle = _runtime()
    manager = bundle.state_manager
    decimals = _decimals(bundle.config)
    typer.echo("Belief ledger session. Type 'help' for commands.")
    while True:
        line = typer.prompt("ledger").strip()
        command, _, rest = line.partition(" ")
        command = command.lower()
        rest = rest.strip()

        if command in {"exit", "quit"}:
            typer.echo("bye")
            break
        if command == "help":
            typer.echo(_SESSION_HELP)
        elif command == "thesis":
            manager.set_thesis(rest)
            typer.echo(f"Thesis: {rest or '(none)'}")
        elif command == "prior":
            value = _to_float(rest)
            if value is None:
                typer.echo("Usage: prior <probability>", err=True)
                continue
            state = manager.set_global_prior(value)
            typer.echo(f"Current: {format_percent(state.current_probability, decimals)}")
        elif command == "add":
            _session_add(manager, decimals)
        elif command == "preview":
            parts = [_to_float(p) for p in rest.split()]
            if len(parts) != 2 or None in parts:
                typer.echo("Usage: preview <likelihood_if_true> <likelihood_if_false>", err=True)
                continue
            for out in _render_preview(manager.state.current_probability, parts[0], parts[1], decimals):
                typer.echo(out)
        elif command == "delete":
            evidence_id = _resolve_evidence_id(manager.state, rest)
            if evidence_id is None:
                typer.echo(f"No evidence matches '{rest}'.", err=True)
                continue
            state = manager.delete_evidence(evidence_id)
            typer.echo(f"Current: {format_percent(state.current_probability, decimals)}")
        elif command == "show":
            for out in render_ledger(manager.state, decimals):
                typer.echo(out)
        elif command:
            typer.echo(f"Unknown command: {command}. Type 'help'.", err=True)


def _session_add(manager: StateManager, decimals: int) -> None:
    summary = typer.prompt("summary", default="", show_default=False)
    source_url = typer.prompt("source", default="", show_default=False)
    likelihood_if_true = typer.prompt("P(E|H)", type=float)
    likelihood_if_false = typer.prompt("P(E|not H)", type=float)
    result = manager.add_evidence(
        summary=summary,
        source_url=source_url,
        likelihood_if_true=likelihood_if_true,
        likelihood_if_false=likelihood_if_false,
    )
    if not result.accepted:
        typer.echo(result.reason, err=True)
        return
    entry = result.entry
    typer.echo(
        f"Added: BF {format_bayes_factor(entry.bayes_factor)} | "
        f"{format_percent(entry.prior_prob, decimals)} -> {format_percent(entry.posterior_prob, decimals)}"
    )


def _to_float(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _resolve_evidence_id(state: BeliefState, token: str) -> str | None:
    if token.isdigit():
        position = int(token)
        if 1 <= position <= len(state.evidence):
            return state.evidence[position - 1].id
        return None
    entry = state.find(token)
    return entry.id if entry else None


def config_show() -> None:
    """Show effective runtime config."""
    bundle = _runtime()
    typer.echo(json.dumps(bundle.config, indent=2))
