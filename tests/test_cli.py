"""CLI behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from ui.cli.cli import app

runner = CliRunner()


def test_factor_and_interpret_commands() -> None:
    result = runner.invoke(app, ["factor", "0.7", "0.3"])
    assert result.exit_code == 0
    assert "2.33×" in result.output
    assert "Weak Support" in result.output

    result = runner.invoke(app, ["interpret", "15"])
    assert result.exit_code == 0
    assert result.output.strip() == "Strong Support"


def test_update_and_kelly_commands() -> None:
    result = runner.invoke(app, ["update", "0.5", "3"])
    assert result.exit_code == 0
    assert result.output.strip() == "75.0%"

    result = runner.invoke(app, ["kelly", "0.5", "--odds", "3"])
    assert result.exit_code == 0
    assert "33.3%" in result.output


def test_preview_command() -> None:
    result = runner.invoke(app, ["preview", "0.5", "0.7", "0.3"])
    assert result.exit_code == 0
    assert "P(E) = 0.5000" in result.output
    assert "P(H|E) = 70.0%" in result.output


def test_replay_builds_ledger(tmp_path: Path) -> None:
    scenario = tmp_path / "scenario.yaml"
    scenario.write_text(
        "thesis: The launch slips\n"
        "prior: 0.5\n"
        "evidence:\n"
        "  - summary: Vendor missed milestone\n"
        "    source_url: https://example.com/a\n"
        "    likelihood_if_true: 0.7\n"
        "    likelihood_if_false: 0.3\n"
        "  - summary: Team hired contractors\n"
        "    likelihood_if_true: 0.9\n"
        "    likelihood_if_false: 0.5\n",
        encoding="utf-8",
    )
    result = runner.invoke(app, ["replay", str(scenario)])

    assert result.exit_code == 0
    assert "Thesis: The launch slips" in result.output
    assert "1. Vendor missed milestone | BF 2.33× (Weak Support) | 50.0% -> 70.0%" in result.output
    assert "2. Team hired contractors | BF 1.80× (Weak Support) | 70.0% -> 80.8%" in result.output
    assert "Current: 80.8%" in result.output


def test_replay_reports_rejected_evidence(tmp_path: Path) -> None:
    scenario = tmp_path / "scenario.yaml"
    scenario.write_text(
        "evidence:\n"
        "  - summary: ''\n"
        "    likelihood_if_true: 0.7\n"
        "    likelihood_if_false: 0.3\n",
        encoding="utf-8",
    )
    result = runner.invoke(app, ["replay", str(scenario)])

    assert result.exit_code == 1
    assert "rejected" in result.output
    assert "No evidence yet." in result.output


def test_session_add_delete_and_show() -> None:
    script = "\n".join(
        [
            "thesis Rain tomorrow",
            "add",
            "Dark clouds",
            "",
            "0.7",
            "0.3",
            "add",
            "Falling pressure",
            "",
            "0.9",
            "0.5",
            "delete 1",
            "show",
            "exit",
        ]
    ) + "\n"
    result = runner.invoke(app, ["session"], input=script)

    assert result.exit_code == 0
    assert "Added: BF 2.33× | 50.0% -> 70.0%" in result.output
    assert "1. Falling pressure | BF 1.80× (Weak Support) | 50.0% -> 64.3%" in result.output
    assert "Current: 64.3%" in result.output
    assert "bye" in result.output


def test_session_rejects_blank_summary() -> None:
    result = runner.invoke(app, ["session"], input="add\n\n\n0.7\n0.3\nshow\nexit\n")
    assert result.exit_code == 0
    assert "Please provide an evidence summary." in result.output
    assert "No evidence yet." in result.output


def test_config_show_outputs_json() -> None:
    result = runner.invoke(app, ["config", "show"])
    assert result.exit_code == 0
    config = json.loads(result.output)
    assert config["engine"]["initial_prior"] == 0.5


def test_session_rejects_non_finite_prior() -> None:
    result = runner.invoke(app, ["session"], input="prior nan\nprior inf\nshow\nexit\n")
    assert result.exit_code == 0
    assert "Usage: prior <probability>" in result.output
    assert "Prior: 50.0%" in result.output
    assert "100.0%" not in result.output


def test_replay_rejects_malformed_items(tmp_path: Path) -> None:
    scenario = tmp_path / "scenario.yaml"
    scenario.write_text(
        "evidence:\n"
        "  - just a string\n"
        "  - summary: Loud rumour\n"
        "    likelihood_if_true: high\n"
        "    likelihood_if_false: 0.3\n"
        "  - summary: Signed contract\n"
        "    likelihood_if_true: 0.9\n"
        "    likelihood_if_false: 0.3\n",
        encoding="utf-8",
    )
    result = runner.invoke(app, ["replay", str(scenario)])

    assert result.exit_code == 1
    assert not isinstance(result.exception, (AttributeError, ValueError))
    assert "Evidence #1 rejected: Each evidence item must be a mapping." in result.output
    assert "Evidence #2 rejected: Likelihoods must be finite numbers." in result.output
    assert "1. Signed contract" in result.output


def test_replay_rejects_non_mapping_scenario(tmp_path: Path) -> None:
    scenario = tmp_path / "scenario.yaml"
    scenario.write_text("- summary: A\n- summary: B\n", encoding="utf-8")
    result = runner.invoke(app, ["replay", str(scenario)])

    assert result.exit_code == 1
    assert "Invalid scenario" in result.output


def test_replay_rejects_bad_prior(tmp_path: Path) -> None:
    scenario = tmp_path / "scenario.yaml"
    scenario.write_text("prior: .nan\nevidence: []\n", encoding="utf-8")
    result = runner.invoke(app, ["replay", str(scenario)])

    assert result.exit_code == 1
    assert "Invalid prior" in result.output
