"""CLI entrypoint for belief-ledger."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Bayesian conviction ledger")
config_app = typer.Typer(help="Configuration commands")


@app.command("factor")
def factor_cmd(
    likelihood_if_true: float = typer.Argument(..., help="P(E|H)"),
    likelihood_if_false: float = typer.Argument(..., help="P(E|not H)"),
) -> None:
    """Compute a Bayes factor."""
    commands.factor(likelihood_if_true=likelihood_if_true, likelihood_if_false=likelihood_if_false)


@app.command("update")
def update_cmd(
    prior: float = typer.Argument(..., help="Prior probability"),
    bayes_factor: float = typer.Argument(..., help="Bayes factor to apply"),
) -> None:
    """Apply one Bayes factor to a prior."""
    commands.update(prior_probability=prior, factor_value=bayes_factor)


@app.command("interpret")
def interpret_cmd(bayes_factor: float = typer.Argument(..., help="Bayes factor")) -> None:
    """Label the strength of a Bayes factor."""
    commands.interpret(factor_value=bayes_factor)


@app.command("kelly")
def kelly_cmd(
    probability: float = typer.Argument(..., help="Probability the thesis is true"),
    odds: float | None = typer.Option(None, "--odds", help="Payout odds b (default from config)"),
) -> None:
    """Kelly criterion stake for a probability."""
    commands.kelly(probability=probability, odds_offered=odds)


@app.command("preview")
def preview_cmd(
    current: float = typer.Argument(..., help="Current probability"),
    likelihood_if_true: float = typer.Argument(..., help="P(E|H)"),
    likelihood_if_false: float = typer.Argument(..., help="P(E|not H)"),
) -> None:
    """Show a worked update without recording it."""
    commands.preview(
        current_probability=current,
        likelihood_if_true=likelihood_if_true,
        likelihood_if_false=likelihood_if_false,
    )


@app.command("replay")
def replay_cmd(path: Path = typer.Argument(..., help="YAML scenario file")) -> None:
    """Build a ledger from a scenario file."""
    commands.replay(path=path)


@app.command("session")
def session_cmd() -> None:
    """Interactive ledger session."""
    commands.session()


@config_app.command("show")
def config_show_cmd() -> None:
    """Show effective configuration."""
    commands.config_show()


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
