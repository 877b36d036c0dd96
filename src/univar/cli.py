"""
Main CLI entry point for univar.

Every token after the program name is forwarded to the runner. No options are
recognized, not even --help, so `univar ls --help` reaches ls untouched.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import logging
import os
from typing import List, Optional

import typer

from univar.config import PROG_NAME, RunnerConfig
from univar.runner import ExecutionOutcome, run_command

app = typer.Typer(
    name=PROG_NAME,
    help="Run a command with $VAR and %VAR% placeholders substituted",
    add_completion=False,
)


def setup_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def emit_outcome(outcome: ExecutionOutcome) -> None:
    """
    Apply an outcome: report its message on stderr and exit with its code.

    This is the only place univar terminates. It never runs inside the
    try block that wraps the shell execution.

    Raises:
        typer.Exit: Always
    """
    if outcome.message:
        typer.echo(outcome.message, err=True)
    raise typer.Exit(code=outcome.exit_code)


@app.command(
    add_help_option=False,
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
def univar(ctx: typer.Context):
    """Substitute environment placeholders and run the command in a shell."""
    # Defaults only; settings are never read from the environment
    config = RunnerConfig()
    setup_logging(config.verbose)
    outcome = run_command(ctx.args, os.environ, config=config)
    emit_outcome(outcome)


def main(argv: Optional[List[str]] = None):
    """Entry point for the CLI."""
    app(args=argv, prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
