"""
Command runner for univar.

Builds a single command line from normalized arguments, hands it to the host
shell and turns what happened into an ExecutionOutcome. Nothing here exits the
process; the CLI applies the outcome.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import logging
import subprocess
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence

from univar.config import EXIT_FAILURE, EXIT_SUCCESS, USAGE, RunnerConfig
from univar.normalizer import normalize_arguments

logger = logging.getLogger(__name__)

Executor = Callable[..., Any]


class OutcomeKind(str, Enum):
    """How an invocation ended."""

    SUCCESS = "success"
    EXIT_STATUS = "exit_status"
    FAILURE = "failure"


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of one invocation.

    Attributes:
        kind: Success, numeric exit status, or message-only failure
        exit_code: Status the process should terminate with
        message: Text for the error stream (FAILURE only)
    """

    kind: OutcomeKind
    exit_code: int = EXIT_SUCCESS
    message: Optional[str] = None

    @classmethod
    def success(cls) -> "ExecutionOutcome":
        return cls(OutcomeKind.SUCCESS)

    @classmethod
    def exit_status(cls, code: int) -> "ExecutionOutcome":
        return cls(OutcomeKind.EXIT_STATUS, exit_code=code)

    @classmethod
    def failure(cls, message: str) -> "ExecutionOutcome":
        return cls(OutcomeKind.FAILURE, exit_code=EXIT_FAILURE, message=message)


def build_command_line(args: Sequence[str]) -> str:
    """Join arguments with single spaces. No quoting is applied."""
    return " ".join(args)


def _numeric_status(exc: BaseException) -> Optional[int]:
    # CalledProcessError carries returncode; duck-typed errors may use status
    for attr in ("returncode", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, bool):
            continue
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
    return None


def outcome_from_error(exc: Exception) -> ExecutionOutcome:
    """
    Map an execution error to an outcome.

    A non-negative numeric status is propagated unchanged. A negative one
    means the child was killed by a signal and has no exit status, so it is
    reported like a launch failure.

    Args:
        exc: Exception raised by the execution call

    Returns:
        EXIT_STATUS outcome, or FAILURE carrying the error's message
    """
    status = _numeric_status(exc)
    if status is not None and status >= 0:
        return ExecutionOutcome.exit_status(status)
    return ExecutionOutcome.failure(str(exc) or repr(exc))


def run_command(
    raw_args: Optional[Sequence[Any]],
    environ: Mapping[str, str],
    execute: Optional[Executor] = None,
    config: Optional[RunnerConfig] = None,
) -> ExecutionOutcome:
    """
    Normalize arguments and execute the resulting command line in a shell.

    Args:
        raw_args: Arguments after the program name, may contain placeholders
        environ: Environment mapping for substitution and for the child
        execute: Execution callable (default: subprocess.run)
        config: Runner settings (default: RunnerConfig())

    Returns:
        ExecutionOutcome describing how the invocation ended
    """
    if not raw_args:
        return ExecutionOutcome.failure(USAGE)

    if execute is None:
        execute = subprocess.run
    if config is None:
        config = RunnerConfig()

    command = build_command_line(normalize_arguments(raw_args, environ))

    if config.dry_run:
        logger.info(f"[DRY RUN] Would execute: {command}")
        return ExecutionOutcome.success()

    if len(command) > 100:
        logger.info(f"Executing: {command[:100]}...")
    else:
        logger.info(f"Executing: {command}")

    try:
        execute(command, **config.shell_options(environ))
    except Exception as e:
        outcome = outcome_from_error(e)
        if outcome.kind is OutcomeKind.EXIT_STATUS:
            logger.debug(f"Command exited with status {outcome.exit_code}")
        elif config.verbose:
            logger.error(f"Command could not be executed: {outcome.message}", exc_info=True)
        else:
            logger.debug(f"Command could not be executed: {outcome.message}")
        return outcome

    return ExecutionOutcome.success()
