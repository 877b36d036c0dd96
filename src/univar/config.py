"""
Runtime settings for univar.

There is no configuration file and no environment variable is reserved for
settings: every variable is a substitution candidate. Settings are passed
programmatically through RunnerConfig.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

PROG_NAME = "univar"
USAGE = f"Usage: {PROG_NAME} <command> [args...]"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@dataclass(frozen=True)
class RunnerConfig:
    """Execution settings for the command runner.

    Attributes:
        dry_run: Log the command line instead of executing it
        verbose: Enable DEBUG logging, including launch failure tracebacks
        creationflags: Windows process creation flags. Must stay free of
            CREATE_NO_WINDOW so the child console is never hidden.
    """

    dry_run: bool = False
    verbose: bool = False
    creationflags: int = 0

    def shell_options(self, environ: Mapping[str, str]) -> Dict[str, Any]:
        """
        Build keyword arguments for the shell execution call.

        Streams are left as None so the child inherits ours directly, and
        shell=True hands the joined command line to the host shell unsanitized.

        Args:
            environ: Environment mapping passed through to the child

        Returns:
            Dict of subprocess.run keyword arguments
        """
        return {
            "shell": True,
            "env": dict(environ),
            "stdin": None,
            "stdout": None,
            "stderr": None,
            "check": True,
            "creationflags": self.creationflags,
        }
