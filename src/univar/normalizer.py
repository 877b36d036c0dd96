"""
Environment placeholder substitution for command arguments.

Supports both `$VAR` and `%VAR%` syntax. There is no escape mechanism, so a
literal `$FOO` cannot be protected when FOO is defined.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import logging
from typing import Any, List, Mapping

logger = logging.getLogger(__name__)


def normalize_arguments(args: Any, environ: Mapping[str, str]) -> List[str]:
    """
    Replace environment variable placeholders in command arguments.

    Names are applied longest first so `$ABC` is never read as `$AB` + `C`.
    Each name is applied once to the progressively updated argument; names
    missing from environ leave their placeholders untouched for the shell.

    Args:
        args: List (or tuple) of command arguments. Anything else yields []
        environ: Environment mapping used as the substitution source

    Returns:
        New list of arguments with placeholders substituted

    Example:
        >>> normalize_arguments(["echo", "$FOO", "%FOO%"], {"FOO": "hi"})
        ['echo', 'hi', 'hi']
    """
    if not isinstance(args, (list, tuple)):
        return []

    # Stable sort: equal-length names keep the mapping's order
    names = sorted((name for name in environ if name), key=len, reverse=True)

    normalized = []
    for arg in args:
        result = str(arg)
        for name in names:
            value = environ[name] or ""
            result = result.replace(f"${name}", value)
            result = result.replace(f"%{name}%", value)
        if result != str(arg):
            logger.debug(f"Substituted {arg!r} -> {result!r}")
        normalized.append(result)

    return normalized
