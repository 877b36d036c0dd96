"""
univar - Run a command line with $VAR and %VAR% placeholders substituted.

Modules:
- normalizer: environment placeholder substitution
- runner: command line construction, shell execution and outcomes
- cli: Typer entry point that forwards every argument

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

__version__ = "0.1.0"
