"""Pytest configuration and shared fixtures.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import os
from typing import Dict
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def environ() -> Dict[str, str]:
    """Copy of the real environment that tests can extend freely."""
    return dict(os.environ)


@pytest.fixture
def mock_execute() -> MagicMock:
    """Execution callable that succeeds without running anything."""
    return MagicMock(return_value=None)
