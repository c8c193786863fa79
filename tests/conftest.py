"""Pytest configuration and fixtures for Isochron tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so isochron can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def new_york():
    """IANA rules for America/New_York."""
    from isochron import Timezone

    return Timezone.named("America/New_York")
