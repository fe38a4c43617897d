# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from mimecharset.registry import REGISTRY

# Add scripts/ to sys.path so we can import the generator scripts
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))


@pytest.fixture(params=REGISTRY, ids=[name for _, name in REGISTRY])
def registry_entry(request: pytest.FixtureRequest):
    """Each ``(member, canonical name)`` pair of the registry table."""
    return request.param
