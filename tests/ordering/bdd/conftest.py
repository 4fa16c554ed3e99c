"""Shared BDD fixtures for the Ordering context."""

import pytest


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}
