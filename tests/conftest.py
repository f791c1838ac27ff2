"""Shared test fixtures for flowcanvas."""

import pytest

from flowcanvas.engine.registry import NodeRegistry


@pytest.fixture(scope="session")
def registry():
    """Session-scoped registry with every node kind discovered."""
    reg = NodeRegistry()
    reg.discover()
    return reg
