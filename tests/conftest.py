"""
Root test configuration and fixtures for the circles project.

- unit/graph: Graph store and recommendation engine
- unit/api: FastAPI endpoints, settings and error mapping

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from circles.graph import CommunityGraph  # noqa: E402
from circles.models import ConnectionType, User  # noqa: E402


@pytest.fixture
def graph() -> CommunityGraph:
    """Empty community graph with a short lock timeout."""
    return CommunityGraph(lock_timeout=0.5)


@pytest.fixture
def populated_graph(graph: CommunityGraph) -> CommunityGraph:
    """Small community with overlapping interests.

    alice -> bob (Collaborator)
    carol -> alice (Mentor)
    """
    graph.add_user(User(username="alice", bio="Rustacean", interests=["rust", "python", "graphs"]))
    graph.add_user(User(username="bob", interests=["rust", "go"]))
    graph.add_user(User(username="carol", bio=None, interests=["python", "graphs", "ml"]))
    graph.add_user(User(username="dave", interests=["knitting"]))
    graph.connect_users("alice", "bob", ConnectionType.COLLABORATOR, ["work"], "2024-01-01")
    graph.connect_users("carol", "alice", ConnectionType.MENTOR, [], "2023")
    return graph


@pytest.fixture
def client(graph: CommunityGraph) -> Iterator:
    """TestClient against a fresh app whose graph dependency is ``graph``."""
    from fastapi.testclient import TestClient

    from api.dependencies import get_graph
    from api.main import create_app

    app = create_app()
    app.dependency_overrides[get_graph] = lambda: graph
    yield TestClient(app)
    app.dependency_overrides.clear()
