"""
Shared dependencies for the Circles API.

This module provides:
- The process-wide community graph (in-memory, lost on restart)
- FastAPI dependency accessor for it
"""

from __future__ import annotations

from circles.graph import CommunityGraph

from .settings import get_settings

# ========================================
# Community Graph
# ========================================

_settings = get_settings()
community_graph = CommunityGraph(lock_timeout=_settings.lock_timeout_seconds)


def get_graph() -> CommunityGraph:
    """FastAPI dependency returning the shared community graph."""
    return community_graph


__all__ = [
    "community_graph",
    "get_graph",
]
