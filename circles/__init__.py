"""
Circles - Core business logic for the community connection service.

This package contains:
- models: Domain models (User, Connection, ConnectionType, RecommendedConnection)
- errors: Error kinds raised by the graph store
- graph: In-memory community graph and the connection recommender
- logging_config: Unified logging format
"""

from circles.errors import (
    ConnectionFailedError,
    ErrorKind,
    GraphError,
    InternalGraphError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from circles.graph import CommunityGraph, recommend_connection_type
from circles.models import Connection, ConnectionType, RecommendedConnection, User

__all__ = [
    "CommunityGraph",
    "Connection",
    "ConnectionFailedError",
    "ConnectionType",
    "ErrorKind",
    "GraphError",
    "InternalGraphError",
    "RecommendedConnection",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "recommend_connection_type",
]
