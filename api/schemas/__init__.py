"""
Pydantic schemas for the Circles API.

Re-exports all schemas for convenient importing.
"""

from __future__ import annotations

from .connections import ConnectPayload
from .graph import GraphMetrics
from .responses import ApiResponse
from .users import NewUser

__all__ = [
    # Envelope
    "ApiResponse",
    # Users
    "NewUser",
    # Connections
    "ConnectPayload",
    # Graph
    "GraphMetrics",
]
