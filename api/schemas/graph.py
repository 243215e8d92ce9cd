"""
Pydantic schemas for graph analysis endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GraphMetrics(BaseModel):
    """Summary statistics of the community graph"""

    user_count: int
    connection_count: int
    density: float
    weakly_connected_components: int
    isolated_users: list[str] = Field(default_factory=list)  # users with no inbound or outbound connections
    connection_type_counts: dict[str, int] = Field(default_factory=dict)  # connection type -> count
