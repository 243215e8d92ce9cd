"""
Connections Router - Endpoint for creating typed, directed connections.
"""

from __future__ import annotations

import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends

from circles.graph import CommunityGraph

from ..dependencies import get_graph
from ..schemas import ApiResponse, ConnectPayload

router = APIRouter(prefix="/connections", tags=["connections"])


@router.post("")
async def connect_users(
    payload: ConnectPayload,
    graph: Annotated[CommunityGraph, Depends(get_graph)],
) -> ApiResponse[str]:
    """Connect ``from`` to ``to``. Only ``from`` gains a connection."""
    await asyncio.to_thread(
        graph.connect_users,
        payload.from_username,
        payload.to_username,
        payload.kind,
        payload.tags,
        payload.since,
    )

    return ApiResponse[str].ok(
        f"Connected {payload.from_username} to {payload.to_username}",
        f"{payload.from_username}:{payload.to_username}",
    )
