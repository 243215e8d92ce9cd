"""
Interests Router - Endpoint for finding users by a shared interest.
"""

from __future__ import annotations

import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, Path

from circles.graph import CommunityGraph
from circles.models import User

from ..dependencies import get_graph
from ..schemas import ApiResponse

router = APIRouter(prefix="/interests", tags=["interests"])


# Interests are free-form and may contain "/"
@router.get("/{interest:path}/users")
async def find_users_by_interest(
    interest: Annotated[str, Path(description="Interest, matched exactly (case-sensitive)")],
    graph: Annotated[CommunityGraph, Depends(get_graph)],
) -> ApiResponse[list[User]]:
    """List users whose interests include ``interest``. An empty list is not an error."""
    users = await asyncio.to_thread(graph.find_users_by_interest, interest)

    return ApiResponse[list[User]].ok(f"Found {len(users)} users interested in {interest}", users)
