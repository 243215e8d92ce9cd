"""
Users Router - Endpoints for user registration, lookup and recommendations.

This router handles:
- Registering a new user profile
- Fetching a user with its outgoing connections
- Recommending new connections from shared interests
"""

from __future__ import annotations

import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, Path

from circles.graph import CommunityGraph
from circles.models import RecommendedConnection, User

from ..dependencies import get_graph
from ..schemas import ApiResponse, NewUser

router = APIRouter(prefix="/users", tags=["users"])

GraphDep = Annotated[CommunityGraph, Depends(get_graph)]


@router.post("")
async def add_user(payload: NewUser, graph: GraphDep) -> ApiResponse[str]:
    """Register a new user. Fails with 409 if the username is taken."""
    user = User(username=payload.username, bio=payload.bio, interests=payload.interests)

    await asyncio.to_thread(graph.add_user, user)

    return ApiResponse[str].ok(f"User {payload.username} added successfully", payload.username)


@router.get("/{username}")
async def get_user(
    username: Annotated[str, Path(description="Username to look up")],
    graph: GraphDep,
) -> ApiResponse[User]:
    """Get a user profile including its outgoing connections."""
    user = await asyncio.to_thread(graph.get_user, username)

    return ApiResponse[User].ok(f"User {username} found", user)


@router.get("/{username}/recommendations")
async def get_recommendations(
    username: Annotated[str, Path(description="Username to recommend connections for")],
    graph: GraphDep,
) -> ApiResponse[list[RecommendedConnection]]:
    """Recommend users sharing interests, most shared interests first.

    Users the subject already connects to are never recommended.
    """
    recommendations = await asyncio.to_thread(graph.recommend_connections, username)

    return ApiResponse[list[RecommendedConnection]].ok(
        f"Found {len(recommendations)} recommendations for {username}", recommendations
    )
