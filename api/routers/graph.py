"""
Graph Router - Whole-graph statistics computed with NetworkX.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from circles.graph import CommunityGraph

from ..dependencies import get_graph
from ..schemas import ApiResponse, GraphMetrics

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/graph", tags=["graph"])


@router.get("/metrics")
async def get_graph_metrics(
    graph: Annotated[CommunityGraph, Depends(get_graph)],
) -> ApiResponse[GraphMetrics]:
    """Get user/connection counts, density, components and isolated users."""
    metrics = GraphMetrics(**await asyncio.to_thread(graph.graph_metrics))
    logger.debug(f"Graph metrics: {metrics.user_count} users, {metrics.connection_count} connections")

    return ApiResponse[GraphMetrics].ok(
        f"Graph has {metrics.user_count} users and {metrics.connection_count} connections", metrics
    )
