"""
Graph components for the community connection service
"""

from .community_graph import CommunityGraph
from .recommendations import rank_recommendations, recommend_connection_type

__all__ = ["CommunityGraph", "rank_recommendations", "recommend_connection_type"]
