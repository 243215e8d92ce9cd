"""
Connection recommendations based on shared interests.

A candidate is any user other than the subject that the subject has no
outgoing connection to. Inbound connections do not exclude a candidate.
"""

from __future__ import annotations

from collections.abc import Iterable

from circles.models import ConnectionType, RecommendedConnection, User

# More shared interests than this always suggests a project buddy
PROJECT_BUDDY_THRESHOLD = 3

# A user with more than this multiple of another's connections is "more connected"
CONNECTIVITY_RATIO = 2


def recommend_connection_type(user: User, other: User, shared_count: int | None = None) -> ConnectionType:
    """Suggest how ``user`` might relate to ``other``.

    Rules, first match wins:
    1. more than 3 shared interests -> ProjectBuddy
    2. other has more than twice user's connections -> Mentor
    3. user has more than twice other's connections -> Follower
    4. otherwise -> Collaborator

    Connection counts are read at call time.
    """
    if shared_count is None:
        shared_count = len(user.shared_interests(other))

    user_degree = len(user.connections)
    other_degree = len(other.connections)

    if shared_count > PROJECT_BUDDY_THRESHOLD:
        return ConnectionType.PROJECT_BUDDY
    if other_degree > user_degree * CONNECTIVITY_RATIO:
        return ConnectionType.MENTOR
    if user_degree > other_degree * CONNECTIVITY_RATIO:
        return ConnectionType.FOLLOWER
    return ConnectionType.COLLABORATOR


def rank_recommendations(subject: User, members: Iterable[User]) -> list[RecommendedConnection]:
    """Recommendations for ``subject`` sorted by shared-interest count, highest first.

    Order among equal counts is not significant.
    """
    connected = subject.connected_usernames()
    recommendations: list[RecommendedConnection] = []

    for candidate in members:
        if candidate.username == subject.username or candidate.username in connected:
            continue

        shared = subject.shared_interests(candidate)
        if not shared:
            continue

        recommendations.append(
            RecommendedConnection(
                username=candidate.username,
                shared_interests=shared,
                connection_type=recommend_connection_type(subject, candidate, len(shared)),
            )
        )

    recommendations.sort(key=lambda rec: len(rec.shared_interests), reverse=True)
    return recommendations
