"""
In-memory community graph.

Owns every user record and their outgoing connections. A single lock
guards the whole store: every operation, read or write, holds it for its
full duration. Records leave the store only as deep copies.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import networkx as nx

from circles.errors import ConnectionFailedError, InternalGraphError, UserAlreadyExistsError, UserNotFoundError
from circles.logging_config import get_logger
from circles.models import Connection, ConnectionType, RecommendedConnection, User

from .recommendations import rank_recommendations

logger = get_logger(__name__)

DEFAULT_LOCK_TIMEOUT = 30.0


class CommunityGraph:
    """Thread-safe store of users and their typed connections."""

    def __init__(self, lock_timeout: float = DEFAULT_LOCK_TIMEOUT):
        """Initialize an empty graph.

        Args:
            lock_timeout: Seconds to wait for the store lock before failing
                with ``InternalGraphError``
        """
        self._members: dict[str, User] = {}
        self._lock = threading.Lock()
        self._lock_timeout = lock_timeout

    @contextmanager
    def _locked(self, operation: str) -> Iterator[dict[str, User]]:
        """Hold the store lock for one operation.

        Operations never block while holding the lock, so the timeout only
        fires when the store is wedged or under extreme contention. In that
        case the caller gets an ``InternalGraphError`` rather than waiting
        indefinitely.
        """
        if not self._lock.acquire(timeout=self._lock_timeout):
            logger.error(f"Timed out after {self._lock_timeout}s waiting for graph lock ({operation})")
            raise InternalGraphError(f"graph store unavailable during {operation}")
        try:
            logger.trace(f"Graph lock acquired for {operation}")  # type: ignore[attr-defined]
            yield self._members
        finally:
            self._lock.release()

    def __len__(self) -> int:
        with self._locked("len") as members:
            return len(members)

    def __contains__(self, username: object) -> bool:
        with self._locked("contains") as members:
            return username in members

    # ========================================
    # Mutations
    # ========================================

    def add_user(self, user: User) -> None:
        """Insert a new user.

        Raises:
            UserAlreadyExistsError: If the username is taken
            ConnectionFailedError: If the user arrives with connections already attached
        """
        if user.connections:
            raise ConnectionFailedError(
                f"new user {user.username} must not carry connections; use connect_users instead"
            )

        with self._locked("add_user") as members:
            if user.username in members:
                logger.warning(f"Rejected duplicate user {user.username}")
                raise UserAlreadyExistsError(user.username)
            members[user.username] = user.model_copy(deep=True)

        logger.info(f"Added user {user.username} with {len(user.interests)} interests")

    def connect_users(
        self,
        from_username: str,
        to_username: str,
        kind: ConnectionType,
        tags: list[str],
        since: str,
    ) -> Connection:
        """Append a connection from ``from_username`` to ``to_username``.

        Only the source user is modified; no reverse edge is created.

        Returns:
            A copy of the connection that was stored

        Raises:
            UserNotFoundError: Naming ``from_username`` if it is missing, otherwise
                ``to_username`` if that is missing
            ConnectionFailedError: If ``kind`` is not a known connection type
        """
        try:
            kind = ConnectionType(kind)
        except ValueError:
            raise ConnectionFailedError(f"unknown connection kind {kind!r}") from None

        with self._locked("connect_users") as members:
            if from_username not in members:
                raise UserNotFoundError(from_username)
            if to_username not in members:
                raise UserNotFoundError(to_username)

            connection = Connection(to_username=to_username, kind=kind, since=since, tags=list(tags))

            source = members.get(from_username)
            if source is None:
                raise ConnectionFailedError(f"Failed to connect {from_username} to {to_username}")
            source.add_connection(connection)

        logger.info(f"Connected {from_username} -> {to_username} as {connection.kind.value}")
        return connection.model_copy(deep=True)

    # ========================================
    # Queries
    # ========================================

    def get_user(self, username: str) -> User:
        """Return a copy of the user, connections included."""
        with self._locked("get_user") as members:
            user = members.get(username)
            if user is None:
                raise UserNotFoundError(username)
            return user.model_copy(deep=True)

    def find_users_by_interest(self, interest: str) -> list[User]:
        """Users listing ``interest`` exactly (case-sensitive). Empty list when none match."""
        with self._locked("find_users_by_interest") as members:
            return [user.model_copy(deep=True) for user in members.values() if interest in user.interests]

    def recommend_connections(self, username: str) -> list[RecommendedConnection]:
        """Rank users sharing interests with ``username`` that it is not yet connected to."""
        with self._locked("recommend_connections") as members:
            subject = members.get(username)
            if subject is None:
                raise UserNotFoundError(username)
            recommendations = rank_recommendations(subject, members.values())

        logger.debug(f"Computed {len(recommendations)} recommendations for {username}")
        return recommendations

    # ========================================
    # Analysis
    # ========================================

    def to_networkx(self) -> nx.DiGraph:
        """Snapshot of the store as a directed graph.

        Repeated connections between the same pair collapse to the most
        recent one.
        """
        with self._locked("to_networkx") as members:
            return self._build_digraph(members)

    def graph_metrics(self) -> dict[str, Any]:
        """Summary statistics of the current graph."""
        with self._locked("graph_metrics") as members:
            graph = self._build_digraph(members)
            type_counts = {kind.value: 0 for kind in ConnectionType}
            connection_count = 0
            for user in members.values():
                for conn in user.connections:
                    type_counts[conn.kind.value] += 1
                    connection_count += 1

        return {
            "user_count": graph.number_of_nodes(),
            "connection_count": connection_count,
            "density": nx.density(graph) if graph.number_of_nodes() > 1 else 0.0,
            "weakly_connected_components": nx.number_weakly_connected_components(graph)
            if graph.number_of_nodes()
            else 0,
            "isolated_users": sorted(nx.isolates(graph)),
            "connection_type_counts": type_counts,
        }

    @staticmethod
    def _build_digraph(members: dict[str, User]) -> nx.DiGraph:
        graph = nx.DiGraph()
        for name, user in members.items():
            graph.add_node(name, bio=user.bio, interests=list(user.interests))
        for name, user in members.items():
            for conn in user.connections:
                graph.add_edge(name, conn.to_username, kind=conn.kind.value, since=conn.since, tags=list(conn.tags))
        return graph
