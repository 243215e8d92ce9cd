"""Tests for connection recommendations and the connection-type heuristic."""

from __future__ import annotations

import pytest

from circles.errors import UserNotFoundError
from circles.graph import CommunityGraph, recommend_connection_type
from circles.models import Connection, ConnectionType, User


def make_user(username: str, interests: list[str], connection_count: int = 0) -> User:
    connections = [
        Connection(to_username=f"friend{i}", kind=ConnectionType.COLLABORATOR, since="2024")
        for i in range(connection_count)
    ]
    return User(username=username, interests=interests, connections=connections)


class TestRecommendConnectionType:
    """Heuristic scenarios, evaluated in rule order."""

    def test_many_shared_interests_is_project_buddy(self) -> None:
        user = make_user("u", ["a", "b", "c", "d"], connection_count=1)
        other = make_user("c", ["a", "b", "c", "d"], connection_count=10)

        assert recommend_connection_type(user, other) == ConnectionType.PROJECT_BUDDY

    def test_project_buddy_wins_over_follower(self) -> None:
        user = make_user("u", ["a", "b", "c", "d", "e"], connection_count=9)
        other = make_user("c", ["a", "b", "c", "d"], connection_count=0)

        assert recommend_connection_type(user, other) == ConnectionType.PROJECT_BUDDY

    def test_three_shared_is_not_project_buddy(self) -> None:
        user = make_user("u", ["a", "b", "c"], connection_count=2)
        other = make_user("c", ["a", "b", "c"], connection_count=3)

        assert recommend_connection_type(user, other) == ConnectionType.COLLABORATOR

    def test_well_connected_candidate_is_mentor(self) -> None:
        user = make_user("u", ["a"], connection_count=1)
        other = make_user("c", ["a"], connection_count=3)

        assert recommend_connection_type(user, other) == ConnectionType.MENTOR

    def test_well_connected_subject_suggests_follower(self) -> None:
        user = make_user("u", ["a"], connection_count=5)
        other = make_user("c", ["a"], connection_count=1)

        assert recommend_connection_type(user, other) == ConnectionType.FOLLOWER

    def test_similar_connectivity_is_collaborator(self) -> None:
        user = make_user("u", ["a"], connection_count=2)
        other = make_user("c", ["a"], connection_count=3)

        assert recommend_connection_type(user, other) == ConnectionType.COLLABORATOR

    def test_exactly_double_is_not_mentor(self) -> None:
        user = make_user("u", ["a"], connection_count=2)
        other = make_user("c", ["a"], connection_count=4)

        assert recommend_connection_type(user, other) == ConnectionType.COLLABORATOR

    def test_both_unconnected_is_collaborator(self) -> None:
        assert recommend_connection_type(make_user("u", ["a"]), make_user("c", ["a"])) == ConnectionType.COLLABORATOR

    def test_any_connection_beats_none(self) -> None:
        user = make_user("u", ["a"], connection_count=0)
        other = make_user("c", ["a"], connection_count=1)

        assert recommend_connection_type(user, other) == ConnectionType.MENTOR


class TestRecommendConnections:
    """Tests for CommunityGraph.recommend_connections."""

    def test_unknown_user(self, graph: CommunityGraph) -> None:
        with pytest.raises(UserNotFoundError) as exc_info:
            graph.recommend_connections("nobody")

        assert exc_info.value.username == "nobody"

    def test_excludes_self_and_outgoing_connections(self, populated_graph: CommunityGraph) -> None:
        names = {rec.username for rec in populated_graph.recommend_connections("alice")}

        assert "alice" not in names
        assert "bob" not in names  # alice -> bob exists

    def test_inbound_connection_does_not_exclude(self, populated_graph: CommunityGraph) -> None:
        # carol -> alice exists, alice has no edge to carol
        recommendations = populated_graph.recommend_connections("alice")

        assert [rec.username for rec in recommendations] == ["carol"]
        assert sorted(recommendations[0].shared_interests) == ["graphs", "python"]

    def test_no_shared_interests_no_recommendation(self, populated_graph: CommunityGraph) -> None:
        assert populated_graph.recommend_connections("dave") == []

    def test_sorted_by_shared_interest_count(self, graph: CommunityGraph) -> None:
        graph.add_user(User(username="me", interests=["a", "b", "c"]))
        graph.add_user(User(username="one", interests=["a", "z"]))
        graph.add_user(User(username="three", interests=["c", "b", "a"]))
        graph.add_user(User(username="two", interests=["b", "a"]))
        graph.add_user(User(username="none", interests=["z"]))

        recommendations = graph.recommend_connections("me")

        assert [rec.username for rec in recommendations] == ["three", "two", "one"]
        counts = [len(rec.shared_interests) for rec in recommendations]
        assert counts == sorted(counts, reverse=True)

    def test_duplicate_interests_counted_once(self, graph: CommunityGraph) -> None:
        graph.add_user(User(username="me", interests=["a", "a", "b"]))
        graph.add_user(User(username="you", interests=["a", "a", "a"]))

        (rec,) = graph.recommend_connections("me")

        assert rec.shared_interests == ["a"]

    def test_suggested_type_uses_current_connection_counts(self, graph: CommunityGraph) -> None:
        for name in ("u", "c", "x1", "x2", "x3"):
            graph.add_user(User(username=name, interests=["a"] if name in ("u", "c") else []))

        (rec,) = graph.recommend_connections("u")
        assert rec.connection_type == ConnectionType.COLLABORATOR

        graph.connect_users("u", "x1", ConnectionType.FOLLOWER, [], "2024")
        for target in ("x1", "x2", "x3"):
            graph.connect_users("c", target, ConnectionType.FOLLOWER, [], "2024")

        (rec,) = graph.recommend_connections("u")
        assert rec.username == "c"
        assert rec.connection_type == ConnectionType.MENTOR

    def test_project_buddy_regardless_of_counts(self, graph: CommunityGraph) -> None:
        graph.add_user(User(username="u", interests=["a", "b", "c", "d"]))
        graph.add_user(User(username="c", interests=["d", "c", "b", "a"]))
        graph.add_user(User(username="x", interests=[]))
        for _ in range(5):
            graph.connect_users("u", "x", ConnectionType.MENTOR, [], "2024")

        (rec,) = graph.recommend_connections("u")

        assert rec.connection_type == ConnectionType.PROJECT_BUDDY
