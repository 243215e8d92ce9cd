from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ConnectionType(Enum):
    MENTOR = "Mentor"
    COLLABORATOR = "Collaborator"
    FOLLOWER = "Follower"
    PROJECT_BUDDY = "ProjectBuddy"


class Connection(BaseModel):
    """Directed edge from the owning user to ``to_username``.

    ``to_username`` is a lookup key into the store, never an object link.
    """

    to_username: str
    kind: ConnectionType
    since: str  # free-form, not date-validated
    tags: list[str] = Field(default_factory=list)


class User(BaseModel):
    username: str
    bio: str | None = None
    interests: list[str] = Field(default_factory=list)  # order preserved, duplicates allowed
    connections: list[Connection] = Field(default_factory=list)  # append-only, creation order

    def add_connection(self, connection: Connection) -> None:
        self.connections.append(connection)

    def shared_interests(self, other: User) -> list[str]:
        """Interests present in both users, each listed once.

        Order follows this user's interest list.
        """
        theirs = set(other.interests)
        return list(dict.fromkeys(i for i in self.interests if i in theirs))

    def connected_usernames(self) -> set[str]:
        """Usernames this user has an outgoing connection to."""
        return {conn.to_username for conn in self.connections}


class RecommendedConnection(BaseModel):
    """Suggested connection computed at query time (never stored)"""

    username: str
    shared_interests: list[str]
    connection_type: ConnectionType
