"""Graph store error classes.

Every failure of a store operation is raised as a ``GraphError`` tagged
with one of four kinds. The transport layer decides how each kind is
presented; nothing here knows about HTTP.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_REQUEST = "invalid_request"
    INTERNAL = "internal"


class GraphError(Exception):
    """Base exception for graph store errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UserNotFoundError(GraphError):
    """Raised when a referenced username is not in the store."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User not found: {username}")


class UserAlreadyExistsError(GraphError):
    """Raised when adding a user whose username is already taken."""

    kind = ErrorKind.CONFLICT

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User already exists: {username}")


class ConnectionFailedError(GraphError):
    """Raised when a connection could not be formed."""

    kind = ErrorKind.INVALID_REQUEST

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Connection failed: {detail}")


class InternalGraphError(GraphError):
    """Raised when the store lock cannot be acquired or an invariant breaks."""

    kind = ErrorKind.INTERNAL

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Internal error: {detail}")
