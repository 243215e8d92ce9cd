"""
Pydantic schemas for user endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class NewUser(BaseModel):
    """Body of POST /users"""

    # Usernames appear as a single path segment in /users/{username}
    username: str = Field(min_length=1, pattern=r"^[^/]+$")
    bio: str | None = None
    interests: list[str] = Field(default_factory=list)
