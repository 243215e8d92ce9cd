"""
Pydantic schemas for connection endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from circles.models import ConnectionType


class ConnectPayload(BaseModel):
    """Body of POST /connections"""

    model_config = ConfigDict(populate_by_name=True)

    from_username: str = Field(alias="from")
    to_username: str = Field(alias="to")
    kind: ConnectionType
    tags: list[str] = Field(default_factory=list)
    since: str
