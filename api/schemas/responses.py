"""
Response envelope shared by every endpoint.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Standard response body: success flag, human-readable message, optional payload"""

    success: bool
    message: str
    data: DataT | None = None

    @classmethod
    def ok(cls, message: str, data: DataT) -> ApiResponse[DataT]:
        return cls(success=True, message=message, data=data)

    @classmethod
    def error(cls, message: str) -> ApiResponse[None]:
        return ApiResponse[None](success=False, message=message, data=None)
