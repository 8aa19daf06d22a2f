"""Prometheus HTTP API response envelope.

Every ``/api/v1`` response is wrapped as ``{"status": "success", "data": ...}``
or ``{"status": "error", "errorType": ..., "error": ...}``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ErrorType(StrEnum):
    BAD_DATA = "bad_data"
    INTERNAL = "internal"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    CANCELED = "canceled"
    EXECUTION = "execution"
    UNAVAILABLE = "unavailable"


class SuccessResponse(BaseModel, Generic[T]):
    status: Literal["success"] = "success"
    data: T


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Literal["error"] = "error"
    error_type: ErrorType = Field(alias="errorType")
    error: str
