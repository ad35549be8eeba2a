"""Uniform error payload returned by every failing request."""

from datetime import datetime

from pydantic import BaseModel, field_serializer


class ErrorResponse(BaseModel):
    timestamp: datetime
    status: int
    error: str
    path: str

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        """Convert datetime to ISO format string."""
        return value.isoformat()
