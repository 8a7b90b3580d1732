"""Response envelopes shared across modules."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Success envelope carrying only a human-readable message."""

    success: bool = True
    message: str


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    timestamp: str
