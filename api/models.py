"""Pydantic models for API responses."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health endpoint."""
    status: str = "healthy"
    timestamp: datetime
    vip: str = Field(description="Configured virtual IP, empty if detection is disabled")
    detection_enabled: bool
    is_master: bool = Field(description="Current value of the is_master gauge")
