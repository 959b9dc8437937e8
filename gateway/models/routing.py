"""
Routing data models and schemas
"""

from pydantic import BaseModel, Field


class HostRoute(BaseModel):
    """A host that resolved to a configured route"""
    host: str = Field(..., description="Canonical host key")
    route: str = Field(..., description="Route identifier the host maps to")

    class Config:
        """Pydantic configuration"""
        frozen = True


class HealthResponse(BaseModel):
    """Schema for health check responses"""
    status: str = Field(default="ok", description="Liveness status")
    time: str = Field(..., description="RFC 3339 timestamp with nanoseconds")
