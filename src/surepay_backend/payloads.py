# Response models and the pure builders behind each endpoint.

from __future__ import annotations

from pydantic import BaseModel, Field

from .clock import Clock, format_timestamp
from .settings import Settings

SERVICE_NAME = "SurePay"
WELCOME_MESSAGE = "Welcome to SurePay API"


class HealthResponse(BaseModel):
    """Response model for health probes."""

    status: str = Field("healthy", description="Liveness indicator.")
    timestamp: str = Field(..., description="ISO-8601 time of the response.")
    version: str = Field(..., description="Configured application version.")


class RootResponse(BaseModel):
    """Welcome banner served at the site root."""

    message: str = Field(WELCOME_MESSAGE, description="Welcome banner.")
    version: str = Field(..., description="Configured application version.")
    environment: str = Field(..., description="Deployment environment name.")
    timestamp: str = Field(..., description="ISO-8601 time of the response.")


class StatusResponse(BaseModel):
    """Service status report for dashboards."""

    service: str = Field(SERVICE_NAME, description="Service name.")
    version: str = Field(..., description="Configured application version.")
    status: str = Field("operational", description="Operational state.")
    uptime: float = Field(
        ..., ge=0.0, description="Seconds elapsed since the service started."
    )
    timestamp: str = Field(..., description="ISO-8601 time of the response.")


def build_health(settings: Settings, clock: Clock) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=format_timestamp(clock.now()),
        version=settings.version,
    )


def build_root(settings: Settings, clock: Clock) -> RootResponse:
    return RootResponse(
        message=WELCOME_MESSAGE,
        version=settings.version,
        environment=settings.environment,
        timestamp=format_timestamp(clock.now()),
    )


def build_status(settings: Settings, clock: Clock) -> StatusResponse:
    """Assemble the status report; uptime is sampled before the timestamp."""
    uptime = clock.uptime()
    return StatusResponse(
        service=SERVICE_NAME,
        version=settings.version,
        status="operational",
        uptime=uptime,
        timestamp=format_timestamp(clock.now()),
    )


__all__ = [
    "HealthResponse",
    "RootResponse",
    "SERVICE_NAME",
    "StatusResponse",
    "WELCOME_MESSAGE",
    "build_health",
    "build_root",
    "build_status",
]
