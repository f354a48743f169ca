# Health-check endpoints.

from fastapi import APIRouter, Depends, status

from ..clock import Clock
from ..dependencies import get_app_settings, get_clock
from ..payloads import HealthResponse, build_health
from ..settings import Settings

router = APIRouter(prefix="/health", tags=["health"])

READ_METHODS = ["GET", "HEAD"]


@router.api_route(
    "",
    methods=READ_METHODS,
    status_code=status.HTTP_200_OK,
    response_model=HealthResponse,
)
@router.api_route(
    "/",
    methods=READ_METHODS,
    status_code=status.HTTP_200_OK,
    response_model=HealthResponse,
    include_in_schema=False,
)
async def read_health(
    settings: Settings = Depends(get_app_settings),
    clock: Clock = Depends(get_clock),
) -> HealthResponse:
    """Simple health-check endpoint used for readiness probes."""
    return build_health(settings, clock)
