# Service status report.

from fastapi import APIRouter, Depends
from fastapi import status as http_status

from ..clock import Clock
from ..dependencies import get_app_settings, get_clock
from ..payloads import StatusResponse, build_status
from ..settings import Settings
from .health import READ_METHODS

router = APIRouter(prefix="/api/status", tags=["status"])


@router.api_route(
    "",
    methods=READ_METHODS,
    status_code=http_status.HTTP_200_OK,
    response_model=StatusResponse,
)
@router.api_route(
    "/",
    methods=READ_METHODS,
    status_code=http_status.HTTP_200_OK,
    response_model=StatusResponse,
    include_in_schema=False,
)
async def read_status(
    settings: Settings = Depends(get_app_settings),
    clock: Clock = Depends(get_clock),
) -> StatusResponse:
    """Report version, operational state and uptime."""
    return build_status(settings, clock)
