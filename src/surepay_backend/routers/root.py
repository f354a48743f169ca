# Welcome endpoint served at the site root.

from fastapi import APIRouter, Depends, status

from ..clock import Clock
from ..dependencies import get_app_settings, get_clock
from ..payloads import RootResponse, build_root
from ..settings import Settings
from .health import READ_METHODS

router = APIRouter(tags=["root"])


@router.api_route(
    "/",
    methods=READ_METHODS,
    status_code=status.HTTP_200_OK,
    response_model=RootResponse,
)
async def read_root(
    settings: Settings = Depends(get_app_settings),
    clock: Clock = Depends(get_clock),
) -> RootResponse:
    return build_root(settings, clock)
