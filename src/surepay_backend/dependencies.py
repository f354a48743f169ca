# FastAPI dependencies exposing the state captured by ``create_app``.

from __future__ import annotations

from fastapi import Request

from .clock import Clock
from .settings import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


__all__ = ["get_app_settings", "get_clock"]
