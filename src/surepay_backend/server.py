# uvicorn server wrapper that announces itself once the socket is bound.

from __future__ import annotations

import logging
import sys
from typing import Any

import uvicorn

from .settings import Settings

STARTUP_LOGGER_NAME = "surepay_backend.startup"

startup_logger = logging.getLogger(STARTUP_LOGGER_NAME)


def configure_logging(settings: Settings) -> None:
    """Route application logs to stdout at the configured level.

    The startup banner has its own stdout handler pinned to INFO so that it
    is printed whatever ``LOG_LEVEL`` says.
    """
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    startup_logger.handlers = [handler]
    startup_logger.setLevel(logging.INFO)
    startup_logger.propagate = False


def log_startup(settings: Settings) -> None:
    startup_logger.info("Server running on port %s", settings.port)
    startup_logger.info("Version: %s", settings.version)
    startup_logger.info("Environment: %s", settings.environment)


class SurePayServer(uvicorn.Server):
    """uvicorn server that logs the startup banner after a successful bind."""

    def __init__(self, config: uvicorn.Config, settings: Settings) -> None:
        super().__init__(config)
        self.settings = settings

    async def startup(self, sockets: Any = None) -> None:
        # A failed bind exits inside super().startup(); a failed lifespan
        # startup sets should_exit.
        await super().startup(sockets=sockets)
        if not self.should_exit:
            log_startup(self.settings)


__all__ = ["SurePayServer", "configure_logging", "log_startup"]
