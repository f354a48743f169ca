# Entrypoint for running the FastAPI application with uv.

import uvicorn

from surepay_backend.app import create_app
from surepay_backend.server import SurePayServer, configure_logging
from surepay_backend.settings import get_settings


def main() -> None:
    """Start the FastAPI server using uvicorn."""
    settings = get_settings()
    configure_logging(settings)
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )
    SurePayServer(config, settings).run()


if __name__ == "__main__":
    main()
