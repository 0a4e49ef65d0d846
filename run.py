"""Entry point for the Portfolio API.

Serves the FastAPI application with uvicorn.  Host and port come from
``SERVER_HOST`` and ``SERVER_PORT`` (defaults ``0.0.0.0`` and
``2022``); see ``portfolio_api/app/core/config.py`` for the other
supported environment variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from portfolio_api.app.core.config import settings
from portfolio_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.server_host,
        port=settings.server_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Portfolio API listening on %s:%s", settings.server_host, settings.server_port
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
