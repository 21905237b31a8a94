"""Entry point for the Job Board API.

Serves ``jobboard_api.app.main:app`` with uvicorn.  Host and port are
read from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``8000``); see ``jobboard_api/app/core/config.py`` for
the other supported variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from jobboard_api.app.core.config import settings
from jobboard_api.app.main import app


async def main() -> None:
    """Start the API server and run until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
