"""Entry point for the Student CRUD API.

Starts the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``3000``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from student_crud_api.app.core.config import settings
from student_crud_api.app.main import app

logger = logging.getLogger(__name__)


async def run_api() -> None:
    """Serve the API until the process is interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    display_host = "localhost" if settings.host in {"0.0.0.0", ""} else settings.host
    logger.info("API running on http://%s:%s", display_host, settings.port)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
