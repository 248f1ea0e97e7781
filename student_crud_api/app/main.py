"""
Main entrypoint for the Student CRUD API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn student_crud_api.app.main:app --port 3000

Swagger UI is served from ``settings.docs_url`` (``/api-docs`` by
default) and is generated from the route declarations.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .services.student_service import StudentStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[StudentStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[StudentStore]
        Store backing the student routes.  A new, empty store is created
        when omitted, so every application starts with no students.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the routers can
    # log while being set up.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=settings.docs_url,
    )
    app.state.student_store = store if store is not None else StudentStore()

    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.debug("Application %s %s configured", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
