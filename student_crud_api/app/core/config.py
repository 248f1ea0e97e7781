"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
reproduce the historical behaviour of the service: it listens on port
3000, serves the interactive documentation under ``/api-docs`` and
exposes the student routes at the root of the URL space.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Student CRUD API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the
    # console.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Location of the Swagger UI.  The OpenAPI document itself is always
    # served from ``/openapi.json``.
    docs_url: str = os.getenv("DOCS_URL", "/api-docs")

    # Prefix under which the student routes are mounted.  Clients of the
    # service expect ``/students`` at the root, so this is empty unless
    # the service sits behind a path-based proxy.
    api_prefix: str = os.getenv("API_PREFIX", "")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must therefore be set before importing this module.
settings = Settings()
