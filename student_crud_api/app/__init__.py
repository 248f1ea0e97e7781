"""
Application package initializer.

The service is split into small pieces: ``core`` holds configuration,
logging and request dependencies, ``services`` holds the in‑memory
student store, ``schemas`` the request models used for documentation
and ``api/v1/endpoints`` the routers.  ``main`` assembles them.
"""

from .main import app, create_app  # noqa: F401
