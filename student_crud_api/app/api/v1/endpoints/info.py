"""
Welcome endpoint for API v1.

``GET /`` returns a short plain‑text greeting that points to the
interactive documentation.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from student_crud_api.app.core.config import settings

router = APIRouter()


@router.get("/", response_class=PlainTextResponse, summary="Welcome message")
async def welcome() -> str:
    """Return the welcome text with the location of the documentation."""
    return f"Welcome to the {settings.project_name}! Visit {settings.docs_url} for Swagger documentation."
