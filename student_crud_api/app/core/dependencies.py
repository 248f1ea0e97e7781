"""
FastAPI dependencies shared by the routers.

The student store is created once per application by ``create_app``
and attached to ``app.state``.  Handlers receive it through
``Depends(get_student_store)`` instead of importing a global.
"""

from fastapi import Request

from student_crud_api.app.services.student_service import StudentStore


def get_student_store(request: Request) -> StudentStore:
    """Return the store attached to the application serving ``request``."""
    return request.app.state.student_store
