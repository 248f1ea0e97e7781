"""
Student endpoints for API v1.

These routes expose a CRUD API over the in‑memory student store.
Request bodies are JSON objects with any fields; the server assigns
the ``id``.  Lookups by an unknown id answer ``404`` with the plain
text body ``Not Found``.  Deleting is idempotent and always answers
``204``.
"""

from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Body, Depends, Path, status
from fastapi.responses import PlainTextResponse

from student_crud_api.app.core.dependencies import get_student_store
from student_crud_api.app.schemas.student import (
    StudentCreate,
    StudentFields,
    StudentRead,
    StudentUpdate,
)
from student_crud_api.app.services.student_service import StudentNotFoundError, StudentStore

router = APIRouter()

NOT_FOUND_BODY = "Not Found"

_NOT_FOUND_RESPONSE: Dict[Union[int, str], Dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {
        "description": "Student not found",
        "content": {"text/plain": {"example": NOT_FOUND_BODY}},
    }
}


def _not_found() -> PlainTextResponse:
    return PlainTextResponse(NOT_FOUND_BODY, status_code=status.HTTP_404_NOT_FOUND)


def _fields(student_in: Optional[StudentFields]) -> Dict[str, Any]:
    # A request without a body stores a record holding only its id.
    return student_in.as_fields() if student_in is not None else {}


@router.post(
    "/students",
    status_code=status.HTTP_201_CREATED,
    response_model=None,
    summary="Create a new student",
    responses={status.HTTP_201_CREATED: {"model": StudentRead, "description": "Student created successfully"}},
)
async def create_student(
    student_in: Optional[StudentCreate] = Body(None),
    store: StudentStore = Depends(get_student_store),
) -> Dict[str, Any]:
    """Store a new student and return it with its assigned ``id``."""
    return store.create(_fields(student_in))


@router.get(
    "/students",
    response_model=None,
    summary="Get all students",
    responses={status.HTTP_200_OK: {"model": List[StudentRead], "description": "List of students"}},
)
async def list_students(store: StudentStore = Depends(get_student_store)) -> List[Dict[str, Any]]:
    """Return every student in insertion order (an empty list if none)."""
    return store.list_all()


@router.get(
    "/students/{student_id}",
    response_model=None,
    summary="Get a student by ID",
    responses={
        status.HTTP_200_OK: {"model": StudentRead, "description": "Student found"},
        **_NOT_FOUND_RESPONSE,
    },
)
async def get_student(
    student_id: str = Path(..., description="Identifier of the student", json_schema_extra={"type": "integer"}),
    store: StudentStore = Depends(get_student_store),
) -> Union[Dict[str, Any], PlainTextResponse]:
    """Retrieve a single student by ID."""
    try:
        return store.get_by_id(student_id)
    except StudentNotFoundError:
        return _not_found()


@router.put(
    "/students/{student_id}",
    response_model=None,
    summary="Update a student by ID",
    responses={
        status.HTTP_200_OK: {"model": StudentRead, "description": "Student updated successfully"},
        **_NOT_FOUND_RESPONSE,
    },
)
async def update_student(
    student_in: Optional[StudentUpdate] = Body(None),
    student_id: str = Path(..., description="Identifier of the student", json_schema_extra={"type": "integer"}),
    store: StudentStore = Depends(get_student_store),
) -> Union[Dict[str, Any], PlainTextResponse]:
    """Replace a student's fields.

    Fields missing from the body are removed from the record; the id
    never changes.
    """
    try:
        return store.update_by_id(student_id, _fields(student_in))
    except StudentNotFoundError:
        return _not_found()


@router.delete(
    "/students/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    summary="Delete a student by ID",
    responses={status.HTTP_204_NO_CONTENT: {"description": "Student deleted successfully"}},
)
async def delete_student(
    student_id: str = Path(..., description="Identifier of the student", json_schema_extra={"type": "integer"}),
    store: StudentStore = Depends(get_student_store),
) -> None:
    """Delete a student.  Succeeds whether or not the student existed."""
    store.delete_by_id(student_id)
    return None
