"""
Top‑level router for version 1 of the API.

Aggregates the student CRUD routes and the welcome route.  Both
routers define their full paths internally, so no prefix is given here.
"""

from fastapi import APIRouter

from .endpoints import info, students

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(students.router, tags=["students"])
