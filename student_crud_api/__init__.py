"""
Top‑level package for the Student CRUD API.

This file makes ``student_crud_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``student_crud_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
