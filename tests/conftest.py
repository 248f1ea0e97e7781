"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

pytest.importorskip("httpx")  # FastAPI TestClient requires httpx

from fastapi.testclient import TestClient  # noqa: E402

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from student_crud_api.app.main import create_app  # noqa: E402
from student_crud_api.app.services.student_service import StudentStore  # noqa: E402


@pytest.fixture()
def store():
    """A fresh, empty student store."""
    return StudentStore()


@pytest.fixture()
def client(store):
    """TestClient for an application backed by ``store``."""
    with TestClient(create_app(store)) as test_client:
        yield test_client
