"""Student CRUD API client.

This module defines a small client wrapper around the Student CRUD API.
It can parse an ``openapi.json`` document, either from a local file or
downloaded from the server, to discover the paths of the operations
tagged ``students``.  If no document is available the client falls
back to the conventional ``/students`` and ``/students/{id}`` paths.
The client uses the ``requests`` library internally.

The client exposes one method per operation:

* :meth:`list_students` – return all students.
* :meth:`get_student` – fetch a single student by its identifier.
* :meth:`create_student` – store a new student.
* :meth:`update_student` – replace the fields of a student.
* :meth:`delete_student` – remove a student.

Every method returns a tuple ``(result, error)``.  HTTP and transport
failures never raise; they are reported through ``error``, a
dictionary with the keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

_PLACEHOLDER = re.compile(r"\{[^}]+\}")


@dataclass
class ApiEndpoint:
    """Represents a discovered API endpoint.

    Attributes:
        path: The URI template, e.g. ``/students`` or ``/students/{student_id}``.
        method: The HTTP method in upper case (``GET``, ``POST``, etc.).
        operation_id: Optional identifier for the operation.
    """

    path: str
    method: str
    operation_id: Optional[str] = None

    @property
    def has_id(self) -> bool:
        return bool(_PLACEHOLDER.search(self.path))

    def format(self, student_id: Any) -> str:
        """Substitute ``student_id`` for the path placeholder."""
        return _PLACEHOLDER.sub(str(student_id), self.path, count=1)


class StudentAPI:
    """Client for interacting with the Student CRUD API."""

    TAG = "students"

    _DEFAULT_ENDPOINTS: List[Tuple[str, str]] = [
        ("GET", "/students"),
        ("POST", "/students"),
        ("GET", "/students/{id}"),
        ("PUT", "/students/{id}"),
        ("DELETE", "/students/{id}"),
    ]

    def __init__(
        self,
        *,
        base_url: str,
        openapi_path: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            openapi_path: Optional path to an OpenAPI JSON file.  If
                provided and readable, endpoints will be inferred from it.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.spec: Dict[str, Any] = {}
        self.endpoints: List[ApiEndpoint] = []
        if openapi_path and os.path.exists(openapi_path):
            try:
                with open(openapi_path, "r", encoding="utf-8") as f:
                    self.spec = json.load(f)
                self._discover_endpoints()
            except (OSError, ValueError) as e:
                logger.warning(
                    "Failed to load or parse OpenAPI specification %s: %s. Falling back to defaults.",
                    openapi_path,
                    e,
                )
        self._ensure_default_endpoints()

    # ------------------------------------------------------------------
    # OpenAPI discovery
    # ------------------------------------------------------------------
    def fetch_openapi(self, path: str = "/openapi.json") -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Download the OpenAPI document from the server and rediscover endpoints."""
        data, error = self._request("GET", path)
        if error:
            return None, error
        if not isinstance(data, dict):
            return None, {"status_code": None, "message": "OpenAPI document is not a JSON object"}
        self.spec = data
        self.endpoints = []
        self._discover_endpoints()
        self._ensure_default_endpoints()
        return data, None

    def _discover_endpoints(self) -> None:
        """Record operations tagged ``students`` from the loaded document."""
        paths = self.spec.get("paths", {})
        for path, methods in paths.items():
            if not isinstance(methods, dict):
                continue
            for method_lower, op in methods.items():
                if not isinstance(op, dict):
                    continue
                tags = [t.lower() for t in op.get("tags", [])]
                if self.TAG in tags:
                    self.endpoints.append(
                        ApiEndpoint(path=path, method=method_lower.upper(), operation_id=op.get("operationId"))
                    )

    def _ensure_default_endpoints(self) -> None:
        """Fill in conventional paths for operations the document did not describe."""
        for method, path in self._DEFAULT_ENDPOINTS:
            has_id = "{" in path
            if self._pick_endpoint(method, has_id=has_id) is None:
                self.endpoints.append(ApiEndpoint(path=path, method=method))

    def _pick_endpoint(self, method: str, *, has_id: bool) -> Optional[ApiEndpoint]:
        method_upper = method.upper()
        for ep in self.endpoints:
            if ep.method == method_upper and ep.has_id == has_id:
                return ep
        return None

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` for empty responses.  On failure ``data`` is
            ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Student operations
    # ------------------------------------------------------------------
    def list_students(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all students.

        Returns:
            A tuple ``(students, error)``.  ``students`` is empty on failure.
        """
        ep = self._pick_endpoint("GET", has_id=False)
        data, error = self._request(ep.method, ep.path)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_student(self, student_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single student by ID."""
        ep = self._pick_endpoint("GET", has_id=True)
        return self._request(ep.method, ep.format(student_id))

    def create_student(self, fields: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a student from ``fields`` (e.g. ``{"name": "Alice", "age": 20}``)."""
        ep = self._pick_endpoint("POST", has_id=False)
        return self._request(ep.method, ep.path, json_body=fields)

    def update_student(
        self, student_id: Any, fields: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace all fields of a student.  Fields not sent are dropped by the server."""
        ep = self._pick_endpoint("PUT", has_id=True)
        return self._request(ep.method, ep.format(student_id), json_body=fields)

    def delete_student(self, student_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a student.

        Returns:
            A tuple ``(success, error)``.  The server reports success
            whether or not the student existed.
        """
        ep = self._pick_endpoint("DELETE", has_id=True)
        _, error = self._request(ep.method, ep.format(student_id))
        if error:
            return False, error
        return True, None
