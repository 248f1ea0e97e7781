"""
In‑memory store for student records.

Records are plain dictionaries: an integer ``id`` assigned by the store
plus whatever fields the caller supplied (by convention ``name`` and
``age``).  No schema is enforced.  Records keep their insertion order;
updates replace a record in place and deletes remove it without
renumbering the others.

Identifiers come from a counter that starts at 1 and only ever grows,
so an id is never handed out twice, even after the record holding it
has been deleted.  Nothing is persisted: all data is lost when the
process exits.

All public methods take a single lock.  FastAPI may call handlers from
a thread pool, and the scan‑then‑mutate sequences in update and delete
must not interleave.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Any, Dict, List, Mapping, Optional, Union

logger = logging.getLogger(__name__)

StudentId = Union[int, str]

_INTEGER_ID = re.compile(r"[+-]?[0-9]+")


class StudentNotFoundError(LookupError):
    """Raised when no student matches the requested identifier."""

    def __init__(self, student_id: StudentId) -> None:
        super().__init__(f"Student {student_id!r} not found")
        self.student_id = student_id


def parse_student_id(value: StudentId) -> Optional[int]:
    """Convert a path value to an integer id.

    Returns ``None`` for anything that is not an integer, including
    booleans and strings such as ``"abc"``, ``"1.5"``, ``"1_0"`` or
    non‑ASCII digits.  Callers treat ``None`` as "matches no record".
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not _INTEGER_ID.fullmatch(text):
        return None
    return int(text)


def _build_record(student_id: int, fields: Mapping[str, Any]) -> Dict[str, Any]:
    # ``id`` always comes first and always wins over a caller-supplied one.
    record: Dict[str, Any] = {"id": student_id}
    record.update((key, value) for key, value in fields.items() if key != "id")
    return record


class StudentStore:
    """Ordered in‑memory collection of student records."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._students: List[Dict[str, Any]] = []
        self._next_id = 1

    @property
    def next_id(self) -> int:
        """Identifier that the next ``create`` call will assign."""
        with self._lock:
            return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._students)

    def create(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Store a new record built from ``fields`` and return it.

        An ``id`` key in ``fields`` is ignored; the store assigns the
        identifier.
        """
        with self._lock:
            student_id = self._next_id
            self._next_id += 1
            student = _build_record(student_id, fields)
            self._students.append(student)
        logger.debug("Created student %s", student_id)
        return dict(student)

    def list_all(self) -> List[Dict[str, Any]]:
        """Return all records in store order."""
        with self._lock:
            return [dict(student) for student in self._students]

    def get_by_id(self, student_id: StudentId) -> Dict[str, Any]:
        """Return the record with ``student_id``.

        Raises ``StudentNotFoundError`` if there is none.
        """
        wanted = parse_student_id(student_id)
        with self._lock:
            index = self._find_index(wanted)
            if index is None:
                raise StudentNotFoundError(student_id)
            return dict(self._students[index])

    def update_by_id(self, student_id: StudentId, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Replace the record with ``student_id`` by ``fields``.

        This is a whole‑record replacement: fields missing from
        ``fields`` are dropped.  The record keeps its id and its position;
        any ``id`` in ``fields`` is discarded.  Raises
        ``StudentNotFoundError`` and leaves the store untouched when no
        record matches.
        """
        wanted = parse_student_id(student_id)
        with self._lock:
            index = self._find_index(wanted)
            if index is None:
                raise StudentNotFoundError(student_id)
            student = _build_record(wanted, fields)
            self._students[index] = student
        logger.debug("Updated student %s", wanted)
        return dict(student)

    def delete_by_id(self, student_id: StudentId) -> None:
        """Remove every record with ``student_id``.

        Deleting an id that does not exist is not an error.
        """
        wanted = parse_student_id(student_id)
        if wanted is None:
            return
        with self._lock:
            before = len(self._students)
            self._students = [s for s in self._students if s["id"] != wanted]
            removed = before - len(self._students)
        logger.debug("Deleted %d record(s) for student %s", removed, wanted)

    def _find_index(self, student_id: Optional[int]) -> Optional[int]:
        if student_id is None:
            return None
        for index, student in enumerate(self._students):
            if student["id"] == student_id:
                return index
        return None
