"""
Pydantic schemas for student payloads.

A student is an ``id`` assigned by the server plus arbitrary
client‑supplied fields.  ``name`` and ``age`` are declared so that they
show up with their conventional types in the generated documentation,
but they are typed as ``Any``: whatever the client sends is stored as
is.  Extra fields are kept, in the order the client sent them.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator


class StudentFields(BaseModel):
    """Client‑supplied student fields."""

    model_config = ConfigDict(extra="allow")

    name: Any = Field(None, json_schema_extra={"type": "string", "example": "Alice"})
    age: Any = Field(None, json_schema_extra={"type": "integer", "example": 20})

    _key_order: List[str] = PrivateAttr(default_factory=list)

    @model_validator(mode="wrap")
    @classmethod
    def _remember_key_order(cls, data: Any, handler):
        model = handler(data)
        if isinstance(data, dict):
            model._key_order = list(data)
        return model

    def as_fields(self) -> Dict[str, Any]:
        """Return only the fields present in the request body, in body order.

        Declared fields that the client left out are not reported, so an
        update with ``{"name": "Bobby"}`` does not invent ``"age": null``.
        """
        sent = set(self.model_fields_set) | set(self.model_extra or {})
        dumped = self.model_dump()
        order = [key for key in self._key_order if key in sent]
        order += [key for key in dumped if key in sent and key not in order]
        return {key: dumped[key] for key in order}


class StudentCreate(StudentFields):
    """Schema for creating a student."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"required": ["name", "age"]},
    )


class StudentUpdate(StudentFields):
    """Schema for replacing a student.

    The whole record is replaced; fields not sent are dropped.  An ``id``
    in the body is ignored.
    """


class StudentRead(StudentFields):
    """Schema for a stored student."""

    id: int = Field(..., json_schema_extra={"example": 1})
