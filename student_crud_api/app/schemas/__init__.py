"""
Pydantic schema definitions for API payloads.

Student records have an open schema.  The models here document the
conventional ``name`` and ``age`` fields for the OpenAPI document but
accept any other field as well, and do not type‑check values.
"""
