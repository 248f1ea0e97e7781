"""
Service layer abstraction.

The student store encapsulates the record list and the identifier
policy.  Handlers only talk to it through its public methods, so the
in‑memory list could be swapped for a database without touching the
API layer.
"""
