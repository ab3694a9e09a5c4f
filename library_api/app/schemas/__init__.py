"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the domain records in ``models`` so the
HTTP representation can differ from what is persisted.
"""
