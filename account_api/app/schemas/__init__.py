"""
Pydantic schema definitions for API payloads.

Schemas are separated from the stored document format to decouple the
API representation (which never exposes password hashes) from
persistence.
"""
