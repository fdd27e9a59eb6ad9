"""
Pydantic schema definitions for API payloads.

Each resource (users, bank) defines its own Pydantic models for
request and response bodies.  Schemas are separated from the
in‑memory records to decouple API representation from storage.
"""
