"""
Service layer abstraction.

Each service encapsulates the business logic for one resource.  The
services work on the in‑memory store from ``core.store``; swapping it
for a database would not require changes to the API handlers.
"""
