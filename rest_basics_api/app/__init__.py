"""
Application package initializer.

The project is split into small pieces even though it only serves two
toy resources: configuration and logging live in ``core``, request
and response models in ``schemas``, the in‑memory business logic in
``services`` and the HTTP routes in ``api/v1/endpoints``.  Each
resource (users, bank) exposes its own router.
"""

from .main import app  # noqa: F401
