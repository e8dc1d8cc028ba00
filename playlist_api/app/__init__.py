"""
Application package initializer.

The service is split into the same layers as a larger API would use:
configuration and logging live in ``core``, request/response models in
``schemas``, the in‑memory song store in ``services`` and the HTTP
routes in ``api``.
"""

from .main import app  # noqa: F401
