"""
Service layer abstraction.

The song store encapsulates all state and business logic.  By
isolating it here the in‑memory list could be swapped for a database
without changing the API handlers.
"""
