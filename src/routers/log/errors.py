# ── src/routers/log/errors.py ─────────────────────────────────────────
"""
Error taxonomy for the log store.

Every error carries the HTTP status the routers translate it to, so the
store / service layer never imports FastAPI.
"""


class LogStoreError(Exception):
    status_code = 500


class ValidationError(LogStoreError):
    """A required field (project / subject) is missing or empty."""
    status_code = 400


class NotFoundError(LogStoreError):
    status_code = 404


class InvalidIdError(LogStoreError):
    """The identifier is not a well-formed entry id."""
    status_code = 400


class StorageError(LogStoreError):
    """Cosmos was unreachable or rejected the operation."""
    status_code = 500
