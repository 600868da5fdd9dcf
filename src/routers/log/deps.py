# ── src/routers/log/deps.py ───────────────────────────────────────────
import threading
from typing import Optional, Union

from fastapi import HTTPException

from .errors import StorageError
from .store import EntryStore

_store: Optional[EntryStore] = None
_store_lock = threading.Lock()


def build_store() -> EntryStore:
    """Return the process-wide store, building it once from the environment."""
    global _store
    if _store is not None:
        return _store
    with _store_lock:
        if _store is None:
            _store = EntryStore.from_env()
    return _store


def get_store() -> EntryStore:
    """FastAPI dependency: the shared store, HTTP error when it cannot be built."""
    try:
        return build_store()
    except StorageError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


def try_get_store() -> Union[EntryStore, StorageError]:
    """FastAPI dependency for probes: the store, or the error that prevented it."""
    try:
        return build_store()
    except StorageError as exc:
        return exc
