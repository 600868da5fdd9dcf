# ── src/routers/log/service.py ────────────────────────────────────────
"""
Ingestion and query operations.

Each function is one synchronous call into the EntryStore; nothing here
caches, batches or retries.
"""
import logging
import time
import uuid
from typing import List, Optional

from .errors import NotFoundError, ValidationError
from .models import DEFAULT_MIME_TYPE, EntryAddress, LogEntry, LogHeader
from .store import EntryStore

_logger = logging.getLogger(__name__)


def ingest(
    store: EntryStore,
    project: str,
    subject: str,
    body: str,
    mime_type: Optional[str] = None,
) -> str:
    """Append one entry and return its generated id."""
    if not project or not subject:
        raise ValidationError("empty project or subject")

    entry = LogEntry(
        id=uuid.uuid4().hex,
        project=project,
        subject=subject,
        body=body or "",
        mime_type=mime_type or DEFAULT_MIME_TYPE,
        timestamp=int(time.time()),
    )
    _logger.info("upload %s %s %s (%d chars) → %s",
                 project, subject, entry.mime_type, len(entry.body), entry.id)
    store.insert(entry)
    return entry.id


def list_projects(store: EntryStore) -> List[str]:
    return store.distinct_projects()


def list_subjects(store: EntryStore, project: str) -> List[str]:
    return store.distinct_subjects(project)


def list_headers(store: EntryStore, project: str, subject: str) -> List[LogHeader]:
    return store.list_headers(project, subject)


def get_entry(store: EntryStore, entry_id: str) -> LogEntry:
    return store.get_by_id(entry_id)


def resolve(store: EntryStore, address: EntryAddress) -> LogEntry:
    """Fetch the entry at a full address; a mismatched project/subject is a miss."""
    entry = store.get_by_id(address.id)
    if entry.project != address.project or entry.subject != address.subject:
        raise NotFoundError(
            f"entry {address.id} not found under {address.project}/{address.subject}"
        )
    return entry
