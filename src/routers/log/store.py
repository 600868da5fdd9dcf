# ── src/routers/log/store.py ──────────────────────────────────────────
"""
Cosmos-backed entry store.

One container holds every LogEntry document, partitioned on `/project`.
Projects and subjects are never stored on their own; they are derived with
DISTINCT projections over the entry documents on every listing.

    {
        "id":        "<uuid4 hex>",
        "project":   "...",
        "subject":   "...",
        "body":      "...",
        "mime_type": "text/plain",
        "timestamp": 1700000000
    }
"""
import logging
import os
from typing import Dict, List

from azure.core.exceptions import AzureError
from azure.cosmos import CosmosClient
from azure.identity import DefaultAzureCredential

from .errors import NotFoundError, StorageError
from .models import LogEntry, LogHeader, parse_entry_id

_logger = logging.getLogger(__name__)

# ── Queries (parameterised, single container) ---------------------------
PROJECTS_QUERY = "SELECT DISTINCT VALUE c.project FROM c"
SUBJECTS_QUERY = "SELECT DISTINCT VALUE c.subject FROM c WHERE c.project = @project"
HEADERS_QUERY  = (
    "SELECT c.id, c.timestamp FROM c "
    "WHERE c.project = @project AND c.subject = @subject"
)
BY_ID_QUERY    = "SELECT * FROM c WHERE c.id = @id"


class EntryStore:
    """Thin wrapper over a Cosmos container client.

    The container client is thread-safe and shared by all requests; the
    store itself holds no other state.
    """

    def __init__(self, container):
        self._container = container

    @classmethod
    def from_env(cls) -> "EntryStore":
        endpoint  = os.getenv("COSMOS_ENDPOINT")
        key       = os.getenv("COSMOS_KEY")
        database  = os.getenv("COSMOS_DATABASE",  "logdb")
        container = os.getenv("COSMOS_CONTAINER", "log")
        if not endpoint:
            raise StorageError("COSMOS_ENDPOINT is not set")

        if key:
            client = CosmosClient(endpoint, credential=key)
        else:
            client = CosmosClient(endpoint, credential=DefaultAzureCredential())

        _logger.info("Cosmos store: %s / %s / %s", endpoint, database, container)
        return cls(client.get_database_client(database).get_container_client(container))

    # ── helpers --------------------------------------------------------
    def _query(self, op: str, query: str, params: Dict[str, str], **kwargs) -> List:
        try:
            return list(self._container.query_items(
                query=query,
                parameters=[{"name": k, "value": v} for k, v in params.items()],
                **kwargs,
            ))
        except AzureError as exc:
            _logger.exception("Cosmos %s failed", op)
            raise StorageError(f"Cosmos query failed: {exc.message}") from exc

    # ── write path -----------------------------------------------------
    def insert(self, entry: LogEntry) -> None:
        try:
            self._container.create_item(body=entry.model_dump())
        except AzureError as exc:
            _logger.exception("Cosmos insert failed for %s/%s", entry.project, entry.subject)
            raise StorageError(f"Cosmos insert failed: {exc.message}") from exc

    # ── read path ------------------------------------------------------
    def distinct_projects(self) -> List[str]:
        return self._query("distinct_projects", PROJECTS_QUERY, {},
                           enable_cross_partition_query=True)

    def distinct_subjects(self, project: str) -> List[str]:
        return self._query("distinct_subjects", SUBJECTS_QUERY,
                           {"@project": project}, partition_key=project)

    def list_headers(self, project: str, subject: str) -> List[LogHeader]:
        rows = self._query("list_headers", HEADERS_QUERY,
                           {"@project": project, "@subject": subject},
                           partition_key=project)
        return [LogHeader(id=r["id"], timestamp=r["timestamp"]) for r in rows]

    def get_by_id(self, entry_id: str) -> LogEntry:
        entry_id = parse_entry_id(entry_id)
        rows = self._query("get_by_id", BY_ID_QUERY, {"@id": entry_id},
                           enable_cross_partition_query=True)
        if not rows:
            raise NotFoundError(f"entry {entry_id} not found")
        return LogEntry.model_validate(rows[0])

    def ping(self) -> None:
        try:
            self._container.read()
        except AzureError as exc:
            _logger.exception("Cosmos ping failed")
            raise StorageError(f"Cosmos unreachable: {exc.message}") from exc
