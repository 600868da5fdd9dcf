# ── src/routers/log/models.py ─────────────────────────────────────────
import re
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from pydantic import BaseModel, Field

from .errors import InvalidIdError

DEFAULT_MIME_TYPE = "text/plain"

# uuid4().hex
_ID_RE = re.compile(r"[0-9a-f]{32}")


def parse_entry_id(raw: str) -> str:
    """Normalise an entry id, raising InvalidIdError when it is malformed."""
    entry_id = (raw or "").strip().lower()
    if not _ID_RE.fullmatch(entry_id):
        raise InvalidIdError(f"invalid entry id: {raw!r}")
    return entry_id


# ── Stored document ----------------------------------------------------
class LogEntry(BaseModel):
    id:        str = Field(..., description="Entry id (32 hex chars)")
    project:   str = Field(..., description="Project name (partition key)")
    subject:   str = Field(..., description="Subject within the project")
    body:      str = Field("", description="Opaque log body")
    mime_type: str = Field(DEFAULT_MIME_TYPE, description="Content-Type used when serving the body")
    timestamp: int = Field(..., description="Creation time, seconds since epoch")


class LogHeader(BaseModel):
    id:        str
    timestamp: int

    def date(self, tz: Optional[ZoneInfo] = None) -> str:
        return datetime.fromtimestamp(self.timestamp, tz or ZoneInfo("UTC")).isoformat(sep=" ")


class EntryAddress(BaseModel):
    """Full (project, subject, id) address as it arrives from the URL."""
    project: str
    subject: str
    id:      str

    @classmethod
    def parse(cls, project: str, subject: str, entry_id: str) -> "EntryAddress":
        return cls(project=project, subject=subject, id=parse_entry_id(entry_id))


# ── API payloads -------------------------------------------------------
class EntryPayload(BaseModel):
    project:   str           = Field(..., description="Project name")
    subject:   str           = Field(..., description="Subject name")
    body:      str           = Field("", description="Free-text log body")
    mime_type: Optional[str] = Field(None, description=f"Content-Type (default {DEFAULT_MIME_TYPE})")
