# ── src/routers/log/endpoints.py ──────────────────────────────────────
from typing import List

from fastapi import APIRouter, Depends, Form, HTTPException, status
from fastapi.responses import Response

from . import service
from .errors import LogStoreError
from .models import EntryAddress, EntryPayload, LogEntry, LogHeader
from .deps import get_store
from .store import EntryStore

# ── Router -------------------------------------------------------------
router = APIRouter()


def _http_error(exc: LogStoreError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=str(exc))


# ── 1. Upload (form fields, same wire names as the original client) ---
@router.post("/upload/{project}/{subject}", summary="Append a log entry (form body)")
def upload_form(
    project:  str,
    subject:  str,
    body:     str = Form(""),
    mimeType: str = Form(""),
    store:    EntryStore = Depends(get_store),
):
    try:
        entry_id = service.ingest(store, project, subject, body, mimeType)
    except LogStoreError as exc:
        raise _http_error(exc) from exc
    return {"status": "success", "id": entry_id}


# ── 2. JSON API --------------------------------------------------------
@router.post("/api/log/entries", summary="Append a log entry (JSON body)",
             status_code=status.HTTP_201_CREATED)
def create_entry(payload: EntryPayload, store: EntryStore = Depends(get_store)):
    try:
        entry_id = service.ingest(store, payload.project, payload.subject,
                                  payload.body, payload.mime_type)
    except LogStoreError as exc:
        raise _http_error(exc) from exc
    return {"status": "success", "id": entry_id}


@router.get("/api/log/projects", response_model=List[str],
            summary="Distinct projects")
def projects(store: EntryStore = Depends(get_store)):
    try:
        return service.list_projects(store)
    except LogStoreError as exc:
        raise _http_error(exc) from exc


@router.get("/api/log/projects/{project}/subjects", response_model=List[str],
            summary="Distinct subjects of one project")
def subjects(project: str, store: EntryStore = Depends(get_store)):
    try:
        return service.list_subjects(store, project)
    except LogStoreError as exc:
        raise _http_error(exc) from exc


@router.get("/api/log/projects/{project}/subjects/{subject}/entries",
            response_model=List[LogHeader], summary="Entry headers (id + timestamp)")
def headers(project: str, subject: str, store: EntryStore = Depends(get_store)):
    try:
        return service.list_headers(store, project, subject)
    except LogStoreError as exc:
        raise _http_error(exc) from exc


@router.get("/api/log/entries/{entry_id}", response_model=LogEntry,
            summary="One full entry")
def entry(entry_id: str, store: EntryStore = Depends(get_store)):
    try:
        return service.get_entry(store, entry_id)
    except LogStoreError as exc:
        raise _http_error(exc) from exc


# ── 3. Raw body with its stored Content-Type --------------------------
@router.get("/log/{project}/{subject}/{entry_id}", summary="Raw entry body")
def raw_entry(project: str, subject: str, entry_id: str,
              store: EntryStore = Depends(get_store)):
    try:
        address = EntryAddress.parse(project, subject, entry_id)
        found   = service.resolve(store, address)
    except LogStoreError as exc:
        raise _http_error(exc) from exc
    return Response(content=found.body.encode("utf-8"),
                    headers={"content-type": found.mime_type})
