# ── src/routers/log/html_console_endpoint.py ─────────────────────────
"""
Browser-friendly console for the log store.

•  /                               → every project
•  /log/<project>/                 → subjects of one project
•  /log/<project>/<subject>/       → entry headers (newest first)
•  /log/<project>/<subject>/<id>   → raw body (served by endpoints.py)
"""
from typing import List
from urllib.parse import quote
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse
import logging, os, html

from . import service
from .deps import get_store
from .errors import LogStoreError
from .models import LogHeader
from .store import EntryStore

# ── Router -------------------------------------------------------------
router = APIRouter()

_logger = logging.getLogger(__name__)


def _load_display_tz() -> ZoneInfo:
    name = os.getenv("LOG_DISPLAY_TZ", "UTC")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        _logger.warning("LOG_DISPLAY_TZ %r unknown – falling back to UTC", name)
        return ZoneInfo("UTC")


_display_tz = _load_display_tz()

# ── Helpers ------------------------------------------------------------
def _html_page(title: str, body: str) -> str:
    """Simple, dependency-free HTML template."""
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{html.escape(title)}</title>
  <style>
      body {{ font-family: Arial, sans-serif; margin: 2rem; }}
      table {{ border-collapse: collapse; width: 100%; }}
      th, td {{ border: 1px solid #ccc; padding: .45rem .6rem; text-align: left; }}
      th {{ background: #f2f2f2; }}
      a.button {{
          display: inline-block; padding: .3rem .7rem; margin: 0 .2rem;
          background: #0078d4; color: #fff; border-radius: 4px; text-decoration: none;
      }}
      a.button:hover {{ background: #005a9e; }}
  </style>
</head>
<body>
{body}
</body>
</html>
"""


def _link_table(heading: str, links: List[tuple]) -> str:
    """One-column table of (href, label) links."""
    rows = "".join(
        f'\n        <tr><td><a href="{href}">{html.escape(label)}</a></td></tr>'
        for href, label in links
    )
    return f"""
    <h2>{html.escape(heading)}</h2>
    <table>
        <tbody>{rows}
        </tbody>
    </table>
    """


def _seg(value: str) -> str:
    return quote(value, safe="")


# ── Routes -------------------------------------------------------------
@router.get("/", include_in_schema=False, response_class=HTMLResponse)
def index_page(store: EntryStore = Depends(get_store)):
    """Render every known project."""
    try:
        projects = sorted(service.list_projects(store))
    except LogStoreError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc

    if not projects:
        return _html_page("Log Console – no logs", "<h2>No logs found</h2>")

    body = _link_table("Logs available", [(f"/log/{_seg(p)}/", p) for p in projects])
    return _html_page("Log Console", body)


@router.get("/log/{project}/", include_in_schema=False, response_class=HTMLResponse)
def project_page(project: str, store: EntryStore = Depends(get_store)):
    """Render the subjects of one project."""
    try:
        subjects = sorted(service.list_subjects(store, project))
    except LogStoreError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc

    back = '<a class="button" href="/">← Back</a>'
    if not subjects:
        body = f"{back}<p>No subjects in project <code>{html.escape(project)}</code>.</p>"
        return _html_page(f"Project {project}", body)

    links = [(f"/log/{_seg(project)}/{_seg(s)}/", s) for s in subjects]
    body  = back + _link_table(f"Project {project}", links)
    return _html_page(f"Project {project}", body)


@router.get("/log/{project}/{subject}/", include_in_schema=False,
            response_class=HTMLResponse)
def subject_page(project: str, subject: str, store: EntryStore = Depends(get_store)):
    """Render the entry headers of one subject, newest first."""
    try:
        headers: List[LogHeader] = service.list_headers(store, project, subject)
    except LogStoreError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc

    headers.sort(key=lambda h: h.timestamp, reverse=True)
    back = f'<a class="button" href="/log/{_seg(project)}/">← Back</a>'
    title = f"{project} / {subject}"

    if not headers:
        body = f"{back}<p>No entries in <code>{html.escape(title)}</code>.</p>"
        return _html_page(title, body)

    base = f"/log/{_seg(project)}/{_seg(subject)}"
    rows = []
    for h in headers:
        entry_id = html.escape(h.id)
        rows.append(f"""
        <tr>
            <td><a href="{base}/{entry_id}">{entry_id}</a></td>
            <td>{html.escape(h.date(_display_tz))}</td>
        </tr>""")

    body = f"""
    {back}
    <h2>project: {html.escape(project)} &nbsp; subject: {html.escape(subject)}</h2>
    <table>
        <thead>
            <tr>
                <th>Entry</th>
                <th>Created ({html.escape(str(_display_tz))})</th>
            </tr>
        </thead>
        <tbody>
            {''.join(rows)}
        </tbody>
    </table>
    """
    return _html_page(title, body)
