# ── src/routers/log/__init__.py ───────────────────────────────────────
"""
Log store sub-router.

Append-only log entries addressed as project → subject → entry id and
kept in a single Cosmos container:
    endpoints.py             POST /upload/{project}/{subject}, /api/log/*,
                             raw bodies at /log/{project}/{subject}/{id}
    html_console_endpoint.py browsable pages at / and /log/...
"""
from .endpoints import router  # re-export for `include_router`
