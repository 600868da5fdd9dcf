# ── src/main.py ───────────────────────────────────────────────────────────────
import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

app = FastAPI(title="logdepot")

# ── CORS
# Accept a comma/space-separated FRONTEND_ORIGIN list.
# Without one, fall back to "*" with allow_credentials=False.
def _parse_origins(env_value: str) -> list[str]:
    if not env_value:
        return []
    raw = [p.strip() for chunk in env_value.split(",") for p in chunk.split()]
    origins = []
    for o in raw:
        o = o.rstrip("/")
        if o and o not in origins:
            origins.append(o)
    return origins

_frontend_origins = _parse_origins(os.getenv("FRONTEND_ORIGIN", ""))

app.add_middleware(
    CORSMiddleware,
    allow_origins=_frontend_origins or ["*"],
    allow_credentials=bool(_frontend_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── modules ------------------------------------------------------------------
from routers.healthz.endpoints         import router as health_router
from routers.log.endpoints             import router as log_router
from routers.log.html_console_endpoint import router as log_console_router

# ── include routes -----------------------------------------------------------
app.include_router(health_router)
app.include_router(log_router)
app.include_router(log_console_router)


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "80"))
    logging.getLogger(__name__).info("start: bind %s:%s", host, port)
    uvicorn.run(app, host=host, port=port)
