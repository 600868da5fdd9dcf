from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from routers.log.deps import try_get_store
from routers.log.errors import StorageError

router = APIRouter()

@router.get("/healthz", include_in_schema=False)
def health_check():
    return JSONResponse({"status": "healthy"})

@router.get("/readyz", include_in_schema=False)
def readiness_check(store=Depends(try_get_store)):
    try:
        if isinstance(store, StorageError):
            raise store
        store.ping()
    except StorageError as exc:
        return JSONResponse({"status": "unavailable", "detail": str(exc)}, status_code=503)
    return JSONResponse({"status": "ready"})
