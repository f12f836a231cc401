import time
from datetime import datetime, timezone
from fastapi import APIRouter, Request
from scrolljob.core.rate_limit import limiter
from scrolljob.database.mongo import ping_mongo

router = APIRouter(tags=["health"])

STARTED_AT = time.monotonic()

@router.get("/", summary="API root")
@limiter.exempt
async def root():
    """API root"""
    return {
        "status": "success",
        "message": "ScrollJob API is running",
        "data": {
            "version": "v1",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    }

@router.get("/health", summary="Health check for monitoring")
@limiter.exempt
async def health(request: Request):
    client = getattr(request.app.state, "mongo_client", None)
    connected = await ping_mongo(client)
    return {
        "status": "success",
        "message": "Health check passed",
        "data": {
            "uptime": round(time.monotonic() - STARTED_AT, 3),
            "database": "connected" if connected else "disconnected",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    }
