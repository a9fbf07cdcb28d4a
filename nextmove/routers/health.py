# nextmove/routers/health.py
"""
Health check for the database and the cache.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from nextmove.core.deps import get_db
from nextmove.core.redis_client import redis_health

router = APIRouter(tags=["Health"])


def check_database(db: Session) -> Dict[str, Any]:
    try:
        db.execute(text("SELECT 1")).fetchone()
        return {"status": "ok", "message": "Connected"}
    except Exception as e:
        return {"status": "error", "message": str(e)[:100]}


@router.get("/health")
async def health(db: Session = Depends(get_db)):
    services = {
        "database": check_database(db),
        "redis": await redis_health(),
    }
    healthy = all(s["status"] in ("ok", "disabled") for s in services.values())
    return {
        "status": "ok" if healthy else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": services,
    }
