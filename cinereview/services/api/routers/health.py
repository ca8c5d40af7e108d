# cinereview/services/api/routers/health.py
from __future__ import annotations
from datetime import datetime, timezone

from fastapi import APIRouter
from cinereview.common.settings import get_settings

cfg = get_settings()
router = APIRouter(prefix=cfg.api.prefix, tags=["health"])

@router.get("/health")
def health():
    s = get_settings()
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "app": s.app_name,
        "env": s.app_env,
        "version": s.app_version,
    }
