# mp3slice/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter
from mp3slice.common.settings import get_settings

router = APIRouter()

@router.get("/healthz")
def healthz():
    s = get_settings()
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "probe_windows": [str(w) for w in s.slicing.windows],
        "clamp_to_content_length": s.slicing.clamp_to_content_length,
    }
