"""Probe and informational endpoints"""

import html
import json

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from web.config import WebSettings, get_settings

router = APIRouter(prefix="/status", tags=["status"])

# Catch-all, must be included after every other router
fallback_router = APIRouter(tags=["status"])


@router.get("/ready")
def ready() -> str:
    """Readiness check"""
    return "OK"


@router.get("/about")
def about(settings: WebSettings = Depends(get_settings)) -> dict[str, str]:
    """Identify the pod serving the request"""
    return {"podName": settings.POD_NAME}


# OPTIONS is left to the CORS middleware
FALLBACK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


@fallback_router.api_route("/{path:path}", methods=FALLBACK_METHODS, response_class=PlainTextResponse)
def hello(path: str) -> str:
    return f"Hello, {json.dumps(html.escape('/' + path), ensure_ascii=False)}"
