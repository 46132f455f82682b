"""
Process health reporting.
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter


class HealthChecker:
    """Reports liveness and process uptime."""

    def __init__(self):
        self.started_at = time.monotonic()

    def uptime(self) -> float:
        return time.monotonic() - self.started_at

    def check(self) -> Dict[str, Any]:
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": self.uptime(),
        }


def create_health_router(checker: HealthChecker) -> APIRouter:
    """Create the FastAPI health router."""
    router = APIRouter(prefix="/health", tags=["health"])

    @router.get("", summary="Service health")
    async def health():
        return checker.check()

    return router
