import time
from typing import Any, Dict

import structlog
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger(__name__)


def _probe_database(alias: str = "default") -> Dict[str, Any]:
    start = time.monotonic()
    try:
        conn = connections[alias]
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError as exc:
        logger.error("health_check.database_down", alias=alias, error=str(exc))
        return {"status": "down"}
    return {
        "status": "up",
        "response_time_ms": round((time.monotonic() - start) * 1000, 2),
    }


def health_check(request: HttpRequest) -> JsonResponse:
    """Liveness probe; 503 when the catalog database is unreachable."""
    services = {"database": _probe_database()}
    healthy = all(s["status"] == "up" for s in services.values())
    state = "healthy" if healthy else "unhealthy"

    logger.info("health_check.completed", status=state)
    return JsonResponse(
        {
            "status": state,
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )
