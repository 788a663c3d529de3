"""
Health check handler.

Reports liveness plus a memory-pressure check against the function's
128 MiB budget. A "warning" memory state still counts as healthy; only an
"unhealthy" check flips the overall status to "degraded" (503).
"""

from __future__ import annotations

import traceback
from typing import Any, Dict, Optional

from models.request import ApiRequest
from models.response import HealthChecks, HealthError, HealthResponse
from utils.error_handling import HealthCheckError, to_response
from utils.http import health_headers, json_response
from utils.logging_config import get_logger
from utils.probes import (
    Clock,
    MemoryProbe,
    classify_memory,
    process_memory_bytes,
    utc_now,
)
from utils.settings import RuntimeSettings

logger = get_logger(__name__)


def check_memory(probe: MemoryProbe = process_memory_bytes) -> str:
    """Sample memory usage and classify it."""
    try:
        used = probe()
    except Exception as exc:
        raise HealthCheckError(f"Memory sampling failed: {exc}") from exc
    return classify_memory(used)


def check_health(
    request: ApiRequest,
    settings: RuntimeSettings,
    clock: Clock = utc_now,
    memory_probe: MemoryProbe = process_memory_bytes,
) -> Dict[str, Any]:
    """Run the checks for one request; never raises."""
    request_id = request.request_id
    headers = health_headers(request_id)

    try:
        logger.info(
            "Health check requested",
            extra={"requestId": request_id, "path": request.path, "method": request.method},
        )

        checks = HealthChecks(
            memory=check_memory(memory_probe),
            environment=settings.environment,
            region=settings.region,
        )
        healthy = checks.is_healthy()
        payload = HealthResponse(
            status="healthy" if healthy else "degraded",
            timestamp=clock().isoformat(),
            checks=checks,
            version=settings.api_version,
        )

        logger.info(
            "Health check completed",
            extra={"requestId": request_id, "status": payload.status},
        )

        return json_response(200 if healthy else 503, payload, headers)

    except Exception as exc:
        logger.error(
            "Health check failed",
            extra={
                "requestId": request_id,
                "error": str(exc),
                "stack": traceback.format_exc(),
            },
        )
        error = exc if isinstance(exc, HealthCheckError) else HealthCheckError()
        body = HealthError(
            timestamp=utc_now().isoformat(),
            error="Health check encountered an error",
            request_id=request_id,
        )
        return to_response(error, body, headers)


def lambda_handler(event, context, settings: Optional[RuntimeSettings] = None):
    """Handle GET /health."""
    request = ApiRequest.from_event(event)
    return check_health(request, settings or RuntimeSettings.from_environment())
