"""
Hello World handler.

Returns a fixed greeting enriched with the request id and deployment
metadata, plus a processing-time header for quick latency checks.
"""

from __future__ import annotations

import traceback
from typing import Any, Dict, Optional

from models.request import ApiRequest
from models.response import GreetingError, GreetingResponse
from utils.error_handling import RequestProcessingError, to_response
from utils.http import base_headers, greeting_headers, json_response
from utils.logging_config import get_logger
from utils.probes import Clock, Timer, monotonic_timer, utc_now
from utils.settings import RuntimeSettings

logger = get_logger(__name__)


def greet(
    request: ApiRequest,
    settings: RuntimeSettings,
    clock: Clock = utc_now,
    timer: Timer = monotonic_timer,
) -> Dict[str, Any]:
    """Build the greeting response for one request; never raises."""
    request_id = request.request_id

    try:
        log_context = {"requestId": request_id, "path": request.path, "method": request.method}
        if request.source_ip:
            log_context["sourceIp"] = request.source_ip
        logger.info("Processing Hello World request", extra=log_context)

        start = timer()
        payload = GreetingResponse(
            timestamp=clock().isoformat(),
            request_id=request_id,
            version=settings.api_version,
            environment=settings.environment,
        )
        processing_ms = max(0, int((timer() - start) * 1000))

        logger.info(
            "Successfully processed request",
            extra={"requestId": request_id, "processingTime": processing_ms},
        )

        return json_response(200, payload, greeting_headers(request_id, processing_ms))

    except Exception as exc:
        logger.error(
            "Failed to process request",
            extra={
                "requestId": request_id,
                "error": str(exc),
                "stack": traceback.format_exc(),
            },
        )
        error = RequestProcessingError()
        body = GreetingError(message=str(error), request_id=request_id)
        return to_response(error, body, base_headers(request_id))


def lambda_handler(event, context, settings: Optional[RuntimeSettings] = None):
    """Handle any method on /hello."""
    request = ApiRequest.from_event(event)
    return greet(request, settings or RuntimeSettings.from_environment())
