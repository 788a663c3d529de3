"""
Single entrypoint Lambda that routes requests to the hello and health handlers.

The CDK stack deploys each handler as its own function; this router exists
for deployments that prefer one function behind a catch-all route.
"""

from typing import Callable, Tuple

from models.request import ApiRequest
from utils.http import json_response
from utils.logging_config import get_logger

from . import health, hello

logger = get_logger(__name__)


def lambda_handler(event, context):
    """
    Entry point for a proxy integration in front of both endpoints.

    Every method is accepted on both paths; CORS preflight is answered by
    the gateway before it gets here.
    """
    request = ApiRequest.from_event(event)

    route_table: Tuple[Tuple[str, Callable], ...] = (
        ("/hello", hello.lambda_handler),
        ("/health", health.lambda_handler),
    )

    path = request.path.rstrip("/")
    for route, handler in route_table:
        if path.endswith(route):
            return handler(event, context)

    logger.info("Route not found", extra={"route": request.route_key})
    return json_response(404, {"message": "Route not found", "route": request.route_key})
