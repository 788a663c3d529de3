"""Lambda proxy response helpers and the header sets each endpoint returns."""

import json
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel

CORS_ALLOW_HEADERS = "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token"
CORS_ALLOW_METHODS = "GET,OPTIONS"
NO_CACHE = "no-cache, no-store, must-revalidate"


def base_headers(request_id: str) -> Dict[str, str]:
    """Headers present on every response, success or failure."""
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": "*",
        "X-Request-Id": request_id,
    }


def greeting_headers(request_id: str, processing_ms: int) -> Dict[str, str]:
    headers = base_headers(request_id)
    headers.update(
        {
            "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
            "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
            "X-Processing-Time": f"{processing_ms}ms",
        }
    )
    return headers


def health_headers(request_id: str) -> Dict[str, str]:
    headers = base_headers(request_id)
    headers["Cache-Control"] = NO_CACHE
    return headers


def json_response(
    status: int,
    body: Union[BaseModel, Mapping[str, Any]],
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Format a JSON API Gateway proxy response.

    The body is always a JSON string; pydantic models are dumped by alias so
    the wire keys stay camelCase.
    """
    if isinstance(body, BaseModel):
        encoded = body.model_dump_json(by_alias=True)
    else:
        encoded = json.dumps(body)
    return {
        "statusCode": status,
        "headers": headers or {"Content-Type": "application/json"},
        "body": encoded,
    }
