"""Inbound request model built from an API Gateway proxy event."""

from typing import Any, Mapping, Optional

from pydantic import BaseModel

UNKNOWN_REQUEST_ID = "unknown"


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


class ApiRequest(BaseModel):
    """The few request fields the handlers care about."""

    method: str = ""
    path: str = ""
    request_id: str = UNKNOWN_REQUEST_ID
    source_ip: Optional[str] = None

    @classmethod
    def from_event(cls, event: Any) -> "ApiRequest":
        """
        Read a REST API (v1) or HTTP API (v2) proxy event.

        Missing pieces fall back to defaults instead of raising, so a bare
        ``{}`` (or ``None``) still yields a usable request.
        """
        event = _mapping(event)
        request_context = _mapping(event.get("requestContext"))
        http = _mapping(request_context.get("http"))
        identity = _mapping(request_context.get("identity"))

        method = event.get("httpMethod") or http.get("method") or ""
        path = event.get("path") or http.get("path") or event.get("rawPath") or ""
        source_ip = identity.get("sourceIp") or http.get("sourceIp")

        return cls(
            method=str(method),
            path=str(path),
            request_id=str(request_context.get("requestId") or UNKNOWN_REQUEST_ID),
            source_ip=str(source_ip) if source_ip else None,
        )

    @property
    def route_key(self) -> str:
        return f"{self.method.upper()} {self.path}"
