"""Pydantic models for API payloads."""

from models.request import ApiRequest  # noqa: F401
from models.response import (  # noqa: F401
    GreetingError,
    GreetingResponse,
    HealthChecks,
    HealthError,
    HealthResponse,
)
