"""Custom exceptions and helpers for consistent error responses."""

from typing import Any, Dict, Optional

from pydantic import BaseModel

from utils.http import json_response


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class RequestProcessingError(AppError):
    """Raised when the greeting payload cannot be assembled."""

    def __init__(self, message: str = "An error occurred while processing your request"):
        super().__init__(message, status_code=500)


class HealthCheckError(AppError):
    """Raised when memory sampling or status derivation fails."""

    def __init__(self, message: str = "Health check encountered an error"):
        super().__init__(message, status_code=503)


def to_response(
    error: AppError,
    body: BaseModel,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    return json_response(error.status_code, body, headers)
