"""
Pydantic model tests.

Covers event parsing for both proxy formats and the camelCase wire names.

Run with: pytest tests/unit/test_models.py -v
"""

import json

import pytest
from pydantic import ValidationError


class TestApiRequest:
    def test_rest_api_event(self):
        from models.request import ApiRequest

        request = ApiRequest.from_event(
            {
                "httpMethod": "POST",
                "path": "/hello",
                "requestContext": {
                    "requestId": "req-1",
                    "identity": {"sourceIp": "10.0.0.1"},
                },
            }
        )
        assert request.method == "POST"
        assert request.path == "/hello"
        assert request.request_id == "req-1"
        assert request.source_ip == "10.0.0.1"
        assert request.route_key == "POST /hello"

    def test_http_api_event(self):
        from models.request import ApiRequest

        request = ApiRequest.from_event(
            {
                "rawPath": "/health",
                "requestContext": {
                    "requestId": "req-2",
                    "http": {"method": "get", "path": "/health", "sourceIp": "10.0.0.2"},
                },
            }
        )
        assert request.route_key == "GET /health"
        assert request.request_id == "req-2"
        assert request.source_ip == "10.0.0.2"

    @pytest.mark.parametrize(
        "event",
        [
            None,
            {},
            {"requestContext": None},
            {"requestContext": "garbage"},
            {"requestContext": {"requestId": ""}},
            {"requestContext": {"identity": None}},
        ],
    )
    def test_defaults_never_raise(self, event):
        from models.request import ApiRequest

        request = ApiRequest.from_event(event)
        assert request.request_id == "unknown"
        assert request.source_ip is None
        assert request.method == ""
        assert request.path == ""


class TestResponseModels:
    def test_greeting_uses_camel_case(self):
        from models.response import GreetingResponse

        payload = GreetingResponse(
            timestamp="2024-01-15T12:30:00+00:00",
            request_id="abc",
            version="1.0.0",
            environment="dev",
        )
        dumped = json.loads(payload.model_dump_json(by_alias=True))
        assert dumped == {
            "message": "Hello World!",
            "timestamp": "2024-01-15T12:30:00+00:00",
            "requestId": "abc",
            "version": "1.0.0",
            "environment": "dev",
        }

    def test_health_checks_lambda_alias(self):
        from models.response import HealthChecks

        checks = HealthChecks(memory="warning", environment="dev", region="unknown")
        dumped = checks.model_dump(by_alias=True)
        assert dumped["lambda"] == "healthy"
        assert checks.is_healthy() is True

    def test_any_unhealthy_value_degrades(self):
        from models.response import HealthChecks

        assert HealthChecks(memory="unhealthy", environment="dev", region="x").is_healthy() is False
        # Every value is considered, not just memory.
        assert HealthChecks(memory="healthy", environment="unhealthy", region="x").is_healthy() is False

    def test_memory_status_is_restricted(self):
        from models.response import HealthChecks

        with pytest.raises(ValidationError):
            HealthChecks(memory="sideways", environment="dev", region="x")

    def test_health_error_defaults_to_unhealthy(self):
        from models.response import HealthError

        body = HealthError(timestamp="t", error="boom", request_id="r")
        assert json.loads(body.model_dump_json(by_alias=True)) == {
            "status": "unhealthy",
            "timestamp": "t",
            "error": "boom",
            "requestId": "r",
        }
