"""Response payloads; serialized with camelCase aliases."""

from typing import Dict, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CheckStatus = Literal["healthy", "warning", "unhealthy"]


class ApiModel(BaseModel):
    """Base for wire payloads: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GreetingResponse(ApiModel):
    """Body of a successful greeting."""

    message: str = "Hello World!"
    timestamp: str
    request_id: str
    version: str
    environment: str


class GreetingError(ApiModel):
    error: str = "Internal Server Error"
    message: str
    request_id: str


class HealthChecks(ApiModel):
    """Individual check results; any value of "unhealthy" degrades the service."""

    lambda_: str = Field(default="healthy", alias="lambda")
    memory: CheckStatus
    environment: str
    region: str

    def is_healthy(self) -> bool:
        values: Dict[str, str] = self.model_dump()
        return all(value != "unhealthy" for value in values.values())


class HealthResponse(ApiModel):
    status: Literal["healthy", "degraded"]
    timestamp: str
    checks: HealthChecks
    version: str


class HealthError(ApiModel):
    status: Literal["unhealthy"] = "unhealthy"
    timestamp: str
    error: str
    request_id: str
