"""Runtime configuration read from the Lambda environment."""

from dataclasses import dataclass
import os


@dataclass(frozen=True)
class RuntimeSettings:
    """Values the handlers echo back; all optional, all strings."""

    api_version: str = "1.0.0"
    environment: str = "dev"
    region: str = "unknown"

    @classmethod
    def from_environment(cls) -> "RuntimeSettings":
        """Load settings from environment variables."""
        return cls(
            api_version=os.environ.get("API_VERSION") or cls.api_version,
            environment=os.environ.get("ENVIRONMENT") or cls.environment,
            region=os.environ.get("AWS_REGION") or cls.region,
        )
