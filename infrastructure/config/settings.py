"""
Environment-specific deployment settings.

Defaults mirror the runtime defaults the handlers fall back to.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Deployment settings with cost-optimized defaults."""

    environment: str = "dev"
    aws_region: str = "us-east-1"
    api_version: str = "1.0.0"

    # Lambda Configuration
    # The health handler's memory thresholds assume this size.
    lambda_memory_mb: int = 128
    lambda_timeout_seconds: int = 10
    # x86_64 matches the bundling image on CI runners (pydantic-core wheels).
    lambda_architecture: str = "X86_64"

    # API Gateway stage throttling
    throttling_rate_limit: int = 100
    throttling_burst_limit: int = 200

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        region = os.environ.get("AWS_REGION", cls.aws_region)
        api_version = os.environ.get("API_VERSION", cls.api_version)

        # Production overrides
        if env == "prod":
            return cls(
                environment="prod",
                aws_region=region,
                api_version=api_version,
                lambda_timeout_seconds=30,
                throttling_rate_limit=1000,
                throttling_burst_limit=2000,
            )

        return cls(environment=env, aws_region=region, api_version=api_version)
