"""
Main CDK Stack for the Hello World API.
"""

from aws_cdk import (
    Stack,
    Tags,
    CfnOutput,
)
from constructs import Construct

from infrastructure.constructs.api_layer import ApiLayerConstruct
from infrastructure.config.settings import Settings


class HelloWorldApiStack(Stack):
    """Stack wiring the API layer together."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        settings: Settings,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Global tags for cost/accounting.
        Tags.of(self).add("Project", "hello-world-api")
        Tags.of(self).add("Environment", settings.environment)
        Tags.of(self).add("ManagedBy", "cdk")

        api_construct = ApiLayerConstruct(
            self,
            "ApiLayer",
            environment=settings.environment,
            api_version=settings.api_version,
            lambda_memory_mb=settings.lambda_memory_mb,
            lambda_timeout_seconds=settings.lambda_timeout_seconds,
            lambda_architecture=settings.lambda_architecture,
            throttling_rate_limit=settings.throttling_rate_limit,
            throttling_burst_limit=settings.throttling_burst_limit,
        )

        # Outputs to quickly find resources.
        CfnOutput(self, "ApiEndpoint", value=api_construct.api.url)
        CfnOutput(self, "HelloUrl", value=f"{api_construct.api.url}hello")
        CfnOutput(self, "HealthUrl", value=f"{api_construct.api.url}health")
        CfnOutput(self, "HelloFunctionName", value=api_construct.hello_fn.function_name)
        CfnOutput(self, "HealthFunctionName", value=api_construct.health_fn.function_name)
