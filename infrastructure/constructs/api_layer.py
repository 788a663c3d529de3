"""
API layer construct: one Lambda per endpoint behind a REST API.

Both functions share the same asset (src/) and differ only in handler.
"""

from aws_cdk import (
    BundlingOptions,
    Duration,
    aws_apigateway as apigw,
    aws_lambda as _lambda,
    aws_logs as logs,
)
from constructs import Construct

CORS_ALLOW_HEADERS = [
    "Content-Type",
    "X-Amz-Date",
    "Authorization",
    "X-Api-Key",
    "X-Amz-Security-Token",
]


class ApiLayerConstruct(Construct):
    """Expose /hello and /health via API Gateway."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        api_version: str,
        lambda_memory_mb: int = 128,
        lambda_timeout_seconds: int = 10,
        lambda_architecture: str = "X86_64",
        throttling_rate_limit: int = 100,
        throttling_burst_limit: int = 200,
    ) -> None:
        super().__init__(scope, construct_id)

        # Bundle handler code with pydantic + python-json-logger using Docker.
        code = _lambda.Code.from_asset(
            "src",
            bundling=BundlingOptions(
                image=_lambda.Runtime.PYTHON_3_12.bundling_image,
                command=[
                    "bash", "-c",
                    "pip install -r requirements-lambda.txt -t /asset-output && "
                    "cp -r . /asset-output"
                ],
            ),
        )
        architecture = (
            _lambda.Architecture.ARM_64
            if lambda_architecture == "ARM_64"
            else _lambda.Architecture.X86_64
        )
        shared_env = {
            "ENVIRONMENT": environment,
            "API_VERSION": api_version,
        }

        self.hello_fn = self._function(
            "HelloFunction",
            handler="handlers.hello.lambda_handler",
            code=code,
            architecture=architecture,
            memory_mb=lambda_memory_mb,
            timeout_seconds=lambda_timeout_seconds,
            environment=shared_env,
        )
        self.health_fn = self._function(
            "HealthFunction",
            handler="handlers.health.lambda_handler",
            code=code,
            architecture=architecture,
            memory_mb=lambda_memory_mb,
            timeout_seconds=lambda_timeout_seconds,
            environment=shared_env,
        )

        self.api = apigw.RestApi(
            self,
            "RestApi",
            rest_api_name=f"hello-world-api-{environment}",
            deploy_options=apigw.StageOptions(
                stage_name=environment,
                throttling_rate_limit=throttling_rate_limit,
                throttling_burst_limit=throttling_burst_limit,
                metrics_enabled=True,
            ),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=apigw.Cors.ALL_ORIGINS,
                allow_methods=["GET", "OPTIONS"],
                allow_headers=CORS_ALLOW_HEADERS,
            ),
        )

        hello_resource = self.api.root.add_resource("hello")
        hello_resource.add_method("ANY", apigw.LambdaIntegration(self.hello_fn))

        health_resource = self.api.root.add_resource("health")
        health_resource.add_method("GET", apigw.LambdaIntegration(self.health_fn))

    def _function(
        self,
        construct_id: str,
        *,
        handler: str,
        code: _lambda.Code,
        architecture: _lambda.Architecture,
        memory_mb: int,
        timeout_seconds: int,
        environment: dict,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            construct_id,
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler=handler,
            code=code,
            memory_size=memory_mb,
            timeout=Duration.seconds(timeout_seconds),
            architecture=architecture,
            environment=environment,
            log_retention=logs.RetentionDays.ONE_WEEK,
        )
