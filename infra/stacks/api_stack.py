"""API stack: HTTP API routes in front of the functions."""

from __future__ import annotations

from aws_cdk import Stack
from aws_cdk import aws_apigatewayv2 as apigwv2
from aws_cdk import aws_lambda as lambda_
from aws_cdk.aws_apigatewayv2_integrations import HttpLambdaIntegration
from constructs import Construct

# "/contries" is the published path; clients already call it
ROUTES = (
    ("/hello", "hello"),
    ("/contries", "countries"),
    ("/states", "states"),
)


class ApiStack(Stack):
    """HTTP API (API Gateway v2) mapping GET routes to Lambda functions."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        hello: lambda_.IFunction,
        countries: lambda_.IFunction,
        states: lambda_.IFunction,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.api = apigwv2.HttpApi(self, "HttpApi")

        functions = {"hello": hello, "countries": countries, "states": states}
        for path, name in ROUTES:
            self.api.add_routes(
                path=path,
                methods=[apigwv2.HttpMethod.GET],
                integration=HttpLambdaIntegration(
                    f"{name.capitalize()}Integration", functions[name]
                ),
            )

    @property
    def url(self) -> str:
        return self.api.api_endpoint
