"""Reusable wrapper around ``aws_lambda.Function``.

Applies the project's defaults to every function: Python runtime,
small memory, short timeout, one-month log retention and no extra IAM
permissions. Callers grant what each function needs explicitly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from typing import Iterable
from typing import Mapping
from typing import Optional

from aws_cdk import Duration
from aws_cdk import RemovalPolicy
from aws_cdk import Stack
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_logs as logs
from constructs import Construct

from infra.config.secrets import build_environment

# Output of backend/scripts/build_lambda_bundle.py
DEFAULT_BUNDLE_DIR = (
    Path(__file__).resolve().parents[2] / "backend" / ".lambda-build" / "base"
)
HANDLER_FUNCTION = "lambda_handler"


def handler_path(entry: str) -> str:
    """Turn ``lambda/hello/handler.py`` into a Lambda handler string."""
    module = entry[:-3] if entry.endswith(".py") else entry
    return f"{module}.{HANDLER_FUNCTION}"


def default_code() -> lambda_.Code:
    return lambda_.Code.from_asset(str(DEFAULT_BUNDLE_DIR))


class BaseFunction(Construct):
    """A Lambda function with the project's secure defaults."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        entry: str,
        env: Optional[Mapping[str, str]] = None,
        memory: int = 128,
        timeout: int = 10,
        runtime: Optional[lambda_.Runtime] = None,
        url: bool = True,
        bind: Iterable[Any] = (),
        code: Optional[lambda_.Code] = None,
    ) -> None:
        super().__init__(scope, construct_id)

        stack = Stack.of(self)
        stage = self.node.try_get_context("stage") or "dev"
        self.environment = build_environment(stage, stack.region, env, bind)

        log_group = logs.LogGroup(
            self,
            "Logs",
            retention=logs.RetentionDays.ONE_MONTH,
            removal_policy=RemovalPolicy.DESTROY,
        )

        self.fn = lambda_.Function(
            self,
            "Function",
            handler=handler_path(entry),
            runtime=runtime or lambda_.Runtime.PYTHON_3_12,
            code=code or default_code(),
            memory_size=memory,
            timeout=Duration.seconds(timeout),
            environment=self.environment,
            log_group=log_group,
        )

        self.function_url: Optional[lambda_.FunctionUrl] = None
        if url:
            self.function_url = self.fn.add_function_url(
                auth_type=lambda_.FunctionUrlAuthType.NONE,
            )

    @property
    def url(self) -> Optional[str]:
        """Function URL for quick testing, or None when disabled."""
        return self.function_url.url if self.function_url else None
