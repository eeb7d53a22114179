"""CDK entrypoint: ``cdk synth`` / ``cdk deploy`` run this module.

Context:
    stage   Deployment stage (default ``dev``).

Environment:
    STATES_DB_SECRET    JSON connection secret bound to the states
                        function; a local placeholder is used when unset.
"""

from __future__ import annotations

import json
import os
from typing import Optional

import aws_cdk as cdk

from infra.config.secrets import ConfigSecret
from infra.config.secrets import create_config_secret
from infra.stacks import ApiStack
from infra.stacks import ComputeStack
from infra.stacks import DataStack
from infra.stacks import EdgeStack
from infra.stacks import StorageStack

APP_NAME = "sst-hello-world"
DEFAULT_REGION = "ap-southeast-1"

DEFAULT_STATES_DB_SECRET = {
    "host": "myrds-host",
    "port": 3306,
    "username": "1234",
    "password": "5432",
    "database": "states",
}


def default_states_secret() -> ConfigSecret:
    value = os.getenv("STATES_DB_SECRET") or json.dumps(DEFAULT_STATES_DB_SECRET)
    return create_config_secret("STATES_DB_SECRET", value)


def build_app(
    app: Optional[cdk.App] = None,
    code: Optional[cdk.aws_lambda.Code] = None,
) -> cdk.App:
    """Declare every stack of the application on ``app``."""

    app = app or cdk.App()
    env = cdk.Environment(
        account=os.getenv("CDK_DEFAULT_ACCOUNT"),
        region=os.getenv("CDK_DEFAULT_REGION", DEFAULT_REGION),
    )
    stage = app.node.try_get_context("stage") or "dev"
    cdk.Tags.of(app).add("app", APP_NAME)
    cdk.Tags.of(app).add("stage", stage)

    data = DataStack(app, "DataStack", env=env)
    storage = StorageStack(app, "StorageStack", env=env)
    compute = ComputeStack(
        app,
        "ComputeStack",
        tables=data.tables,
        bucket=storage.bucket,
        states_db_secret=default_states_secret(),
        code=code,
        env=env,
    )
    api = ApiStack(
        app,
        "ApiStack",
        hello=compute.hello,
        countries=compute.countries,
        states=compute.states,
        env=env,
    )
    edge = EdgeStack(app, "EdgeStack", api_url=api.url, env=env)

    cdk.CfnOutput(api, "ApiUrl", value=api.url)
    cdk.CfnOutput(edge, "EdgeUrl", value=edge.domain)
    cdk.CfnOutput(data, "MetadataTableName", value=data.metadata_table_name)
    cdk.CfnOutput(data, "TransactionsTableName", value=data.transactions_table_name)
    cdk.CfnOutput(storage, "BucketName", value=storage.transaction_bucket_name)
    return app


def main() -> None:
    build_app().synth()


if __name__ == "__main__":
    main()
