"""Compute stack: the hello, countries and states functions."""

from __future__ import annotations

from typing import Optional

from aws_cdk import Stack
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_s3 as s3
from constructs import Construct

from infra.components.base_function import BaseFunction
from infra.config.secrets import ConfigSecret
from infra.stacks.data_stack import DataTables

COUNTRIES_API_URL = "https://examples.com/contries"
COUNTRIES_SECRET_NAME = "countries/partner"


class ComputeStack(Stack):
    """Lambda functions served behind the HTTP API."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        tables: DataTables,
        bucket: s3.IBucket,
        states_db_secret: ConfigSecret,
        code: Optional[lambda_.Code] = None,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.hello = BaseFunction(
            self,
            "HelloFn",
            entry="lambda/hello/handler.py",
            env={
                "METADATA_TABLE_NAME": tables.metadata.table_name,
                "TRANSACTIONS_TABLE_NAME": tables.transactions.table_name,
                "BUCKET_NAME": bucket.bucket_name,
            },
            url=False,
            code=code,
        ).fn
        tables.metadata.grant_read_write_data(self.hello)
        tables.transactions.grant_read_write_data(self.hello)
        self.hello.add_to_role_policy(
            iam.PolicyStatement(
                actions=["s3:PutObject"],
                resources=[bucket.bucket_arn, bucket.arn_for_objects("*")],
            )
        )

        self.countries = BaseFunction(
            self,
            "CountriesFn",
            entry="lambda/countries/handler.py",
            env={
                "COUNTRIES_API_URL": COUNTRIES_API_URL,
                "COUNTRIES_SECRET_NAME": COUNTRIES_SECRET_NAME,
            },
            url=False,
            code=code,
        ).fn
        # TODO: scope to the countries/partner secret ARN once it is managed here
        self.countries.add_to_role_policy(
            iam.PolicyStatement(
                actions=["secretsmanager:GetSecretValue"],
                resources=["*"],
            )
        )

        self.states = BaseFunction(
            self,
            "StatesFn",
            entry="lambda/states/handler.py",
            url=False,
            bind=[states_db_secret],
            code=code,
        ).fn
