"""Storage stack: the transactions bucket."""

from __future__ import annotations

from aws_cdk import Duration
from aws_cdk import Stack
from aws_cdk import aws_s3 as s3
from constructs import Construct


class StorageStack(Stack):
    """Private, versioned bucket for transaction exports."""

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.bucket = s3.Bucket(
            self,
            "my-lakshmi-transactions",
            versioned=True,
            lifecycle_rules=[
                s3.LifecycleRule(id="logs-retention", expiration=Duration.days(365)),
            ],
            block_public_access=s3.BlockPublicAccess(
                block_public_acls=True,
                block_public_policy=True,
                ignore_public_acls=True,
                restrict_public_buckets=True,
            ),
            enforce_ssl=True,
        )

    @property
    def transaction_bucket_name(self) -> str:
        return self.bucket.bucket_name
