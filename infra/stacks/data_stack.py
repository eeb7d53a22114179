"""Data stack: DynamoDB tables for metadata and transactions."""

from __future__ import annotations

from dataclasses import dataclass

from aws_cdk import Stack
from aws_cdk import aws_dynamodb as dynamodb
from constructs import Construct


@dataclass(frozen=True)
class DataTables:
    metadata: dynamodb.Table
    transactions: dynamodb.Table


class DataStack(Stack):
    """Key-value tables read and written by the hello function."""

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        metadata = dynamodb.Table(
            self,
            "metadata",
            partition_key=dynamodb.Attribute(
                name="Id", type=dynamodb.AttributeType.NUMBER
            ),
            sort_key=dynamodb.Attribute(
                name="mobile", type=dynamodb.AttributeType.STRING
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery=True,
        )

        # "crated_on" is the deployed attribute name; renaming it replaces the table
        transactions = dynamodb.Table(
            self,
            "transactions",
            partition_key=dynamodb.Attribute(
                name="mobile", type=dynamodb.AttributeType.STRING
            ),
            sort_key=dynamodb.Attribute(
                name="crated_on", type=dynamodb.AttributeType.STRING
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery=True,
        )

        self.tables = DataTables(metadata=metadata, transactions=transactions)

    @property
    def metadata_table(self) -> dynamodb.Table:
        return self.tables.metadata

    @property
    def transactions_table(self) -> dynamodb.Table:
        return self.tables.transactions

    @property
    def metadata_table_name(self) -> str:
        return self.metadata_table.table_name

    @property
    def transactions_table_name(self) -> str:
        return self.transactions_table.table_name
