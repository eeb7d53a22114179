"""CDK stacks, one per resource group."""

from infra.stacks.api_stack import ApiStack
from infra.stacks.compute_stack import ComputeStack
from infra.stacks.data_stack import DataStack
from infra.stacks.edge_stack import EdgeStack
from infra.stacks.storage_stack import StorageStack

__all__ = [
    "ApiStack",
    "ComputeStack",
    "DataStack",
    "EdgeStack",
    "StorageStack",
]
