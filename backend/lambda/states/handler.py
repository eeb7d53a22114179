"""Lambda entrypoint for the active states lookup."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from hello_world.api.states import lambda_handler as _handler


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Delegate to the states handler."""

    return _handler(event, context)
