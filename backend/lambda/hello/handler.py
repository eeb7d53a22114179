"""Lambda entrypoint for the hello endpoint."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from hello_world.api.hello import lambda_handler as _handler


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Delegate to the hello handler."""

    return _handler(event, context)
