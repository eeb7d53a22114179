"""Lambda entrypoint for the countries partner-API proxy."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from hello_world.api.countries import lambda_handler as _handler


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Delegate to the countries handler."""

    return _handler(event, context)
