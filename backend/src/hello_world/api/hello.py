"""Lambda handler for the hello endpoint."""

from __future__ import annotations

import os
from datetime import datetime
from datetime import timezone
from typing import Any
from typing import Mapping
from typing import Optional

from pydantic import BaseModel

from hello_world.utils import json_response
from hello_world.utils.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    set_request_context_from_invocation,
)

configure_logging()
logger = get_logger(__name__)


class HelloSchema(BaseModel):
    """Hello response body."""

    message: str
    stage: Optional[str]
    region: Optional[str]
    app: Optional[str]
    timestamp: str


def build_greeting(now: Optional[datetime] = None) -> HelloSchema:
    """Describe the deployment this function runs in."""
    now = now or datetime.now(timezone.utc)
    return HelloSchema(
        message="Hello World",
        stage=os.getenv("STAGE"),
        region=os.getenv("REGION"),
        app=os.getenv("APP_NAME"),
        timestamp=now.isoformat().replace("+00:00", "Z"),
    )


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    set_request_context_from_invocation(event, context)
    try:
        greeting = build_greeting()
        logger.debug("Greeting built", extra={"stage": greeting.stage})
        return json_response(200, greeting)
    finally:
        clear_request_context()
