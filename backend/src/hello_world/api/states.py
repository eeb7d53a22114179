"""Lambda handler for the active states lookup."""

from __future__ import annotations

from typing import Any
from typing import Mapping
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from hello_world.db import fetch_active_states, get_engine
from hello_world.exceptions import DatabaseError
from hello_world.utils import error_response, json_response
from hello_world.utils.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    set_request_context_from_invocation,
)

configure_logging()
logger = get_logger(__name__)

STATES_FAILURE_MESSAGE = "Failed to fetch active states."


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Handle API Gateway request for active states."""

    set_request_context_from_invocation(event, context)
    try:
        return handle()
    finally:
        clear_request_context()


def handle(engine: Optional[Engine] = None) -> dict[str, Any]:
    """Query active states and return an API Gateway response."""

    try:
        states = _query_states(engine or get_engine())
        logger.info(f"Fetched {len(states)} active states", extra={"count": len(states)})
        return json_response(200, states)
    except Exception as exc:
        logger.exception("Failed to fetch active states")
        return error_response(500, STATES_FAILURE_MESSAGE, str(exc))


def _query_states(engine: Engine) -> list[dict[str, Any]]:
    try:
        return fetch_active_states(engine)
    except SQLAlchemyError as exc:
        # DBAPI errors keep the driver message on .orig
        message = str(getattr(exc, "orig", None) or exc)
        raise DatabaseError(message, detail=type(exc).__name__) from exc
