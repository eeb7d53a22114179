"""Queries for the states lookup."""

from __future__ import annotations

from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Engine

ACTIVE_STATUS = 1

ACTIVE_STATES_QUERY = text("SELECT * FROM States WHERE status = :status")


def fetch_active_states(engine: Engine) -> list[dict[str, Any]]:
    """Return every row of ``States`` whose status is active."""

    with engine.connect() as connection:
        result = connection.execute(ACTIVE_STATES_QUERY, {"status": ACTIVE_STATUS})
        return [dict(row._mapping) for row in result]
