"""Database access for the states lookup."""

from hello_world.db.engine import clear_engine_cache
from hello_world.db.engine import get_engine
from hello_world.db.queries import fetch_active_states

__all__ = [
    "clear_engine_cache",
    "fetch_active_states",
    "get_engine",
]
