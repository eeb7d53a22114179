"""Database engine management.

Lambda runs one request at a time per execution environment, so the
engine opens a fresh connection per query and keeps none idle between
invocations.
"""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import NullPool

from hello_world.db.connection import get_connect_args
from hello_world.db.connection import get_database_url

# Module-level engine cache for reuse across Lambda invocations
_ENGINE_CACHE: dict[str, Engine] = {}


def get_engine(use_cache: bool = True) -> Engine:
    """Get or create the states database engine.

    Args:
        use_cache: Whether to reuse an engine from a previous invocation.

    Returns:
        A configured SQLAlchemy engine.
    """
    cache_key = "default"
    if use_cache and cache_key in _ENGINE_CACHE:
        return _ENGINE_CACHE[cache_key]

    engine = create_engine(
        get_database_url(),
        poolclass=NullPool,
        connect_args=get_connect_args(),
    )

    if use_cache:
        _ENGINE_CACHE[cache_key] = engine

    return engine


def clear_engine_cache() -> None:
    """Dispose and forget cached engines (useful in tests)."""
    for engine in _ENGINE_CACHE.values():
        engine.dispose()
    _ENGINE_CACHE.clear()
