"""Database connection settings for the states function.

The connection secret is bound into the function environment as
``STATES_DB_SECRET`` at deploy time, so no Secrets Manager call is
made at runtime.
"""

from __future__ import annotations

import os
from typing import Any
from typing import Optional

from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.engine import URL

from hello_world.exceptions import IncompleteSecretError
from hello_world.exceptions import MalformedSecretError
from hello_world.services.secrets import parse_secret_json
from hello_world.settings import STATES_DB_SECRET
from hello_world.settings import require_setting

DEFAULT_PORT = 3306
DEFAULT_DATABASE = "states"
DRIVERNAME = "mysql+pymysql"
REQUIRED_FIELDS = ("host", "username", "password")


class StatesDbCredentials(BaseModel):
    """Connection fields carried by the states database secret."""

    host: str = Field(min_length=1)
    port: int = DEFAULT_PORT
    username: str = Field(min_length=1)
    password: str = Field(min_length=1, repr=False)
    database: str = DEFAULT_DATABASE


def load_credentials(setting: str = STATES_DB_SECRET) -> StatesDbCredentials:
    """Parse the states database secret from the environment.

    Raises:
        ConfigurationError: If the setting is missing.
        MalformedSecretError: If the value is not valid JSON, or a field
            has the wrong type.
        IncompleteSecretError: If host, username or password is missing.
    """
    payload = parse_secret_json(setting, require_setting(setting))
    try:
        return StatesDbCredentials.model_validate(payload)
    except PydanticValidationError as exc:
        missing = tuple(
            name
            for name in REQUIRED_FIELDS
            if any(error["loc"][:1] == (name,) for error in exc.errors())
        )
        if missing:
            raise IncompleteSecretError(setting, missing) from exc
        raise MalformedSecretError(setting) from exc


def get_database_url(credentials: Optional[StatesDbCredentials] = None) -> URL:
    """Build the SQLAlchemy URL for the states database."""

    credentials = credentials or load_credentials()
    return URL.create(
        DRIVERNAME,
        username=credentials.username,
        password=credentials.password,
        host=credentials.host,
        port=credentials.port,
        database=credentials.database,
    )


def get_connect_args() -> dict[str, Any]:
    """Return connection arguments for PyMySQL.

    TLS is enabled when ``DATABASE_SSL_CA`` names a CA bundle path.
    """
    ca_path = (os.getenv("DATABASE_SSL_CA") or "").strip()
    if not ca_path:
        return {}
    return {"ssl": {"ca": ca_path}}
