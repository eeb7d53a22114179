"""Partner API credentials with a process-lifetime cache.

Credentials are read from a Secrets Manager entry whose name comes from
``COUNTRIES_SECRET_NAME``. The first successful fetch is kept for the
life of the Lambda execution environment; there is no TTL and no
refresh, so a rotated secret is only picked up by a fresh instance.
Failed fetches are never cached.
"""

from __future__ import annotations

import base64
import threading
from typing import Callable
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError as PydanticValidationError

from hello_world.exceptions import IncompleteSecretError
from hello_world.services.secrets import SecretValue
from hello_world.services.secrets import fetch_secret
from hello_world.services.secrets import parse_secret_json
from hello_world.settings import COUNTRIES_SECRET_NAME
from hello_world.settings import require_setting
from hello_world.utils.logging import get_logger
from hello_world.utils.logging import mask_pii

logger = get_logger(__name__)

REQUIRED_FIELDS = ("username", "password")

SecretFetcher = Callable[[str], Optional[SecretValue]]


class Credential(BaseModel):
    """Basic-auth credential pair for the partner API."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(min_length=1)
    password: str = Field(min_length=1, repr=False)


class PartnerCredentialProvider:
    """Resolve and cache the partner API credential.

    The cached slot is private to the provider. Concurrent callers in
    one process share a lock so only one of them performs the fetch.
    """

    def __init__(
        self,
        secret_setting: str = COUNTRIES_SECRET_NAME,
        fetch: Optional[SecretFetcher] = None,
    ) -> None:
        self._secret_setting = secret_setting
        self._fetch = fetch or fetch_secret
        self._cached: Optional[Credential] = None
        self._lock = threading.Lock()

    def get_credentials(self) -> Credential:
        """Return the cached credential, fetching it on first use.

        Raises:
            ConfigurationError: If the secret name setting is missing.
            EmptySecretError: If the secret has no payload.
            MalformedSecretError: If the payload is not valid JSON.
            IncompleteSecretError: If username or password is missing.
        """
        cached = self._cached
        if cached is not None:
            return cached

        with self._lock:
            if self._cached is None:
                self._cached = self._load()
            return self._cached

    def build_auth_header(self) -> str:
        """Return an HTTP Basic ``Authorization`` header value."""
        credential = self.get_credentials()
        raw = f"{credential.username}:{credential.password}".encode("utf-8")
        return f"Basic {base64.b64encode(raw).decode('ascii')}"

    def reset(self) -> None:
        """Forget the cached credential (useful in tests)."""
        with self._lock:
            self._cached = None

    def _load(self) -> Credential:
        secret_name = require_setting(self._secret_setting)
        logger.info("Fetching partner API credentials", extra={"secret": secret_name})
        payload = parse_secret_json(secret_name, self._fetch(secret_name))

        try:
            credential = Credential.model_validate(payload)
        except PydanticValidationError as exc:
            raise IncompleteSecretError(secret_name, REQUIRED_FIELDS) from exc

        logger.info(
            "Partner API credentials cached",
            extra={"username": mask_pii(credential.username)},
        )
        return credential


_default_provider = PartnerCredentialProvider()


def get_default_provider() -> PartnerCredentialProvider:
    """Return the provider shared by every invocation in this process."""
    return _default_provider
