"""Secrets Manager helpers.

Only the raw fetch lives here. Parsing and caching belong to the
callers, which know what shape their secret must have.
"""

from __future__ import annotations

import json
from typing import Any
from typing import Optional
from typing import Union

from hello_world.exceptions import EmptySecretError
from hello_world.exceptions import MalformedSecretError
from hello_world.services.aws_clients import get_secretsmanager_client

SecretValue = Union[str, bytes]


def fetch_secret(secret_name: str) -> Optional[SecretValue]:
    """Fetch a secret value from AWS Secrets Manager.

    Returns ``SecretString`` when present, otherwise ``SecretBinary``
    (raw bytes, already base64-decoded by botocore), otherwise None.
    """
    client = get_secretsmanager_client()
    response = client.get_secret_value(SecretId=secret_name)
    secret_str = response.get("SecretString")
    if secret_str:
        return secret_str
    return response.get("SecretBinary") or None


def decode_secret_payload(value: Optional[SecretValue]) -> Optional[str]:
    """Return a secret payload as text, decoding binary content as UTF-8."""
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8")
    return value


def parse_secret_json(secret_name: str, value: Optional[SecretValue]) -> Any:
    """Decode and parse a secret payload as JSON.

    Raises:
        EmptySecretError: If the payload is missing or empty.
        MalformedSecretError: If the payload is not valid JSON.
    """
    try:
        secret_str = decode_secret_payload(value)
    except UnicodeDecodeError as exc:
        raise MalformedSecretError(secret_name) from exc
    if not secret_str:
        raise EmptySecretError(secret_name)

    try:
        return json.loads(secret_str)
    except ValueError as exc:
        raise MalformedSecretError(secret_name) from exc
