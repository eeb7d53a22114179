"""Shared response utilities for Lambda handlers."""

from __future__ import annotations

import json
from dataclasses import asdict
from dataclasses import is_dataclass
from typing import Any
from typing import Optional

from pydantic import BaseModel

JSON_CONTENT_TYPE = "application/json"


def get_security_headers() -> dict[str, str]:
    """Get security headers for all responses.

    SECURITY: These headers protect against common web vulnerabilities:
    - X-Content-Type-Options: Prevents MIME type sniffing
    - X-Frame-Options: Prevents clickjacking
    - Cache-Control: Prevents caching of partner data at the edge

    Returns:
        Dictionary of security headers.
    """
    return {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Cache-Control": "no-store, no-cache, must-revalidate",
    }


def json_response(
    status_code: int,
    body: Any,
    headers: Optional[dict[str, str]] = None,
) -> dict[str, Any]:
    """Create a JSON API Gateway response.

    Args:
        status_code: HTTP status code.
        body: Response body (dict, list, Pydantic model, or dataclass).
        headers: Optional additional headers to include.

    Returns:
        API Gateway response dictionary.
    """
    response_headers = {"content-type": JSON_CONTENT_TYPE}
    response_headers.update(get_security_headers())
    if headers:
        response_headers.update(headers)

    return {
        "statusCode": status_code,
        "headers": response_headers,
        "body": json.dumps(_serialize_body(body), default=str),
    }


def _serialize_body(body: Any) -> Any:
    """Serialize response body to JSON-compatible format."""
    if isinstance(body, BaseModel):
        return body.model_dump()

    if is_dataclass(body) and not isinstance(body, type):
        return asdict(body)

    return body


def error_response(
    status_code: int,
    message: str,
    error: Optional[str],
) -> dict[str, Any]:
    """Create an error response with a ``message``/``error`` body.

    Args:
        status_code: HTTP status code.
        message: Stable, user-facing message for the failure kind.
        error: Underlying error text; ``"Unknown error"`` when empty.

    Returns:
        API Gateway response dictionary.
    """
    return json_response(
        status_code,
        {"message": message, "error": error or "Unknown error"},
    )
