"""Outbound calls to the countries partner API.

A single GET per invocation, no retries. HTTP error statuses come back
as ordinary ``UpstreamResponse`` values; only failures below the HTTP
layer (DNS, connection refused, timeouts) raise ``TransportError``.
"""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any
from typing import Optional

from hello_world.exceptions import TransportError
from hello_world.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class UpstreamResponse:
    """Status and raw body of a partner API response."""

    status: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        return json.loads(self.body)


def fetch_json(
    url: str, authorization: str, timeout: Optional[float] = None
) -> UpstreamResponse:
    """GET ``url`` with Basic auth and ``Accept: application/json``.

    Args:
        url: Partner API URL.
        authorization: Value for the ``Authorization`` header.
        timeout: Socket timeout in seconds; None keeps the socket default.

    Returns:
        The upstream status and body, for success and error statuses alike.

    Raises:
        TransportError: If no HTTP response was received.
    """
    request = urllib.request.Request(
        url,
        headers={
            "Authorization": authorization,
            "Accept": "application/json",
        },
        method="GET",
    )

    kwargs: dict[str, Any] = {}
    if timeout is not None:
        kwargs["timeout"] = timeout

    try:
        with urllib.request.urlopen(request, **kwargs) as resp:  # nosec B310 - URL comes from deploy-time config
            body = resp.read().decode("utf-8", errors="replace")
            return UpstreamResponse(status=resp.status, body=body)
    except urllib.error.HTTPError as exc:
        body = ""
        try:
            body = exc.read().decode("utf-8", errors="replace")
        except OSError:
            body = ""
        logger.warning(f"Partner API returned HTTP {exc.code}")
        return UpstreamResponse(status=exc.code, body=body)
    except urllib.error.URLError as exc:
        reason = exc.reason
        message = str(reason) if reason else str(exc)
        logger.warning(f"Partner API request failed: {message}")
        raise TransportError(message, url=url) from exc
    except OSError as exc:
        logger.warning(f"Partner API request failed: {type(exc).__name__}: {exc}")
        raise TransportError(str(exc) or type(exc).__name__, url=url) from exc


def normalize_countries(payload: Any) -> Any:
    """Coerce a partner payload into its canonical shape.

    - a JSON array is returned as-is;
    - an object whose ``countries`` member is an array yields that array;
    - anything else is passed through unchanged.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("countries"), list):
        return payload["countries"]
    return payload
