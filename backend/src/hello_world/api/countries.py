"""Lambda handler for the countries partner-API proxy.

Routed as ``GET /contries`` on the HTTP API. The request carries no
parameters; every invocation fetches the partner country list with
HTTP Basic credentials from Secrets Manager and returns it as JSON.
"""

from __future__ import annotations

import time
from typing import Any
from typing import Callable
from typing import Mapping
from typing import Optional

from hello_world.services.partner_api import UpstreamResponse
from hello_world.services.partner_api import fetch_json
from hello_world.services.partner_api import normalize_countries
from hello_world.services.partner_credentials import PartnerCredentialProvider
from hello_world.services.partner_credentials import get_default_provider
from hello_world.settings import COUNTRIES_API_URL
from hello_world.settings import get_partner_api_timeout
from hello_world.settings import require_setting
from hello_world.utils import error_response, json_response
from hello_world.utils.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    log_lambda_event,
    log_response,
    set_request_context_from_invocation,
)

configure_logging()
logger = get_logger(__name__)

UPSTREAM_FAILURE_MESSAGE = "Failed to fetch countries from partner API."
UNEXPECTED_ERROR_MESSAGE = "Unexpected error retrieving countries."

Fetcher = Callable[[str, str, Optional[float]], UpstreamResponse]


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Handle API Gateway request for the country list."""

    set_request_context_from_invocation(event, context)
    log_lambda_event(logger, event)
    start = time.perf_counter()
    try:
        response = handle()
        log_response(
            logger,
            response["statusCode"],
            (time.perf_counter() - start) * 1000,
        )
        return response
    finally:
        clear_request_context()


def handle(
    provider: Optional[PartnerCredentialProvider] = None,
    fetch: Optional[Fetcher] = None,
) -> dict[str, Any]:
    """Proxy the partner API and return an API Gateway response.

    Args:
        provider: Credential provider; defaults to the process-wide one.
        fetch: Upstream fetcher; defaults to ``fetch_json``.

    Returns:
        200 with the normalized payload, the upstream status for
        non-2xx responses, or 500 for any other failure.
    """
    provider = provider or get_default_provider()
    fetch = fetch or fetch_json

    try:
        url = require_setting(COUNTRIES_API_URL)
        authorization = provider.build_auth_header()
        upstream = fetch(url, authorization, get_partner_api_timeout())

        if not upstream.ok:
            logger.warning(
                f"Partner API responded with status {upstream.status}",
                extra={"status": upstream.status},
            )
            return json_response(
                upstream.status,
                {"message": UPSTREAM_FAILURE_MESSAGE, "status": upstream.status},
            )

        countries = normalize_countries(upstream.json())
        return json_response(200, countries)
    except Exception as exc:
        logger.exception("Unexpected error retrieving countries")
        return error_response(500, UNEXPECTED_ERROR_MESSAGE, str(exc))
