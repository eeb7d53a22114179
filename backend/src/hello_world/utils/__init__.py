"""Utility modules for the backend application."""

from hello_world.utils.responses import error_response
from hello_world.utils.responses import json_response
from hello_world.utils.logging import (
    configure_logging,
    get_logger,
    mask_pii,
    set_request_context,
    clear_request_context,
)

__all__ = [
    "clear_request_context",
    "configure_logging",
    "error_response",
    "get_logger",
    "json_response",
    "mask_pii",
    "set_request_context",
]
