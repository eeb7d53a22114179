"""Pytest configuration and fixtures for backend and infra tests.

This module provides shared fixtures for testing the Lambda handlers,
including a clean environment, API Gateway events and a fake Lambda
context.
"""

from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace
from uuid import uuid4

import pytest

# Add backend source and the repository root (for infra) to path for imports
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / 'backend' / 'src'))
sys.path.insert(0, str(ROOT))

MANAGED_ENV_VARS = (
    'COUNTRIES_API_URL',
    'COUNTRIES_SECRET_NAME',
    'STATES_DB_SECRET',
    'PARTNER_API_TIMEOUT',
    'DATABASE_SSL_CA',
    'STAGE',
    'REGION',
    'APP_NAME',
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without any of the application's settings."""
    for name in MANAGED_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_caches():
    """Reset process-wide caches around every test."""
    from hello_world.db.engine import clear_engine_cache
    from hello_world.services.aws_clients import clear_client_cache
    from hello_world.services.partner_credentials import get_default_provider

    get_default_provider().reset()
    clear_client_cache()
    clear_engine_cache()
    yield
    get_default_provider().reset()
    clear_client_cache()
    clear_engine_cache()


# --- API Event Fixtures ---


@pytest.fixture
def http_api_event() -> dict:
    """Base HTTP API (payload format 2.0) event structure."""
    return {
        'version': '2.0',
        'routeKey': 'GET /contries',
        'rawPath': '/contries',
        'rawQueryString': '',
        'headers': {},
        'requestContext': {
            'requestId': str(uuid4()),
            'http': {'method': 'GET', 'path': '/contries'},
        },
        'isBase64Encoded': False,
    }


@pytest.fixture
def lambda_context() -> SimpleNamespace:
    """Minimal stand-in for the Lambda context object."""
    return SimpleNamespace(
        aws_request_id=str(uuid4()),
        function_name='test-function',
    )


# --- Partner API Fixtures ---


@pytest.fixture
def partner_env(monkeypatch):
    """Configure the countries function settings."""
    monkeypatch.setenv('COUNTRIES_API_URL', 'https://partner.example.com/countries')
    monkeypatch.setenv('COUNTRIES_SECRET_NAME', 'countries/partner')


class FakeSecretStore:
    """Counts fetches and returns a fixed payload per secret name."""

    def __init__(self, value):
        self.value = value
        self.calls: list[str] = []

    def __call__(self, secret_name: str):
        self.calls.append(secret_name)
        if isinstance(self.value, Exception):
            raise self.value
        return self.value


@pytest.fixture
def secret_store() -> FakeSecretStore:
    return FakeSecretStore('{"username": "abcd", "password": "efh"}')


@pytest.fixture
def make_secret_store():
    """Factory for secret stores returning a custom payload."""
    return FakeSecretStore
