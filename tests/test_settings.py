"""Tests for environment-backed settings."""

from __future__ import annotations

import pytest

from hello_world.exceptions import ConfigurationError
from hello_world.settings import (
    get_partner_api_timeout,
    optional_setting,
    require_setting,
)


class TestRequireSetting:
    """Tests for require_setting."""

    def test_returns_value(self, monkeypatch) -> None:
        monkeypatch.setenv('COUNTRIES_API_URL', 'https://partner.example.com')
        assert require_setting('COUNTRIES_API_URL') == 'https://partner.example.com'

    def test_strips_whitespace(self, monkeypatch) -> None:
        monkeypatch.setenv('COUNTRIES_API_URL', '  https://partner.example.com\n')
        assert require_setting('COUNTRIES_API_URL') == 'https://partner.example.com'

    @pytest.mark.parametrize('value', [None, '', '   '])
    def test_missing_or_blank_raises(self, monkeypatch, value) -> None:
        if value is not None:
            monkeypatch.setenv('COUNTRIES_API_URL', value)
        with pytest.raises(ConfigurationError) as exc_info:
            require_setting('COUNTRIES_API_URL')
        assert exc_info.value.config_name == 'COUNTRIES_API_URL'

    def test_reads_environment_on_every_call(self, monkeypatch) -> None:
        with pytest.raises(ConfigurationError):
            require_setting('COUNTRIES_API_URL')
        monkeypatch.setenv('COUNTRIES_API_URL', 'https://partner.example.com')
        assert require_setting('COUNTRIES_API_URL')


def test_optional_setting_blank_is_none(monkeypatch) -> None:
    monkeypatch.setenv('APP_NAME', ' ')
    assert optional_setting('APP_NAME') is None


class TestPartnerApiTimeout:
    """Tests for get_partner_api_timeout."""

    def test_unset_means_no_deadline(self) -> None:
        assert get_partner_api_timeout() is None

    def test_override(self, monkeypatch) -> None:
        monkeypatch.setenv('PARTNER_API_TIMEOUT', '3')
        assert get_partner_api_timeout() == 3.0

    @pytest.mark.parametrize('value', ['abc', '0', '-1'])
    def test_invalid_values_are_ignored(self, monkeypatch, value) -> None:
        monkeypatch.setenv('PARTNER_API_TIMEOUT', value)
        assert get_partner_api_timeout() is None
