"""Tests for the partner API client and payload normalization."""

from __future__ import annotations

import io
import json
import urllib.error

import pytest

from hello_world.exceptions import TransportError
from hello_world.services.partner_api import (
    UpstreamResponse,
    fetch_json,
    normalize_countries,
)

URL = 'https://partner.example.com/countries'


def _fake_response(mocker, status: int, body: bytes):
    response = mocker.MagicMock()
    response.status = status
    response.read.return_value = body
    response.__enter__.return_value = response
    return response


class TestFetchJson:
    """Tests for fetch_json."""

    def test_sends_auth_and_accept_headers(self, mocker) -> None:
        urlopen = mocker.patch(
            'urllib.request.urlopen',
            return_value=_fake_response(mocker, 200, b'[]'),
        )

        fetch_json(URL, 'Basic abc=', timeout=5)

        request = urlopen.call_args.args[0]
        assert request.full_url == URL
        assert request.get_method() == 'GET'
        assert request.get_header('Authorization') == 'Basic abc='
        assert request.get_header('Accept') == 'application/json'
        assert urlopen.call_args.kwargs['timeout'] == 5

    def test_no_timeout_keeps_socket_default(self, mocker) -> None:
        urlopen = mocker.patch(
            'urllib.request.urlopen',
            return_value=_fake_response(mocker, 200, b'[]'),
        )

        fetch_json(URL, 'Basic abc=')

        assert 'timeout' not in urlopen.call_args.kwargs

    def test_returns_status_and_body(self, mocker) -> None:
        mocker.patch(
            'urllib.request.urlopen',
            return_value=_fake_response(mocker, 200, b'[{"code": "US"}]'),
        )

        response = fetch_json(URL, 'Basic abc=', timeout=5)

        assert response.ok
        assert response.status == 200
        assert response.json() == [{'code': 'US'}]

    def test_http_error_is_returned_not_raised(self, mocker) -> None:
        mocker.patch(
            'urllib.request.urlopen',
            side_effect=urllib.error.HTTPError(
                URL, 503, 'Service Unavailable', None, io.BytesIO(b'down')
            ),
        )

        response = fetch_json(URL, 'Basic abc=', timeout=5)

        assert response == UpstreamResponse(status=503, body='down')
        assert not response.ok

    def test_url_error_raises_transport_error(self, mocker) -> None:
        mocker.patch(
            'urllib.request.urlopen',
            side_effect=urllib.error.URLError('network error'),
        )

        with pytest.raises(TransportError) as exc_info:
            fetch_json(URL, 'Basic abc=', timeout=5)
        assert exc_info.value.message == 'network error'
        assert exc_info.value.url == URL

    def test_timeout_raises_transport_error(self, mocker) -> None:
        mocker.patch('urllib.request.urlopen', side_effect=TimeoutError('timed out'))

        with pytest.raises(TransportError, match='timed out'):
            fetch_json(URL, 'Basic abc=', timeout=5)


class TestUpstreamResponse:
    """Tests for UpstreamResponse."""

    @pytest.mark.parametrize('status', [200, 201, 204, 299])
    def test_success_statuses(self, status) -> None:
        assert UpstreamResponse(status=status, body='').ok

    @pytest.mark.parametrize('status', [199, 301, 404, 500, 503])
    def test_failure_statuses(self, status) -> None:
        assert not UpstreamResponse(status=status, body='').ok

    def test_json_raises_for_invalid_body(self) -> None:
        with pytest.raises(ValueError):
            UpstreamResponse(status=200, body='<html>').json()


class TestNormalizeCountries:
    """Tests for normalize_countries."""

    def test_array_passes_through(self) -> None:
        payload = [{'code': 'US'}, {'code': 'IN'}]
        assert normalize_countries(payload) == payload

    def test_countries_member_is_unwrapped(self) -> None:
        assert normalize_countries({'countries': ['UK']}) == ['UK']

    def test_other_object_passes_through(self) -> None:
        assert normalize_countries({'value': 42}) == {'value': 42}

    def test_non_array_countries_member_passes_through(self) -> None:
        payload = {'countries': 'UK'}
        assert normalize_countries(payload) == payload

    @pytest.mark.parametrize('payload', [None, 42, 'UK', True])
    def test_scalars_pass_through(self, payload) -> None:
        assert normalize_countries(payload) == payload

    @pytest.mark.parametrize(
        'payload, expected',
        [
            ([{'code': 'US'}, {'code': 'IN'}], [{'code': 'US'}, {'code': 'IN'}]),
            ({'countries': ['UK']}, ['UK']),
        ],
    )
    def test_normalized_output_survives_json(self, payload, expected) -> None:
        normalized = normalize_countries(payload)
        assert json.loads(json.dumps(normalized)) == expected
