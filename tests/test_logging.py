"""Tests for structured logging utilities."""

from __future__ import annotations

import json
import logging
from types import SimpleNamespace

from hello_world.utils.logging import (
    StructuredLogFormatter,
    clear_request_context,
    correlation_id,
    get_logger,
    mask_pii,
    request_id,
    set_request_context,
    set_request_context_from_invocation,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name='hello_world.test',
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg='hello %s',
        args=('world',),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestMaskPii:
    """Tests for mask_pii."""

    def test_masks_long_value(self) -> None:
        assert mask_pii('partner-user') == 'part***'

    def test_masks_short_value(self) -> None:
        assert mask_pii('abc') == 'a***'

    def test_masks_empty_value(self) -> None:
        assert mask_pii('') == '***'


class TestStructuredLogFormatter:
    """Tests for StructuredLogFormatter."""

    def teardown_method(self) -> None:
        clear_request_context()

    def test_formats_json(self) -> None:
        payload = json.loads(StructuredLogFormatter().format(_record()))
        assert payload['level'] == 'INFO'
        assert payload['logger'] == 'hello_world.test'
        assert payload['message'] == 'hello world'

    def test_includes_request_context(self) -> None:
        set_request_context(req_id='req-1', corr_id='corr-1')
        payload = json.loads(StructuredLogFormatter().format(_record()))
        assert payload['request_id'] == 'req-1'
        assert payload['correlation_id'] == 'corr-1'

    def test_includes_extra_context(self) -> None:
        record = _record(context={'status': 503})
        payload = json.loads(StructuredLogFormatter().format(record))
        assert payload['extra'] == {'status': 503}


class TestContextLogger:
    """Tests for ContextLogger."""

    def test_merges_adapter_and_call_extras(self, caplog) -> None:
        logger = get_logger('hello_world.test', function='countries')
        with caplog.at_level(logging.INFO, logger='hello_world.test'):
            logger.info('fetched', extra={'count': 3})
        assert caplog.records[-1].context == {'function': 'countries', 'count': 3}


class TestRequestContext:
    """Tests for request context helpers."""

    def test_from_invocation(self) -> None:
        context = SimpleNamespace(aws_request_id='lambda-req')
        event = {'requestContext': {'requestId': 'api-req'}}
        set_request_context_from_invocation(event, context)
        assert request_id.get() == 'lambda-req'
        assert correlation_id.get() == 'api-req'
        clear_request_context()
        assert request_id.get() == ''
        assert correlation_id.get() == ''

    def test_from_invocation_without_context(self) -> None:
        set_request_context_from_invocation(None, None)
        assert request_id.get() == ''
