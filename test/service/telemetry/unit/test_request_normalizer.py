"""
Unit tests for RequestNormalizer

Given/When/Then per case: HTTP-triggered requests carry a url, queue/timer
triggered requests do not.
"""

from unittest.mock import MagicMock

import pytest

from src.platform.config.core_setting import Settings
from src.service.telemetry.app.initializer.request_normalizer import (
    RequestNormalizer,
    extract_http_method,
    strip_query,
)
from src.service.telemetry.domain.telemetry_record import RequestRecord, TraceRecord


@pytest.fixture
def normalizer(settings: Settings, mock_metrics: MagicMock) -> RequestNormalizer:
    return RequestNormalizer(settings=settings, metrics=mock_metrics)


@pytest.mark.unit
class TestExtractHttpMethod:
    @pytest.mark.parametrize(
        'name,expected',
        [
            ('GET /orders/5', 'GET'),
            ('POST /api/Orders', 'POST'),
            (' GET /orders', None),  # space at position 0
            ('Orders', None),
            ('', None),
        ],
    )
    def test_extract(self, name: str, expected: str | None) -> None:
        assert extract_http_method(name) == expected


@pytest.mark.unit
class TestRequestNormalizer:
    def test_non_request_records_are_untouched(self, normalizer: RequestNormalizer) -> None:
        record = TraceRecord(message='hello')

        normalizer.initialize(record)

        assert record.context.sdk_version is None
        assert record.properties == {}

    def test_non_http_request_gets_code_zero_and_sdk_version(
        self, normalizer: RequestNormalizer
    ) -> None:
        request = RequestRecord(name='ProcessQueueMessage')

        normalizer.initialize(request)

        assert request.response_code == '0'
        assert request.context.sdk_version == '0.0.0'
        assert request.url is None
        assert 'HttpMethod' not in request.properties
        assert 'HttpPath' not in request.properties

    def test_existing_response_code_is_kept(self, normalizer: RequestNormalizer) -> None:
        request = RequestRecord(name='GET /orders', response_code='404')

        normalizer.initialize(request)

        assert request.response_code == '404'

    def test_http_request_is_normalized(self, normalizer: RequestNormalizer) -> None:
        """
        Given: An HTTP request with a real host and a query string
        When: Normalized
        Then: Host is replaced, method and path extracted, query string removed
        """
        request = RequestRecord(
            name='GET /orders/5',
            response_code='200',
            url='https://ordersapp.azurewebsites.net/api/orders/5?code=s3cr3t&x=1',
        )

        normalizer.initialize(request)

        assert request.url == 'https://hello-world/api/orders/5'
        assert request.properties['HttpMethod'] == 'GET'
        assert request.properties['HttpPath'] == '/api/orders/5'
        assert all('s3cr3t' not in value for value in request.properties.values())

    def test_port_is_kept_and_credentials_dropped(self, normalizer: RequestNormalizer) -> None:
        request = RequestRecord(name='GET /', url='http://user:pw@localhost:7071/api/health')

        normalizer.initialize(request)

        assert request.url == 'http://hello-world:7071/api/health'

    def test_path_is_decoded_and_fragment_removed(self, normalizer: RequestNormalizer) -> None:
        request = RequestRecord(name='GET /', url='https://host/api/my%20orders#frag')

        normalizer.initialize(request)

        assert request.properties['HttpPath'] == '/api/my orders'
        assert request.url == 'https://hello-world/api/my%20orders'

    def test_empty_path_becomes_root(self, normalizer: RequestNormalizer) -> None:
        request = RequestRecord(name='GET /', url='https://host?x=1')

        normalizer.initialize(request)

        assert request.url == 'https://hello-world/'
        assert request.properties['HttpPath'] == '/'

    def test_preset_method_and_path_are_not_replaced(self, normalizer: RequestNormalizer) -> None:
        request = RequestRecord(
            name='GET /orders',
            url='https://host/orders',
            properties={'HttpMethod': 'PATCH', 'HttpPath': '/custom'},
        )

        normalizer.initialize(request)

        assert request.properties['HttpMethod'] == 'PATCH'
        assert request.properties['HttpPath'] == '/custom'

    def test_malformed_url_still_loses_query_string(
        self, normalizer: RequestNormalizer, mock_metrics: MagicMock
    ) -> None:
        """
        Given: A url whose port is not numeric
        When: Normalized
        Then: The url field is skipped but the query is dropped; other fields still apply
        """
        request = RequestRecord(name='GET /orders', url='https://host:notaport/orders?sig=abc')

        normalizer.initialize(request)

        assert request.url == 'https://host:notaport/orders'
        assert request.properties['HttpMethod'] == 'GET'
        assert 'HttpPath' not in request.properties
        assert request.response_code == '0'
        mock_metrics.record_field_skipped.assert_called_once_with(field='url')

    def test_relative_url_is_treated_as_malformed(self, normalizer: RequestNormalizer) -> None:
        request = RequestRecord(name='GET /orders', url='/orders?token=abc')

        normalizer.initialize(request)

        assert request.url == '/orders'

    def test_method_is_derived_from_the_name_seen_on_first_pass(
        self, normalizer: RequestNormalizer
    ) -> None:
        request = RequestRecord(name='Orders', url='https://host/orders')

        normalizer.initialize(request)
        request.name = 'Process Order'
        normalizer.initialize(request)

        assert request.normalized is True
        assert 'HttpMethod' not in request.properties

    def test_normalizing_twice_is_stable(self, normalizer: RequestNormalizer) -> None:
        request = RequestRecord(name='POST /orders', url='https://host/orders?a=1')

        normalizer.initialize(request)
        once = (request.url, dict(request.properties), request.response_code)
        normalizer.initialize(request)

        assert (request.url, dict(request.properties), request.response_code) == once


@pytest.mark.unit
def test_strip_query() -> None:
    assert strip_query('https://h/p?q=1#f') == 'https://h/p'
    assert strip_query('https://h/p#f?q') == 'https://h/p'
