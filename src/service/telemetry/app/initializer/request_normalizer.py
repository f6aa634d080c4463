from typing import Optional, cast
from urllib.parse import unquote, urlsplit, urlunsplit

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import MalformedValueError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.enrichment_metrics import EnrichmentMetrics
from src.service.telemetry.app.interface.i_telemetry_initializer import ITelemetryInitializer
from src.service.telemetry.domain.log_constants import LogConstants
from src.service.telemetry.domain.telemetry_record import RequestRecord, TelemetryRecord


NON_HTTP_RESPONSE_CODE = '0'


def extract_http_method(request_name: str) -> Optional[str]:
    """App Insights names requests 'VERB /path'; return the VERB."""
    verb_end = request_name.find(' ')
    if verb_end > 0:
        return request_name[:verb_end]
    return None


def strip_query(url: str) -> str:
    return url.split('?', 1)[0].split('#', 1)[0]


class RequestNormalizer(ITelemetryInitializer):
    """
    Changes properties of request telemetry to match what Functions expects.

    HTTP-triggered invocations carry a url; everything else the host tracks as
    a request (queue, timer, ...) does not, and only gets the response code
    default and the SDK version.
    """

    def __init__(self, *, settings: Settings, metrics: EnrichmentMetrics) -> None:
        self._sdk_version = settings.SDK_VERSION
        self._placeholder_host = settings.PLACEHOLDER_HOST
        self._metrics = metrics

    def initialize(self, record: Optional[TelemetryRecord]) -> None:
        if record is None or not record.is_request():
            return
        self.normalize(cast(RequestRecord, record))

    def normalize(self, request: RequestRecord) -> None:
        first_pass = not request.normalized
        request.normalized = True
        request.context.sdk_version = self._sdk_version

        # No code means this was not an HttpRequest
        if not request.response_code:
            request.response_code = NON_HTTP_RESPONSE_CODE

        if request.url is None:
            return

        # A later stage may rename the request; deriving again would read that name
        if first_pass and LogConstants.HTTP_METHOD_KEY not in request.properties and request.name:
            if method := extract_http_method(request.name):
                request.properties[LogConstants.HTTP_METHOD_KEY] = method

        try:
            sanitized_url, path = self._sanitize_url(request.url)
        except MalformedValueError as e:
            Logger.base.warning(f'[TELEMETRY] {e.field} skipped: url could not be parsed')
            self._metrics.record_field_skipped(field=e.field)
            # Query strings may hold secrets; drop them even when the url is unusable
            request.url = strip_query(request.url)
            return

        if LogConstants.HTTP_PATH_KEY not in request.properties:
            request.properties[LogConstants.HTTP_PATH_KEY] = path

        request.url = sanitized_url

    def _sanitize_url(self, url: str) -> tuple[str, str]:
        """
        Returns:
            (url with placeholder host and no query/fragment, decoded path)

        Raises:
            MalformedValueError: url is not absolute or its authority is invalid
        """
        try:
            parts = urlsplit(url)
            port = parts.port
        except ValueError as e:
            raise MalformedValueError('url', '<redacted>') from e

        if not parts.scheme or not parts.netloc:
            raise MalformedValueError('url', '<redacted>')

        host = self._placeholder_host if port is None else f'{self._placeholder_host}:{port}'
        path = parts.path or '/'
        return urlunsplit((parts.scheme, host, path, '', '')), unquote(path)
