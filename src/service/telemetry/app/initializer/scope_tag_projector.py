from enum import Enum
import logging
from typing import Any, Optional, cast

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import MalformedValueError
from src.platform.metrics.enrichment_metrics import EnrichmentMetrics
from src.platform.observability.activity import ActivityTags
from src.service.telemetry.app.interface.i_ambient_context_provider import (
    IAmbientContextProvider,
)
from src.service.telemetry.app.interface.i_telemetry_initializer import ITelemetryInitializer
from src.service.telemetry.domain.ambient_scope import AmbientScope
from src.service.telemetry.domain.log_constants import LogConstants, ScopeKeys
from src.service.telemetry.domain.telemetry_record import RequestRecord, TelemetryRecord


def format_log_level(level: Any) -> str:
    if isinstance(level, Enum):
        return level.name
    if isinstance(level, int) and not isinstance(level, bool):
        level_name = logging.getLevelName(level)
        # Unregistered levels come back as "Level N"
        return str(level) if level_name.startswith('Level ') else level_name
    return str(level)


def parse_event_id(event_id: Any) -> int:
    if isinstance(event_id, bool):
        raise MalformedValueError(LogConstants.EVENT_ID_KEY, event_id)
    try:
        return int(event_id)
    except (TypeError, ValueError) as e:
        raise MalformedValueError(LogConstants.EVENT_ID_KEY, event_id) from e


def parse_bool(value: str) -> Optional[bool]:
    normalized = value.strip().lower()
    if normalized == 'true':
        return True
    if normalized == 'false':
        return False
    return None


class ScopeTagProjector(ITelemetryInitializer):
    """
    Projects the invocation's logging scope and the active span's tags onto a record.

    Scope values apply to every record emitted inside a function call. Span
    tags apply to request records only: traces and dependencies may be
    tracked after the function scope ended and must keep their own values.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        ambient_context_provider: IAmbientContextProvider,
        metrics: EnrichmentMetrics,
    ) -> None:
        self._reserved_tag_prefix = settings.RESERVED_TAG_PREFIX
        self._ambient_context_provider = ambient_context_provider
        self._metrics = metrics

    def initialize(self, record: Optional[TelemetryRecord]) -> None:
        if record is None:
            return
        self.project(
            record,
            self._ambient_context_provider.current_scope(),
            self._ambient_context_provider.current_activity_tags(),
        )

    def project(
        self,
        record: TelemetryRecord,
        scope: Optional[AmbientScope],
        activity_tags: Optional[ActivityTags],
    ) -> None:
        if scope:
            self._apply_scope(record, scope)

        if record.is_request() and activity_tags is not None:
            request = cast(RequestRecord, record)
            for key, value in activity_tags:
                # Well-known tags go to typed fields, internal ai_ tags are dropped
                if not self._try_apply_property(request, key, value) and not key.startswith(
                    self._reserved_tag_prefix
                ):
                    request.properties[key] = value

    def _apply_scope(self, record: TelemetryRecord, scope: AmbientScope) -> None:
        properties = record.properties

        if (invocation_id := scope.get_str(ScopeKeys.FUNCTION_INVOCATION_ID)) is not None:
            properties[LogConstants.INVOCATION_ID_KEY] = invocation_id

        if function_name := scope.get_str(ScopeKeys.FUNCTION_NAME):
            record.context.operation_name = function_name

        if (category := scope.get_str(LogConstants.CATEGORY_NAME_KEY)) is not None:
            properties[LogConstants.CATEGORY_NAME_KEY] = category

        if (log_level := scope.get(LogConstants.LOG_LEVEL_KEY)) is not None:
            properties[LogConstants.LOG_LEVEL_KEY] = format_log_level(log_level)

        if (raw_event_id := scope.get(LogConstants.EVENT_ID_KEY)) is not None:
            try:
                event_id = parse_event_id(raw_event_id)
            except MalformedValueError as e:
                self._metrics.record_field_skipped(field=e.field)
            else:
                # 0 is the "no event id" sentinel
                if event_id > 0:
                    properties[LogConstants.EVENT_ID_KEY] = str(event_id)

        if (event_name := scope.get_str(LogConstants.EVENT_NAME_KEY)) is not None:
            properties[LogConstants.EVENT_NAME_KEY] = event_name

    def _try_apply_property(self, request: RequestRecord, key: str, value: str) -> bool:
        """
        Returns:
            True if the tag was applied to a typed field, otherwise False
        """
        if key == LogConstants.NAME_KEY:
            request.context.operation_name = value
            request.name = value
            return True

        if key == LogConstants.SUCCEEDED_KEY:
            success = parse_bool(value)
            if success is None:
                self._metrics.record_field_skipped(field=LogConstants.SUCCEEDED_KEY)
                return False
            # The function's own result wins over whatever the response code implied
            request.success = success
            request.properties.pop(LogConstants.SUCCEEDED_KEY, None)
            return True

        if key == LogConstants.CLIENT_IP_KEY:
            request.context.ip = value
            return True

        return False
