from enum import StrEnum
from typing import Optional

import attrs


class RecordKind(StrEnum):
    TRACE = 'trace'
    REQUEST = 'request'
    DEPENDENCY = 'dependency'
    EVENT = 'event'
    EXCEPTION = 'exception'


@attrs.define
class TelemetryContext:
    """Context tags shared by every telemetry item (cloud, device, location, operation)"""

    role_name: Optional[str] = None
    role_instance: Optional[str] = None
    node_name: Optional[str] = None
    ip: Optional[str] = None
    operation_name: Optional[str] = None
    sdk_version: Optional[str] = None


@attrs.define
class TelemetryRecord:
    context: TelemetryContext = attrs.field(factory=TelemetryContext)
    properties: dict[str, str] = attrs.field(factory=dict)

    # Each variant pins its own kind; the base stands for generic traces
    kind: RecordKind = attrs.field(default=RecordKind.TRACE, init=False)

    def is_request(self) -> bool:
        return self.kind == RecordKind.REQUEST


@attrs.define
class TraceRecord(TelemetryRecord):
    message: str = ''
    severity_level: Optional[str] = None


@attrs.define
class EventRecord(TelemetryRecord):
    name: str = ''

    def __attrs_post_init__(self) -> None:
        self.kind = RecordKind.EVENT


@attrs.define
class ExceptionRecord(TelemetryRecord):
    exception_type: str = ''
    message: str = ''

    def __attrs_post_init__(self) -> None:
        self.kind = RecordKind.EXCEPTION


@attrs.define
class DependencyRecord(TelemetryRecord):
    name: str = ''
    type: Optional[str] = None
    target: Optional[str] = None
    data: Optional[str] = None
    success: Optional[bool] = None

    def __attrs_post_init__(self) -> None:
        self.kind = RecordKind.DEPENDENCY


@attrs.define
class RequestRecord(TelemetryRecord):
    """
    An inbound invocation. HTTP-triggered invocations carry a url; queue or
    timer triggered invocations are modeled as requests too but have none.
    """

    name: str = ''
    response_code: str = ''
    success: Optional[bool] = None
    url: Optional[str] = None

    # Set by the request normalizer; the display name is read for the method once
    normalized: bool = attrs.field(default=False, init=False)

    def __attrs_post_init__(self) -> None:
        self.kind = RecordKind.REQUEST
