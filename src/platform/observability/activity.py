"""
Bridge between the active OpenTelemetry span and telemetry enrichment.

The span that is current on this thread/task plays the role of the active
activity: its attributes are the tags projected onto request telemetry.
"""

from collections.abc import Sequence
from typing import Any

from opentelemetry import trace


ActivityTags = Sequence[tuple[str, str]]


def _stringify_attribute(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (list, tuple)):
        return ','.join(_stringify_attribute(item) for item in value)
    return str(value)


def activity_tags_from_span(span: trace.Span) -> ActivityTags | None:
    """
    Args:
        span: Any OpenTelemetry span (SDK spans expose `attributes`)

    Returns:
        Ordered (key, value) pairs, or None when the span is not a real, active span
    """
    if not span.get_span_context().is_valid:
        return None

    attributes = getattr(span, 'attributes', None)
    if not attributes:
        return ()

    return tuple((str(key), _stringify_attribute(value)) for key, value in attributes.items())


def current_activity_tags() -> ActivityTags | None:
    return activity_tags_from_span(trace.get_current_span())
