"""
Host entry point

Replaces the host's built-in telemetry initializers with the enrichment chain:
context → request normalization → scope and span tags.
"""

from collections.abc import Iterable
from typing import Optional

from src.platform.config.di import container, setup
from src.platform.logging.loguru_io import Logger
from src.service.telemetry.app.initializer.context_initializer import ContextInitializer
from src.service.telemetry.app.initializer.request_normalizer import RequestNormalizer
from src.service.telemetry.app.initializer.scope_tag_projector import ScopeTagProjector
from src.service.telemetry.app.interface.i_telemetry_initializer import ITelemetryInitializer
from src.service.telemetry.app.telemetry_pipeline import TelemetryPipeline


ENRICHMENT_INITIALIZER_TYPES: tuple[type[ITelemetryInitializer], ...] = (
    ContextInitializer,
    RequestNormalizer,
    ScopeTagProjector,
)


def configure_default_pipeline(
    pipeline: Optional[TelemetryPipeline] = None,
    *,
    replaced_types: Iterable[type[ITelemetryInitializer]] = (),
) -> TelemetryPipeline:
    """
    Args:
        pipeline: The host's existing chain. When omitted the container's chain is returned.
        replaced_types: Built-in initializer types to take out of `pipeline` first

    Returns:
        The pipeline with the enrichment initializers registered last, in order
    """
    setup()
    if pipeline is None:
        return container.telemetry_pipeline()

    for initializer_type in (*replaced_types, *ENRICHMENT_INITIALIZER_TYPES):
        for removed in pipeline.remove(initializer_type):
            Logger.base.info(f'[TELEMETRY] Removed initializer {type(removed).__name__}')

    for initializer in (
        container.context_initializer(),
        container.request_normalizer(),
        container.scope_tag_projector(),
    ):
        pipeline.register(initializer)

    Logger.base.info(f'[TELEMETRY] {len(pipeline)} initializers registered')
    return pipeline
