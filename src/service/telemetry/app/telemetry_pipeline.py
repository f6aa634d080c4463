"""
Telemetry Pipeline - ordered chain of initializers run on every emitted record
"""

from collections.abc import Iterable, Iterator
from typing import Optional

from src.platform.exception.exceptions import InitializerRegistrationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.enrichment_metrics import EnrichmentMetrics
from src.service.telemetry.app.interface.i_telemetry_initializer import ITelemetryInitializer
from src.service.telemetry.domain.telemetry_record import TelemetryRecord


class TelemetryPipeline:
    """
    Runs registered initializers in registration order.

    A failing initializer never aborts the chain or the record: the error is
    logged and counted, the fields it already set stay, and the next stage runs.

    Registration is explicit and typed, so the host can replace its built-in
    initializers with `remove(BuiltInType)` followed by `register(...)`.
    """

    def __init__(
        self,
        *,
        metrics: EnrichmentMetrics,
        initializers: Iterable[ITelemetryInitializer] = (),
    ) -> None:
        self._metrics = metrics
        self._initializers: list[ITelemetryInitializer] = []
        for initializer in initializers:
            self.register(initializer)

    @Logger.io
    def register(self, initializer: ITelemetryInitializer) -> None:
        if not isinstance(initializer, ITelemetryInitializer):
            raise InitializerRegistrationError(
                f'{type(initializer).__name__} does not implement ITelemetryInitializer'
            )
        if any(existing is initializer for existing in self._initializers):
            raise InitializerRegistrationError(
                f'{type(initializer).__name__} instance is already registered'
            )
        self._initializers.append(initializer)

    @Logger.io
    def remove(self, initializer_type: type[ITelemetryInitializer]) -> list[ITelemetryInitializer]:
        """
        Remove every registered initializer that is an instance of `initializer_type`.

        Returns:
            The removed initializers, in their former order
        """
        removed = [i for i in self._initializers if isinstance(i, initializer_type)]
        self._initializers = [i for i in self._initializers if not isinstance(i, initializer_type)]
        return removed

    @property
    def initializers(self) -> tuple[ITelemetryInitializer, ...]:
        return tuple(self._initializers)

    def __iter__(self) -> Iterator[ITelemetryInitializer]:
        return iter(self.initializers)

    def __len__(self) -> int:
        return len(self._initializers)

    def initialize(self, record: Optional[TelemetryRecord]) -> None:
        if record is None:
            return

        for initializer in self.initializers:
            try:
                initializer.initialize(record)
            except Exception:
                name = type(initializer).__name__
                Logger.base.opt(exception=True).error(
                    f'[TELEMETRY] {name} failed on {record.kind} record, continuing'
                )
                self._metrics.record_initializer_failure(initializer=name)

        self._metrics.record_initialized(record_kind=record.kind)
