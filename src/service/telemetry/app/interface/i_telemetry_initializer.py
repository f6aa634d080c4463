"""
Telemetry Initializer Interface

Every enrichment stage of the pipeline implements this port. The host calls
`initialize` once per emitted record, in registration order.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.telemetry.domain.telemetry_record import TelemetryRecord


class ITelemetryInitializer(ABC):
    @abstractmethod
    def initialize(self, record: Optional[TelemetryRecord]) -> None:
        """
        Mutate the record's context and properties in place.

        Implementations must tolerate a missing record and must only fill
        empty fields or apply deterministic rewrites, so running them twice
        on the same record is harmless.
        """
        pass
