"""Application layer interfaces (Ports)"""

from src.service.telemetry.app.interface.i_ambient_context_provider import (
    IAmbientContextProvider,
)
from src.service.telemetry.app.interface.i_telemetry_initializer import ITelemetryInitializer


__all__ = [
    'IAmbientContextProvider',
    'ITelemetryInitializer',
]
