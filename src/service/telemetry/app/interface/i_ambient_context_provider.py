from abc import ABC, abstractmethod
from typing import Optional

from src.platform.observability.activity import ActivityTags
from src.service.telemetry.domain.ambient_scope import AmbientScope


class IAmbientContextProvider(ABC):
    """
    Port (interface) for the per-invocation context the host propagates implicitly.

    Both values are read at the moment a record is initialized, on the thread
    or task that emitted it.
    """

    @abstractmethod
    def current_scope(self) -> Optional[AmbientScope]:
        pass

    @abstractmethod
    def current_activity_tags(self) -> Optional[ActivityTags]:
        pass
