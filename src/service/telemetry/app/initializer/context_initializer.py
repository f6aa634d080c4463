import os
from typing import Optional

from src.platform.config.core_setting import Settings
from src.service.telemetry.app.interface.i_telemetry_initializer import ITelemetryInitializer
from src.service.telemetry.app.role_environment.node_name_cache import NodeNameCache
from src.service.telemetry.app.role_environment.role_instance_provider import (
    RoleInstanceProvider,
)
from src.service.telemetry.app.role_environment.slot_identity_resolver import (
    SlotIdentityResolver,
)
from src.service.telemetry.domain.log_constants import LogConstants
from src.service.telemetry.domain.telemetry_record import TelemetryRecord


_CURRENT_PROCESS_ID = str(os.getpid())


class ContextInitializer(ITelemetryInitializer):
    """
    Fills the role environment of a record: role name, role instance, node
    name and source IP. Values already present always win; this stage only
    supplies defaults.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        slot_identity_resolver: SlotIdentityResolver,
        role_instance_provider: RoleInstanceProvider,
        node_name_cache: NodeNameCache,
    ) -> None:
        self._default_ip = settings.DEFAULT_IP
        self._slot_identity_resolver = slot_identity_resolver
        self._role_instance_provider = role_instance_provider
        self._node_name_cache = node_name_cache

    def initialize(self, record: Optional[TelemetryRecord]) -> None:
        if record is None:
            return

        context = record.context

        # Resolved at most once per call, and only when a field needs it
        slot_identity: Optional[str] = None
        if not context.role_name or not context.node_name:
            slot_identity = self._slot_identity_resolver.resolve()

        if not context.role_name:
            context.role_name = slot_identity

        if not context.node_name and slot_identity:
            context.node_name = self._node_name_cache.get_or_create(slot_identity)

        if not context.role_instance:
            context.role_instance = self._role_instance_provider.get_role_instance_name()

        if not context.ip:
            context.ip = self._default_ip

        record.properties[LogConstants.PROCESS_ID_KEY] = _CURRENT_PROCESS_ID
