import os

from src.platform.config.core_setting import Settings
from src.service.telemetry.app.role_environment.role_instance_provider import EnvLookup


WEBSITE_SITE_NAME_KEY = 'WEBSITE_SITE_NAME'
WEBSITE_SLOT_NAME_KEY = 'WEBSITE_SLOT_NAME'


class SlotIdentityResolver:
    """
    Derives the name that uniquely identifies the site and deployment slot.

    Not memoized: the host rewrites WEBSITE_SLOT_NAME during a slot swap and a
    stale value would attribute telemetry to the wrong slot. WEBSITE_HOSTNAME
    is deliberately not used, it is unreliable for functions during swaps.
    """

    def __init__(self, settings: Settings, env_lookup: EnvLookup = os.getenv) -> None:
        self._env_lookup = env_lookup
        self._placeholder_identity = settings.PLACEHOLDER_SLOT_IDENTITY
        self._default_slot_name = settings.DEFAULT_SLOT_NAME

    def resolve(self) -> str:
        site_name = self._env_lookup(WEBSITE_SITE_NAME_KEY)
        if not site_name:
            return self._placeholder_identity

        slot_name = self._env_lookup(WEBSITE_SLOT_NAME_KEY)
        if slot_name and slot_name.casefold() != self._default_slot_name.casefold():
            site_name = f'{site_name}-{slot_name}'

        return site_name.lower()
