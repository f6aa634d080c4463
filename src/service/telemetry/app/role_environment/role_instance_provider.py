from collections.abc import Callable
import os
from typing import Optional

from src.platform.logging.loguru_io import Logger


EnvLookup = Callable[[str], Optional[str]]

WEBSITE_INSTANCE_ID_KEY = 'WEBSITE_INSTANCE_ID'
COMPUTER_NAME_KEY = 'COMPUTERNAME'
CONTAINER_NAME_KEY = 'CONTAINER_NAME'

ROLE_INSTANCE_KEYS = (WEBSITE_INSTANCE_ID_KEY, COMPUTER_NAME_KEY, CONTAINER_NAME_KEY)


def resolve_role_instance(env_lookup: EnvLookup = os.getenv) -> Optional[str]:
    for key in ROLE_INSTANCE_KEYS:
        if value := env_lookup(key):
            return value
    return None


class RoleInstanceProvider:
    """
    Holds the role instance name for the process lifetime.

    The instance a process runs on does not change, so unlike the slot
    identity it is resolved once, at construction.
    """

    def __init__(self, env_lookup: EnvLookup = os.getenv) -> None:
        self._role_instance_name = self._resolve(env_lookup)

    @staticmethod
    @Logger.io
    def _resolve(env_lookup: EnvLookup) -> Optional[str]:
        return resolve_role_instance(env_lookup)

    def get_role_instance_name(self) -> Optional[str]:
        return self._role_instance_name
