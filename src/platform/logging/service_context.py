"""
Service context extraction for distributed logging.

Identifies the function host emitting the logs (site, slot and instance)
so log lines from concurrent hosts can be told apart.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('WEBSITE_SITE_NAME') or os.getenv('SERVICE_NAME', 'unknown')
    slot_name = os.getenv('WEBSITE_SLOT_NAME') or 'production'

    # WEBSITE_INSTANCE_ID is a long hex string, keep the prefix for brevity
    instance_id = os.getenv('WEBSITE_INSTANCE_ID', '')
    if instance_id:
        instance = instance_id[:8]
    else:
        # Use PID for local development
        instance = str(os.getpid())

    return f'{service_name}@{slot_name}:{instance}'
