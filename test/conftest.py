"""
Test Configuration and Fixtures

This module provides:
- Early environment setup so settings and the loguru config load deterministically
- A dict-backed environment lookup for the role environment resolvers
- Settings, metrics and initializer fixtures shared by the unit tests
"""

# =============================================================================
# Environment setup MUST happen before importing src modules: Settings and the
# loguru configuration are built at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEBUG', 'false')


_early_setup_test_environment()

from collections.abc import Callable  # noqa: E402
from typing import Optional  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.core_setting import Settings  # noqa: E402
from src.platform.metrics.enrichment_metrics import EnrichmentMetrics  # noqa: E402
from src.service.telemetry.app.initializer.context_initializer import (  # noqa: E402
    ContextInitializer,
)
from src.service.telemetry.app.role_environment.node_name_cache import (  # noqa: E402
    NodeNameCache,
)
from src.service.telemetry.app.role_environment.role_instance_provider import (  # noqa: E402
    RoleInstanceProvider,
)
from src.service.telemetry.app.role_environment.slot_identity_resolver import (  # noqa: E402
    SlotIdentityResolver,
)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        SDK_VERSION='0.0.0',
        PLACEHOLDER_HOST='hello-world',
        PLACEHOLDER_SLOT_IDENTITY='hello-world',
        DEFAULT_SLOT_NAME='production',
        NODE_NAME_SUFFIX='.azurewebsites.net',
        DEFAULT_IP='0.0.0.0',
        RESERVED_TAG_PREFIX='ai_',
    )


@pytest.fixture
def env() -> dict[str, str]:
    """Mutable fake process environment, read through `env_lookup`"""
    return {}


@pytest.fixture
def env_lookup(env: dict[str, str]) -> Callable[[str], Optional[str]]:
    return env.get


@pytest.fixture
def mock_metrics() -> MagicMock:
    return MagicMock(spec=EnrichmentMetrics)


@pytest.fixture
def context_initializer(
    settings: Settings, env_lookup: Callable[[str], Optional[str]]
) -> ContextInitializer:
    return ContextInitializer(
        settings=settings,
        slot_identity_resolver=SlotIdentityResolver(settings, env_lookup),
        role_instance_provider=RoleInstanceProvider(env_lookup),
        node_name_cache=NodeNameCache(settings.NODE_NAME_SUFFIX),
    )
