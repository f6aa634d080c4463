"""
https://python-dependency-injector.ets-labs.org/index.html
"""

import os

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.metrics.enrichment_metrics import metrics
from src.service.telemetry.app.initializer.context_initializer import ContextInitializer
from src.service.telemetry.app.initializer.request_normalizer import RequestNormalizer
from src.service.telemetry.app.initializer.scope_tag_projector import ScopeTagProjector
from src.service.telemetry.app.role_environment.node_name_cache import NodeNameCache
from src.service.telemetry.app.role_environment.role_instance_provider import (
    RoleInstanceProvider,
)
from src.service.telemetry.app.role_environment.slot_identity_resolver import (
    SlotIdentityResolver,
)
from src.service.telemetry.app.telemetry_pipeline import TelemetryPipeline
from src.service.telemetry.driven_adapter.ambient_context_provider_impl import (
    AmbientContextProviderImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Identity variables are read through this, never through Settings, so slot swaps are seen
    env_lookup = providers.Object(os.getenv)

    enrichment_metrics = providers.Object(metrics)

    # Process-lifetime state
    role_instance_provider = providers.Singleton(RoleInstanceProvider, env_lookup=env_lookup)
    node_name_cache = providers.Singleton(
        NodeNameCache, suffix=config_service.provided.NODE_NAME_SUFFIX
    )

    # Stateless, reads the environment on every resolve()
    slot_identity_resolver = providers.Factory(
        SlotIdentityResolver, settings=config_service, env_lookup=env_lookup
    )

    ambient_context_provider = providers.Singleton(AmbientContextProviderImpl)

    # Initializers, in the order the pipeline runs them
    context_initializer = providers.Singleton(
        ContextInitializer,
        settings=config_service,
        slot_identity_resolver=slot_identity_resolver,
        role_instance_provider=role_instance_provider,
        node_name_cache=node_name_cache,
    )
    request_normalizer = providers.Singleton(
        RequestNormalizer, settings=config_service, metrics=enrichment_metrics
    )
    scope_tag_projector = providers.Singleton(
        ScopeTagProjector,
        settings=config_service,
        ambient_context_provider=ambient_context_provider,
        metrics=enrichment_metrics,
    )

    telemetry_pipeline = providers.Singleton(
        TelemetryPipeline,
        metrics=enrichment_metrics,
        initializers=providers.List(context_initializer, request_normalizer, scope_tag_projector),
    )


container = Container()


def setup() -> None:
    container.config_service()
    container.role_instance_provider()


def cleanup() -> None:
    container.reset_singletons()
