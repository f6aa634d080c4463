"""
Invocation scope propagation for the functions host.

The host wraps every function invocation in `invocation_scope(...)`; records
emitted anywhere inside that block (same thread or task) see the scope. The
same values are attached to loguru's contextual extras so host log lines
carry them too.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Optional

from src.platform.logging.loguru_io import Logger
from src.platform.observability.activity import ActivityTags, current_activity_tags
from src.service.telemetry.app.interface.i_ambient_context_provider import (
    IAmbientContextProvider,
)
from src.service.telemetry.domain.ambient_scope import AmbientScope


_invocation_scope_var: ContextVar[Optional[AmbientScope]] = ContextVar(
    'invocation_scope_var', default=None
)


@contextmanager
def invocation_scope(values: Mapping[str, Any]) -> Iterator[AmbientScope]:
    """
    Usage:
        with invocation_scope({ScopeKeys.FUNCTION_NAME: 'Orders', ...}):
            run_function()

    Nested scopes see the outer values; inner keys win.
    """
    parent = _invocation_scope_var.get()
    scope = parent.merged_with(values) if parent is not None else AmbientScope(values)
    token = _invocation_scope_var.set(scope)
    try:
        with Logger.base.contextualize(**{str(k): v for k, v in values.items()}):
            yield scope
    finally:
        _invocation_scope_var.reset(token)


def current_invocation_scope() -> Optional[AmbientScope]:
    return _invocation_scope_var.get()


class AmbientContextProviderImpl(IAmbientContextProvider):
    def current_scope(self) -> Optional[AmbientScope]:
        return current_invocation_scope()

    def current_activity_tags(self) -> Optional[ActivityTags]:
        return current_activity_tags()
