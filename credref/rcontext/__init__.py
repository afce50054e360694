"""Typed request context for credref.

Threads per-reconcile values (tenant namespace, Flux kubeconfig reference,
version resolver, secret resolver) down a call chain without globals.

Exports:
    Context             -- Immutable context frame; ``Context.background()`` is the root.
    ContextKey          -- Opaque, identity-compared slot key.
    with_value / value  -- Generic bind and read.
    with_* / getters    -- Typed accessor pair per slot.
"""

from credref.rcontext.context import (
    Context,
    ContextError,
    ContextKey,
    MissingBindingError,
    TypeMismatchError,
    value,
    with_value,
)
from credref.rcontext.slots import (
    flux_kubeconfig_ref,
    secret_ref_resolver,
    tenant_namespace,
    version_resolver,
    with_flux_kubeconfig_ref,
    with_secret_ref_resolver,
    with_tenant_namespace,
    with_version_resolver,
)

__all__ = [
    "Context",
    "ContextError",
    "ContextKey",
    "MissingBindingError",
    "TypeMismatchError",
    "flux_kubeconfig_ref",
    "secret_ref_resolver",
    "tenant_namespace",
    "value",
    "version_resolver",
    "with_flux_kubeconfig_ref",
    "with_secret_ref_resolver",
    "with_tenant_namespace",
    "with_value",
]
