"""Typed accessors for the per-reconcile context slots.

Each slot has a private key and a ``with_*`` / getter pair. The getters fail
fast with :class:`MissingBindingError` when the slot was never set.
"""

from __future__ import annotations

from credref.constants import KUBECONFIG_SECRET_KEY
from credref.models.secrets import (
    KubeConfigReference,
    SecretKeyReference,
    SecretReference,
    VersionResolverFn,
)
from credref.rcontext.context import Context, ContextKey, value, with_value
from credref.resolver.secret_resolver import ResolveFunc

_TENANT_NAMESPACE: ContextKey[str] = ContextKey("tenant_namespace", str)
_FLUX_KUBECONFIG: ContextKey[KubeConfigReference] = ContextKey("flux_kubeconfig", KubeConfigReference)
_VERSION_RESOLVER: ContextKey[VersionResolverFn] = ContextKey("version_resolver", callable)
_SECRET_REF_RESOLVER: ContextKey[ResolveFunc] = ContextKey("secret_ref_resolver", callable)


def with_tenant_namespace(ctx: Context, namespace: str) -> Context:
    return with_value(ctx, _TENANT_NAMESPACE, namespace)


def tenant_namespace(ctx: Context) -> str:
    return value(ctx, _TENANT_NAMESPACE)


def with_flux_kubeconfig_ref(ctx: Context, ref: SecretReference) -> Context:
    """Bind a kubeconfig reference pointing at the ``kubeconfig`` key of *ref*.

    Only the Secret name is kept; Flux resolves it in the namespace of the
    object that carries the reference.
    """
    kubeconfig = KubeConfigReference(
        secret_ref=SecretKeyReference(name=ref.name, key=KUBECONFIG_SECRET_KEY),
    )
    return with_value(ctx, _FLUX_KUBECONFIG, kubeconfig)


def flux_kubeconfig_ref(ctx: Context) -> KubeConfigReference:
    return value(ctx, _FLUX_KUBECONFIG)


def with_version_resolver(ctx: Context, fn: VersionResolverFn) -> Context:
    return with_value(ctx, _VERSION_RESOLVER, fn)


def version_resolver(ctx: Context) -> VersionResolverFn:
    return value(ctx, _VERSION_RESOLVER)


def with_secret_ref_resolver(ctx: Context, fn: ResolveFunc) -> Context:
    """Bind a secret lookup, usually a started ``FluxSecretResolver.resolve``."""
    return with_value(ctx, _SECRET_REF_RESOLVER, fn)


def secret_ref_resolver(ctx: Context) -> ResolveFunc:
    return value(ctx, _SECRET_REF_RESOLVER)
