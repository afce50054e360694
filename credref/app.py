"""Application bootstrap for credref.

Startup order: config -> logging -> K8s client -> secret lister -> resolver.

The resolver is started exactly once, before any request context is built,
so lookups never race with an index build. :func:`request_context` then binds
the started resolver's ``resolve`` into a fresh context for one reconcile.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from credref.collector.secret_lister import KubernetesSecretLister, SecretLister
from credref.models.config import CredRefConfig
from credref.observability.logging import get_logger
from credref.rcontext import Context, with_secret_ref_resolver, with_tenant_namespace
from credref.resolver.secret_resolver import FluxSecretResolver

if TYPE_CHECKING:
    import structlog


class ComponentError(Exception):
    """Raised when a mandatory component fails to start."""

    def __init__(self, component: str, cause: Exception) -> None:
        super().__init__(f"Component '{component}' failed to start: {cause}")
        self.component = component
        self.cause = cause


async def load_k8s_config(log: structlog.stdlib.BoundLogger) -> None:
    """Configure kubernetes-asyncio from in-cluster config or kubeconfig."""
    try:
        # Imported lazily so the CLI's offline mode does not need a cluster.
        import kubernetes_asyncio.config as k8s_config  # type: ignore[import-untyped]

        try:
            k8s_config.load_incluster_config()
            log.info("k8s_client_configured", source="in_cluster")
        except k8s_config.ConfigException:
            await k8s_config.load_kube_config()
            log.info("k8s_client_configured", source="kubeconfig")
    except Exception as exc:
        raise ComponentError("k8s_client", exc) from exc


async def start_resolver(config: CredRefConfig, lister: SecretLister | None = None) -> FluxSecretResolver:
    """Build and start a FluxSecretResolver.

    When *lister* is None a KubernetesSecretLister is created against the
    configured cluster and its API client is closed once the index is built;
    the resolver keeps no connection open afterwards.

    Raises:
        ComponentError: the cluster could not be reached or listing failed.
    """
    log = get_logger("app")
    api_client: Any = None
    if lister is None:
        await load_k8s_config(log)
        from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]

        api_client = k8s_client.ApiClient()
        lister = KubernetesSecretLister(
            k8s_client.CoreV1Api(api_client),
            namespace=config.resolver.namespace,
        )

    resolver = FluxSecretResolver(
        lister,
        eligibility_label=config.resolver.eligibility_label,
        url_annotation=config.resolver.url_annotation,
    )
    try:
        await resolver.start()
    except Exception as exc:
        raise ComponentError("secret_resolver", exc) from exc
    finally:
        if api_client is not None:
            await api_client.close()

    log.info("secret_resolver_ready", entries=len(resolver))
    return resolver


def request_context(resolver: FluxSecretResolver, tenant_namespace: str, parent: Context | None = None) -> Context:
    """Return a context carrying the tenant namespace and the bound resolver."""
    ctx = parent if parent is not None else Context.background()
    ctx = with_tenant_namespace(ctx, tenant_namespace)
    return with_secret_ref_resolver(ctx, resolver.resolve)
