"""Shared fixtures for credref integration tests.

Builds a fake CoreV1Api returning realistic V1Secret objects so the full
lister -> resolver -> context pipeline runs without a cluster.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from kubernetes_asyncio.client import V1ListMeta, V1ObjectMeta, V1Secret, V1SecretList

from credref.constants import ANNOTATION_CREDENTIALS_FOR_URL, LABEL_COPY_TO_CP_NAMESPACE
from credref.models.config import CredRefConfig


def make_secret(
    name: str,
    secret_type: str,
    urls: str | None = None,
    eligible: bool = True,
    namespace: str = "default",
) -> V1Secret:
    """Create a V1Secret carrying the resolver's label and annotation."""
    return V1Secret(
        metadata=V1ObjectMeta(
            name=name,
            namespace=namespace,
            labels={LABEL_COPY_TO_CP_NAMESPACE: "true"} if eligible else {"app": "other"},
            annotations={ANNOTATION_CREDENTIALS_FOR_URL: urls} if urls is not None else None,
        ),
        type=secret_type,
    )


def _cluster_secrets() -> list[V1Secret]:
    return [
        make_secret("helm-secret", "kubernetes.io/basic-auth", "https://test.com"),
        make_secret("docker-secret", "kubernetes.io/dockerconfigjson", "https://test.com"),
        make_secret(
            "artifactory-readonly-basic",
            "kubernetes.io/basic-auth",
            "https://charts.example.com/helm,oci://registry.example.com/charts",
            namespace="flux-system",
        ),
        make_secret("unannotated", "kubernetes.io/basic-auth"),
        make_secret("tls-cert", "kubernetes.io/tls", "https://test.com", eligible=False),
    ]


@pytest.fixture()
def core_v1() -> MagicMock:
    """A CoreV1Api double that applies the label selector like the API server."""

    async def _list(label_selector: str, limit: int, **_: object) -> V1SecretList:
        key, _, val = label_selector.partition("=")
        items = [s for s in _cluster_secrets() if (s.metadata.labels or {}).get(key) == val]
        return V1SecretList(items=items, metadata=V1ListMeta())

    api = MagicMock()
    api.list_secret_for_all_namespaces = AsyncMock(side_effect=_list)
    return api


@pytest.fixture()
def config() -> CredRefConfig:
    return CredRefConfig()
