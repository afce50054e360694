"""Secret listing collaborators for the resolver.

SecretLister           -- Protocol: ``await list(label_selector)`` -> records.
KubernetesSecretLister -- Lists Secrets through kubernetes-asyncio's CoreV1Api.
StaticSecretLister     -- Serves a fixed record list (offline `--from-file` mode).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

import structlog

from credref.models.secrets import CredentialRecord, SecretType

_log = structlog.get_logger(component="collector.secret_lister")

_DEFAULT_PAGE_SIZE = 500


class SecretLister(Protocol):
    """Anything that can list Secrets matching a label selector."""

    async def list(self, label_selector: str) -> list[CredentialRecord]: ...


def record_from_secret(secret: Any) -> CredentialRecord:
    """Convert a kubernetes-asyncio ``V1Secret`` into a CredentialRecord.

    Secret data is dropped. A missing type defaults to ``Opaque`` as the
    API server does.
    """
    metadata = secret.metadata
    return CredentialRecord(
        name=metadata.name or "",
        namespace=metadata.namespace or "",
        secret_type=secret.type or SecretType.OPAQUE,
        labels=dict(metadata.labels or {}),
        annotations=dict(metadata.annotations or {}),
    )


class KubernetesSecretLister:
    """Lists Secrets from the API server, following ``continue`` tokens.

    Args:
        core_v1:   A ``kubernetes_asyncio.client.CoreV1Api``.
        namespace: Restrict listing to one namespace; empty means all.
        page_size: ``limit`` passed on each list call.
    """

    def __init__(self, core_v1: Any, namespace: str = "", page_size: int = _DEFAULT_PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError("page_size must be positive")
        self._core_v1 = core_v1
        self._namespace = namespace
        self._page_size = page_size

    async def list(self, label_selector: str) -> list[CredentialRecord]:
        records: list[CredentialRecord] = []
        token: str | None = None
        pages = 0
        while True:
            kwargs: dict[str, Any] = {"label_selector": label_selector, "limit": self._page_size}
            if token:
                kwargs["_continue"] = token
            if self._namespace:
                secret_list = await self._core_v1.list_namespaced_secret(self._namespace, **kwargs)
            else:
                secret_list = await self._core_v1.list_secret_for_all_namespaces(**kwargs)
            pages += 1
            records.extend(record_from_secret(s) for s in secret_list.items or [])
            token = getattr(secret_list.metadata, "_continue", None) if secret_list.metadata else None
            if not token:
                break

        _log.debug(
            "secrets_listed",
            selector=label_selector,
            namespace=self._namespace or "*",
            pages=pages,
            count=len(records),
        )
        return records


class StaticSecretLister:
    """Returns the same records on every call, ignoring the selector."""

    def __init__(self, records: Iterable[CredentialRecord]) -> None:
        self._records = list(records)
        self.calls: list[str] = []

    async def list(self, label_selector: str) -> list[CredentialRecord]:
        self.calls.append(label_selector)
        return list(self._records)


def records_from_manifests(document: Any) -> list[CredentialRecord]:
    """Convert a ``kubectl get secrets -o json`` document into records.

    Accepts either a ``List``/``SecretList`` with ``items`` or a single
    Secret manifest. Non-Secret items are ignored.

    Raises:
        ValueError: the document, an item or an item's metadata is not a
                    JSON object, or ``items`` is not an array.
    """
    if not isinstance(document, dict):
        raise ValueError(f"expected a JSON object, got {type(document).__name__}")
    items = document.get("items")
    if items is None:
        items = [document]
    elif not isinstance(items, list):
        raise ValueError(f"'items' must be an array, got {type(items).__name__}")
    records = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"item {index} must be a JSON object, got {type(item).__name__}")
        if item.get("kind", "Secret") != "Secret":
            continue
        metadata = item.get("metadata") or {}
        if not isinstance(metadata, dict):
            raise ValueError(f"item {index} metadata must be a JSON object, got {type(metadata).__name__}")
        records.append(
            CredentialRecord(
                name=metadata.get("name", ""),
                namespace=metadata.get("namespace", ""),
                secret_type=item.get("type") or SecretType.OPAQUE,
                labels=_object_field(metadata, "labels", index),
                annotations=_object_field(metadata, "annotations", index),
            )
        )
    return records


def _object_field(metadata: dict[str, Any], name: str, index: int) -> dict[str, str]:
    value = metadata.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"item {index} metadata.{name} must be a JSON object, got {type(value).__name__}")
    return dict(value)
