"""Secret resolver: maps (repository URL, Secret type) to a Secret name.

The index is built once by :meth:`FluxSecretResolver.start` from the Secrets
returned by a :class:`~credref.collector.secret_lister.SecretLister` and is
then read by any number of callers through :meth:`FluxSecretResolver.resolve`.

Each ``start()`` builds a fresh dict and publishes it with a single
assignment, so ``resolve()`` always sees either the previous complete index
or the new complete index, never a partial one. Calling ``start()`` again
replaces the index; keys that disappeared from the cluster are dropped.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

import structlog

from credref.constants import ANNOTATION_CREDENTIALS_FOR_URL, LABEL_COPY_TO_CP_NAMESPACE, LABEL_TRUE
from credref.models.secrets import LocalObjectReference
from credref.observability.metrics import index_entries, lookups_total, populate_total
from credref.resolver.keys import UrlSecretType

if TYPE_CHECKING:
    from credref.collector.secret_lister import SecretLister

_log = structlog.get_logger(component="resolver.secret_resolver")

ResolveFunc = Callable[[UrlSecretType], LocalObjectReference | None]


class SecretResolver(ABC):
    """Resolves repository credentials to Secret references."""

    @abstractmethod
    async def start(self) -> None:
        """Scan the cluster once and build the index."""

    @abstractmethod
    def resolve(self, url_type: UrlSecretType) -> LocalObjectReference | None:
        """Return a reference to the matching Secret, or None if there is none."""


class FluxSecretResolver(SecretResolver):
    """Resolves Secrets for Flux Helm and OCI repositories.

    Args:
        lister:            Source of candidate Secrets.
        eligibility_label: Label that must be ``"true"`` for a Secret to be indexed.
        url_annotation:    Annotation holding the comma-separated URL list.
    """

    def __init__(
        self,
        lister: SecretLister,
        eligibility_label: str = LABEL_COPY_TO_CP_NAMESPACE,
        url_annotation: str = ANNOTATION_CREDENTIALS_FOR_URL,
    ) -> None:
        self._lister = lister
        self._eligibility_label = eligibility_label
        self._url_annotation = url_annotation
        self._secrets: Mapping[UrlSecretType, str] = MappingProxyType({})

    @property
    def label_selector(self) -> str:
        return f"{self._eligibility_label}={LABEL_TRUE}"

    async def start(self) -> None:
        """List eligible Secrets and rebuild the index.

        Later Secrets win when two claim the same (URL, type) pair. Secrets
        without the eligibility label or the URL annotation are skipped.

        Errors from the lister are re-raised unchanged; the previously
        published index stays in place.
        """
        try:
            records = await self._lister.list(self.label_selector)
        except Exception as exc:
            populate_total.labels(result="error").inc()
            _log.error("secret_listing_failed", selector=self.label_selector, error=str(exc))
            raise

        secrets: dict[UrlSecretType, str] = {}
        skipped = 0
        for record in records:
            if not record.is_eligible(self._eligibility_label):
                skipped += 1
                continue
            urls = record.credential_urls(self._url_annotation)
            if urls is None:
                skipped += 1
                continue
            for url in urls:
                secrets[UrlSecretType(url=url, secret_type=record.secret_type)] = record.name

        self._secrets = MappingProxyType(secrets)
        populate_total.labels(result="success").inc()
        index_entries.set(len(secrets))
        _log.info(
            "secret_resolver_started",
            secrets=len(records),
            skipped=skipped,
            entries=len(secrets),
        )

    def resolve(self, url_type: UrlSecretType) -> LocalObjectReference | None:
        name = self._secrets.get(url_type)
        if name is None:
            lookups_total.labels(result="miss").inc()
            return None
        lookups_total.labels(result="hit").inc()
        return LocalObjectReference(name=name)

    def entries(self) -> Mapping[UrlSecretType, str]:
        """Return a read-only view of the current index."""
        return self._secrets

    def __len__(self) -> int:
        return len(self._secrets)
