"""Shared factories for credref unit tests."""

from __future__ import annotations

import pytest

from credref.collector.secret_lister import StaticSecretLister
from credref.constants import ANNOTATION_CREDENTIALS_FOR_URL, LABEL_COPY_TO_CP_NAMESPACE
from credref.models.secrets import CredentialRecord, SecretType
from credref.resolver.secret_resolver import FluxSecretResolver

_ELIGIBLE = {LABEL_COPY_TO_CP_NAMESPACE: "true"}


def make_record(
    name: str = "helm-secret",
    secret_type: str = SecretType.BASIC_AUTH,
    urls: str | None = "https://test.com",
    eligible: bool = True,
    namespace: str = "default",
    extra_labels: dict[str, str] | None = None,
    extra_annotations: dict[str, str] | None = None,
) -> CredentialRecord:
    """Create a CredentialRecord; ``urls=None`` omits the annotation.

    ``extra_labels`` and ``extra_annotations`` are applied last and override
    the defaults.
    """
    labels = dict(_ELIGIBLE) if eligible else {}
    labels.update(extra_labels or {})
    annotations = {} if urls is None else {ANNOTATION_CREDENTIALS_FOR_URL: urls}
    annotations.update(extra_annotations or {})
    return CredentialRecord(
        name=name,
        namespace=namespace,
        secret_type=secret_type,
        labels=labels,
        annotations=annotations,
    )


def helm_secret() -> CredentialRecord:
    return make_record(name="helm-secret", secret_type=SecretType.BASIC_AUTH)


def docker_secret() -> CredentialRecord:
    return make_record(name="docker-secret", secret_type=SecretType.DOCKER_CONFIG_JSON)


class FailingLister:
    """Lister whose list() always raises the given error."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = 0

    async def list(self, label_selector: str) -> list[CredentialRecord]:
        self.calls += 1
        raise self.error


@pytest.fixture()
def resolver_for():
    """Return a factory building an unstarted resolver over fixed records."""

    def _build(*records: CredentialRecord) -> FluxSecretResolver:
        return FluxSecretResolver(StaticSecretLister(records))

    return _build
