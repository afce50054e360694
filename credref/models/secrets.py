"""Secret records, object references and version descriptors."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

from credref.constants import ANNOTATION_CREDENTIALS_FOR_URL, LABEL_COPY_TO_CP_NAMESPACE, LABEL_TRUE


class SecretType(StrEnum):
    """Kubernetes Secret types."""

    OPAQUE = "Opaque"
    BASIC_AUTH = "kubernetes.io/basic-auth"
    DOCKER_CONFIG_JSON = "kubernetes.io/dockerconfigjson"
    DOCKER_CFG = "kubernetes.io/dockercfg"
    SSH_AUTH = "kubernetes.io/ssh-auth"
    TLS = "kubernetes.io/tls"
    SERVICE_ACCOUNT_TOKEN = "kubernetes.io/service-account-token"
    BOOTSTRAP_TOKEN = "bootstrap.kubernetes.io/token"


@dataclass(frozen=True, eq=False)
class CredentialRecord:
    """A candidate Secret as returned by a SecretLister.

    Only metadata is carried; Secret data never enters the resolver.
    Labels and annotations are copied into read-only mappings, and records
    hash and compare by identity.
    ``secret_type`` is kept as a plain string so that types outside
    :class:`SecretType` still index and compare correctly.
    """

    name: str
    secret_type: str
    namespace: str = ""
    labels: Mapping[str, str] = field(default_factory=dict)
    annotations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))
        object.__setattr__(self, "annotations", MappingProxyType(dict(self.annotations)))

    def is_eligible(self, label: str = LABEL_COPY_TO_CP_NAMESPACE) -> bool:
        return self.labels.get(label) == LABEL_TRUE

    def credential_urls(self, annotation: str = ANNOTATION_CREDENTIALS_FOR_URL) -> list[str] | None:
        """Return the URLs listed in the credentials annotation.

        None means the annotation is absent. Empty segments produced by
        doubled or trailing commas are dropped; segments are not trimmed.
        """
        joined = self.annotations.get(annotation)
        if joined is None:
            return None
        return [url for url in joined.split(",") if url]


@dataclass(frozen=True)
class LocalObjectReference:
    """Reference to an object by name within the same namespace."""

    name: str


@dataclass(frozen=True)
class SecretReference:
    """Reference to a Secret by name and namespace."""

    name: str
    namespace: str = ""


@dataclass(frozen=True)
class SecretKeyReference:
    """Reference to a single key of a Secret."""

    name: str
    key: str


@dataclass(frozen=True)
class KubeConfigReference:
    """Flux-style reference to a kubeconfig stored in a Secret."""

    secret_ref: SecretKeyReference


@dataclass(frozen=True)
class ComponentVersion:
    """A resolved release of a control-plane component."""

    version: str
    docker_ref: str = ""  # image reference for container-based components
    helm_repo: str = ""
    helm_chart: str = ""
    oci_url: str = ""  # set when the chart lives in an OCI registry


# (component_name, version) -> ComponentVersion
VersionResolverFn = Callable[[str, str], ComponentVersion]
