"""Collectors that feed Secret metadata into the resolver."""

from credref.collector.secret_lister import (
    KubernetesSecretLister,
    SecretLister,
    StaticSecretLister,
    record_from_secret,
    records_from_manifests,
)

__all__ = [
    "KubernetesSecretLister",
    "SecretLister",
    "StaticSecretLister",
    "record_from_secret",
    "records_from_manifests",
]
