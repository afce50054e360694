"""Core data structures for credref."""

from credref.models.config import CredRefConfig
from credref.models.secrets import (
    ComponentVersion,
    CredentialRecord,
    KubeConfigReference,
    LocalObjectReference,
    SecretKeyReference,
    SecretReference,
    SecretType,
)

__all__ = [
    "ComponentVersion",
    "CredRefConfig",
    "CredentialRecord",
    "KubeConfigReference",
    "LocalObjectReference",
    "SecretKeyReference",
    "SecretReference",
    "SecretType",
]
