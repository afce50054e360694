"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

from credref.constants import ANNOTATION_CREDENTIALS_FOR_URL, LABEL_COPY_TO_CP_NAMESPACE


@dataclass
class ResolverConfig:
    """Secret resolver configuration."""

    namespace: str = ""  # empty lists Secrets across all namespaces
    eligibility_label: str = LABEL_COPY_TO_CP_NAMESPACE
    url_annotation: str = ANNOTATION_CREDENTIALS_FOR_URL


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"


@dataclass
class CredRefConfig:
    """Top-level credref configuration."""

    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    log: LogConfig = field(default_factory=LogConfig)
