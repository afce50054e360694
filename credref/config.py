"""Configuration loading from environment variables."""

from __future__ import annotations

import os
import re

from credref.constants import ANNOTATION_CREDENTIALS_FOR_URL, LABEL_COPY_TO_CP_NAMESPACE
from credref.models.config import CredRefConfig, LogConfig, ResolverConfig

# Qualified Kubernetes label/annotation key: optional DNS prefix, then a name.
_RE_QUALIFIED_KEY = re.compile(
    r"^([a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*/)?"
    r"[A-Za-z0-9]([-A-Za-z0-9_.]*[A-Za-z0-9])?$"
)


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"CREDREF_{key}", default)


def _validate_qualified_key(value: str) -> str:
    if not _RE_QUALIFIED_KEY.match(value):
        raise ValueError(f"Invalid label or annotation key: {value}")
    return value


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> CredRefConfig:
    """Load configuration from CREDREF_* environment variables."""
    return CredRefConfig(
        resolver=ResolverConfig(
            namespace=_env("NAMESPACE", ""),
            eligibility_label=_validate_qualified_key(_env("ELIGIBILITY_LABEL", LABEL_COPY_TO_CP_NAMESPACE)),
            url_annotation=_validate_qualified_key(_env("URL_ANNOTATION", ANNOTATION_CREDENTIALS_FOR_URL)),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
        ),
    )
