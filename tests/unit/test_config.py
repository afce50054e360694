"""Tests for environment-based configuration loading."""

from __future__ import annotations

import pytest

from credref.config import load_config
from credref.constants import ANNOTATION_CREDENTIALS_FOR_URL, LABEL_COPY_TO_CP_NAMESPACE

_VARS = ("NAMESPACE", "ELIGIBILITY_LABEL", "URL_ANNOTATION", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in _VARS:
        monkeypatch.delenv(f"CREDREF_{var}", raising=False)


class TestLoadConfig:
    def test_defaults(self) -> None:
        config = load_config()
        assert config.resolver.namespace == ""
        assert config.resolver.eligibility_label == LABEL_COPY_TO_CP_NAMESPACE
        assert config.resolver.url_annotation == ANNOTATION_CREDENTIALS_FOR_URL
        assert config.log.level == "info"

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CREDREF_NAMESPACE", "flux-system")
        monkeypatch.setenv("CREDREF_ELIGIBILITY_LABEL", "example.com/share")
        monkeypatch.setenv("CREDREF_URL_ANNOTATION", "urls")
        monkeypatch.setenv("CREDREF_LOG_LEVEL", "DEBUG")
        config = load_config()
        assert config.resolver.namespace == "flux-system"
        assert config.resolver.eligibility_label == "example.com/share"
        assert config.resolver.url_annotation == "urls"
        assert config.log.level == "debug"

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CREDREF_LOG_LEVEL", "verbose")
        with pytest.raises(ValueError, match="Invalid log level"):
            load_config()

    @pytest.mark.parametrize("key", ["", "has space", "/no-prefix", "-leading-dash", "a/b/c"])
    def test_invalid_label_key(self, monkeypatch: pytest.MonkeyPatch, key: str) -> None:
        monkeypatch.setenv("CREDREF_ELIGIBILITY_LABEL", key)
        with pytest.raises(ValueError, match="Invalid label or annotation key"):
            load_config()
