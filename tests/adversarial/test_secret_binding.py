"""Adversarial tests for secret binding in the config resolver.

Resolution must fail fast without partial output, must consult the secret
source only through the injected callable, and must never leak secrets
into renderings that are not explicitly revealed.
"""

from __future__ import annotations

import json

import pytest

from slotwright.core.chain_registry import ChainRegistry
from slotwright.core.config_resolver import ConfigResolver, MissingCredentialError
from slotwright.core.deployment import build_deployment_config


class RecordingSource:
    """Secret source that records every variable it is asked for."""

    def __init__(self, values: dict[str, str]) -> None:
        self.values = values
        self.requests: list[str] = []

    def __call__(self, key: str) -> str | None:
        self.requests.append(key)
        return self.values.get(key)


class TestFailFast:
    def test_no_api_keys_read_when_credential_missing(self, registry: ChainRegistry):
        source = RecordingSource({"AVALANCHE_API_KEY": "k"})
        with pytest.raises(MissingCredentialError):
            ConfigResolver(source).resolve_all(registry)
        assert source.requests == ["PRIVATE_KEY"]

    def test_credential_read_once_per_pass(self, registry: ChainRegistry):
        source = RecordingSource({"PRIVATE_KEY": "0xabc"})
        ConfigResolver(source).resolve_all(registry)
        assert source.requests.count("PRIVATE_KEY") == 1

    def test_explicit_credential_skips_lookup(self, registry: ChainRegistry):
        source = RecordingSource({})
        ConfigResolver(source, credential="0xabc").resolve_all(registry)
        assert "PRIVATE_KEY" not in source.requests

    def test_error_message_has_no_secret_values(self, registry: ChainRegistry):
        source = RecordingSource({"DFK_API_KEY": "super-secret"})
        with pytest.raises(MissingCredentialError) as exc_info:
            ConfigResolver(source).resolve_all(registry)
        assert "super-secret" not in str(exc_info.value)


class TestNoLeaks:
    def test_driver_document_masks_secrets(self, registry: ChainRegistry, make_secret_source):
        config = build_deployment_config(
            registry, make_secret_source("0xtopsecret", KLAYTN_API_KEY="scope-key")
        )
        text = json.dumps(config.to_driver_dict())
        assert "0xtopsecret" not in text
        assert "scope-key" not in text

    def test_logs_name_variables_not_values(
        self, registry: ChainRegistry, make_secret_source, caplog: pytest.LogCaptureFixture
    ):
        with caplog.at_level("DEBUG", logger="slotwright"):
            ConfigResolver(
                make_secret_source("0xtopsecret", DFK_API_KEY="route-key")
            ).resolve_all(registry)
        assert "0xtopsecret" not in caplog.text
        assert "route-key" not in caplog.text
        assert "KLAYTN_API_KEY" in caplog.text
