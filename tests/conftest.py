"""Shared test fixtures for slotwright."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from slotwright.core.chain_registry import ChainRegistry, default_registry
from slotwright.core.config_resolver import (
    DEFAULT_CREDENTIAL_VAR,
    SecretSource,
    api_key_env_var,
    mapping_secret_source,
)
from slotwright.core.slot_deriver import SlotDeriver

TEST_CREDENTIAL = "0x" + "11" * 32

MANAGED_ENV_VARS = [DEFAULT_CREDENTIAL_VAR] + [
    api_key_env_var(name) for name in default_registry().names()
]


@pytest.fixture
def registry() -> ChainRegistry:
    """Provide a registry holding the compiled-in chains."""
    return default_registry()


@pytest.fixture
def deriver() -> SlotDeriver:
    """Provide a Keccak-256 slot deriver."""
    return SlotDeriver()


@pytest.fixture
def credential() -> str:
    """The shared signing credential served by ``make_secret_source``."""
    return TEST_CREDENTIAL


@pytest.fixture
def make_secret_source() -> Callable[..., SecretSource]:
    """Factory fixture: build a dict-backed secret source.

    The signing credential is present unless ``credential=None`` is passed.
    """

    def _factory(credential: str | None = TEST_CREDENTIAL, **values: str) -> SecretSource:
        secrets = dict(values)
        if credential is not None:
            secrets[DEFAULT_CREDENTIAL_VAR] = credential
        return mapping_secret_source(secrets)

    return _factory


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:
    """Isolate the process environment and cwd for CLI tests.

    Each managed variable is registered with monkeypatch before removal so
    that anything a command loads (e.g. from a .env file) is undone at
    teardown.
    """
    for var in MANAGED_ENV_VARS:
        monkeypatch.setenv(var, "placeholder")
        monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
