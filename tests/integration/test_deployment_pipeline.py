"""End-to-end integration tests — registry → resolver → driver document.

These tests exercise SlotwrightSettings, ChainRegistry, ConfigResolver and
the DeploymentConfig rendering working together.
"""

from __future__ import annotations

import pytest

from slotwright.config import SlotwrightSettings
from slotwright.core.chain_registry import SUPPORTED_CHAINS, ChainRegistry
from slotwright.core.config_resolver import MissingCredentialError, mapping_secret_source
from slotwright.core.deployment import build_deployment_config


class TestDeploymentPipeline:
    @pytest.fixture
    def settings(self, clean_env) -> SlotwrightSettings:
        return SlotwrightSettings()

    def test_full_document(self, registry: ChainRegistry, make_secret_source, settings):
        config = build_deployment_config(
            registry, make_secret_source("0xkey", AVALANCHE_API_KEY="snow"), settings
        )
        doc = config.to_driver_dict(reveal_secrets=True)

        assert doc["defaultNetwork"] == "hardhat"
        assert doc["solidity"]["compilers"] == [
            {
                "version": "0.8.20",
                "settings": {
                    "evmVersion": "london",
                    "optimizer": {"enabled": True, "runs": 200},
                },
            }
        ]
        assert doc["networks"]["avalanche"] == {
            "url": "https://api.avax.network/ext/bc/C/rpc",
            "chainId": 43114,
            "accounts": ["0xkey"],
        }
        assert doc["etherscan"]["apiKey"] == {
            "avalanche": "snow",
            "dfk": "not-needed",
            "dfk-testnet": "not-needed",
            "klaytn": "not-needed",
        }
        assert [c["chainId"] for c in doc["etherscan"]["customChains"]] == [
            43114,
            53935,
            335,
            8217,
        ]
        assert doc["paths"]["sources"] == "./src"

    def test_settings_flow_through(self, registry: ChainRegistry):
        settings = SlotwrightSettings(
            credential_var="DEPLOYER_KEY",
            api_key_sentinel="none",
            default_network="dfk-testnet",
            optimizer_runs=1000,
            evm_version="",
        )
        config = build_deployment_config(
            registry, mapping_secret_source({"DEPLOYER_KEY": "0xd"}), settings
        )
        doc = config.to_driver_dict(reveal_secrets=True)
        assert doc["defaultNetwork"] == "dfk-testnet"
        assert doc["networks"]["dfk"]["accounts"] == ["0xd"]
        assert doc["etherscan"]["apiKey"]["klaytn"] == "none"
        compiler = doc["solidity"]["compilers"][0]
        assert compiler["settings"]["optimizer"]["runs"] == 1000
        assert "evmVersion" not in compiler["settings"]

    def test_no_partial_document(self, registry: ChainRegistry, make_secret_source, settings):
        with pytest.raises(MissingCredentialError):
            build_deployment_config(registry, make_secret_source(credential=None), settings)

    def test_custom_registry(self, make_secret_source, settings):
        registry = ChainRegistry(c for c in SUPPORTED_CHAINS if c.name.startswith("dfk"))
        config = build_deployment_config(registry, make_secret_source(), settings)
        assert list(config.chains) == ["dfk", "dfk-testnet"]
