"""
Unit tests for contract resolution.
"""

import json
from unittest.mock import MagicMock

import pytest

from conftest import CONTRACT
from iqspace.contract_resolver import (
    ABI_DIR,
    ContractName,
    ContractResolver,
    Web3ContractResolver,
    load_abi,
)
from iqspace.errors import ContractResolutionError


def _function_names(abi):
    return {entry["name"] for entry in abi if entry.get("type") == "function"}


class TestLoadAbi:
    """Test bundled ABI loading."""

    @pytest.mark.parametrize("name", list(ContractName))
    def test_every_contract_has_an_abi(self, name):
        abi = load_abi(name)

        assert isinstance(abi, list)
        assert _function_names(abi)

    def test_universe_wizard_abi(self):
        names = _function_names(load_abi(ContractName.UNIVERSE_WIZARD_V1))

        assert {"setupUniverse", "setupUniverseAndWarper"} <= names

    def test_renting_manager_abi(self):
        names = _function_names(load_abi(ContractName.RENTING_MANAGER))

        assert {"estimateRent", "rent", "assetRentalStatus"} <= names

    def test_missing_abi(self, tmp_path):
        with pytest.raises(ContractResolutionError) as exc_info:
            load_abi(ContractName.METAHUB, str(tmp_path))

        assert exc_info.value.contract_name == "Metahub"

    def test_malformed_abi(self, tmp_path):
        (tmp_path / "Metahub.json").write_text("{not json")

        with pytest.raises(ContractResolutionError, match="Malformed"):
            load_abi(ContractName.METAHUB, str(tmp_path))

    def test_custom_abi_dir(self, tmp_path):
        abi = [{"type": "function", "name": "baseToken", "inputs": [], "outputs": []}]
        (tmp_path / "Metahub.json").write_text(json.dumps(abi))

        assert load_abi(ContractName.METAHUB, str(tmp_path)) == abi


class TestWeb3ContractResolver:
    """Test the web3 backed resolver."""

    def test_is_a_contract_resolver(self):
        assert isinstance(Web3ContractResolver(MagicMock()), ContractResolver)

    def test_resolve(self):
        web3 = MagicMock()
        resolver = Web3ContractResolver(web3)

        contract = resolver.resolve(ContractName.METAHUB, CONTRACT)

        assert contract is web3.eth.contract.return_value
        web3.eth.contract.assert_called_once_with(
            address=CONTRACT, abi=load_abi(ContractName.METAHUB, ABI_DIR)
        )

    def test_resolve_unknown_name(self):
        resolver = Web3ContractResolver(MagicMock())

        with pytest.raises(ContractResolutionError):
            resolver.resolve("Metahub", CONTRACT)

    def test_resolver_is_abstract(self):
        with pytest.raises(TypeError):
            ContractResolver()
