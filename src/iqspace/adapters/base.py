"""
Base class of the contract adapters.

An adapter owns one resolved contract handle. Every public method translates
its arguments through the ``AddressTranslator`` first and only then touches
the contract, so a translation error never leaves a half-sent transaction
behind. Contract and transport errors raised by web3 propagate as they are.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from hexbytes import HexBytes

from ..address_translator import AddressTranslator
from ..caip import AccountId, AssetId, AssetType
from ..constants import AssetNamespace, normalize_bytes
from ..contract_resolver import ContractName, ContractResolver
from ..types import Asset, ListingTerms, TaxTerms, WarperRegistrationParams

logger = logging.getLogger(__name__)


class Adapter:
    """Translate-and-forward wrapper around a single protocol contract."""

    contract_name: ContractName

    def __init__(
        self,
        account_id: AccountId,
        contract_resolver: ContractResolver,
        address_translator: AddressTranslator,
        transaction_params: Optional[Dict[str, Any]] = None,
    ):
        self.contract_resolver = contract_resolver
        self.address_translator = address_translator
        self.transaction_params = dict(transaction_params or {})
        self.address = address_translator.account_id_to_address(account_id)
        self.contract = contract_resolver.resolve(self.contract_name, self.address)

    async def _transact(self, function_name: str, *args: Any) -> HexBytes:
        """Send a transaction and return its hash without waiting for a receipt."""
        logger.debug(f"{self.contract_name.value}.{function_name} -> {self.address}")
        function = getattr(self.contract.functions, function_name)(*args)
        return await function.transact(dict(self.transaction_params))

    async def _call(self, function_name: str, *args: Any) -> Any:
        logger.debug(f"{self.contract_name.value}.{function_name}() @ {self.address}")
        function = getattr(self.contract.functions, function_name)(*args)
        return await function.call()

    def account_id_to_address(self, account_id: AccountId) -> str:
        return self.address_translator.account_id_to_address(account_id)

    def address_to_account_id(self, address: str) -> AccountId:
        return self.address_translator.address_to_account_id(address)

    def asset_type_to_address(self, asset_type: AssetType) -> str:
        return self.address_translator.asset_type_to_address(asset_type)

    def address_to_asset_type(self, address: str, namespace: AssetNamespace) -> AssetType:
        return self.address_translator.address_to_asset_type(address, namespace)

    def encode_asset(self, asset: Asset) -> Dict[str, Any]:
        return self.address_translator.encode_asset(asset)

    def encode_assets(self, assets: Sequence[Asset]) -> List[Dict[str, Any]]:
        return [self.address_translator.encode_asset(asset) for asset in assets]

    def encode_asset_id(self, asset_id: AssetId) -> Dict[str, Any]:
        return self.address_translator.encode_asset_id(asset_id)

    def decode_assets(self, structs: Sequence[Sequence[Any]]) -> List[Asset]:
        return [self.address_translator.decode_asset(struct) for struct in structs]

    @staticmethod
    def encode_terms(terms: Optional[Any]) -> Dict[str, Any]:
        """``{strategyId, strategyData}`` struct of listing or tax terms.

        Missing terms encode as the all-zero struct, which the contracts read
        as "no terms selected".
        """
        if terms is None:
            return {"strategyId": b"\x00" * 4, "strategyData": b""}
        return {
            "strategyId": normalize_bytes(terms.strategy_id),
            "strategyData": normalize_bytes(terms.strategy_data),
        }

    @staticmethod
    def encode_warper_registration_params(
        params: WarperRegistrationParams,
    ) -> Dict[str, Any]:
        return {"name": params.name, "universeId": params.universe_id, "paused": params.paused}

    @staticmethod
    def decode_listing_terms(struct: Sequence[Any]) -> ListingTerms:
        strategy_id, strategy_data = struct
        return ListingTerms(bytes(strategy_id), bytes(strategy_data))

    @staticmethod
    def decode_tax_terms(struct: Sequence[Any]) -> TaxTerms:
        strategy_id, strategy_data = struct
        return TaxTerms(bytes(strategy_id), bytes(strategy_data))
