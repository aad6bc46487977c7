"""Metahub adapter: protocol base token and user/universe balances."""

from typing import Any, List, Sequence

from hexbytes import HexBytes

from ..caip import AccountId, AssetType
from ..constants import AssetNamespace
from ..contract_resolver import ContractName
from ..types import AccountBalance
from .base import Adapter


class MetahubAdapter(Adapter):
    """Adapter of ``Metahub``."""

    contract_name = ContractName.METAHUB

    async def base_token(self) -> AssetType:
        address = await self._call("baseToken")
        return self.address_to_asset_type(address, AssetNamespace.ERC20)

    async def balance(self, account: AccountId, token: AssetType) -> int:
        """Withdrawable balance of ``account`` in ``token``."""
        return await self._call(
            "balance", self.account_id_to_address(account), self.asset_type_to_address(token)
        )

    async def balances(self, account: AccountId) -> List[AccountBalance]:
        address = self.account_id_to_address(account)
        return self._decode_balances(await self._call("balances", address))

    async def universe_balance(self, universe_id: int, token: AssetType) -> int:
        return await self._call(
            "universeBalance", universe_id, self.asset_type_to_address(token)
        )

    async def universe_balances(self, universe_id: int) -> List[AccountBalance]:
        return self._decode_balances(await self._call("universeBalances", universe_id))

    async def withdraw_funds(self, token: AssetType, amount: int, to: AccountId) -> HexBytes:
        token_address = self.asset_type_to_address(token)
        return await self._transact(
            "withdrawFunds", token_address, amount, self.account_id_to_address(to)
        )

    async def withdraw_universe_funds(
        self, universe_id: int, token: AssetType, amount: int, to: AccountId
    ) -> HexBytes:
        token_address = self.asset_type_to_address(token)
        return await self._transact(
            "withdrawUniverseFunds",
            universe_id,
            token_address,
            amount,
            self.account_id_to_address(to),
        )

    def _decode_balances(self, structs: Sequence[Sequence[Any]]) -> List[AccountBalance]:
        return [
            AccountBalance(self.address_to_asset_type(token, AssetNamespace.ERC20), amount)
            for token, amount in structs
        ]
