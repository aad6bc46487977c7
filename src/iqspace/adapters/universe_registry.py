"""Universe registry adapter."""

from hexbytes import HexBytes

from ..caip import AccountId, AssetType
from ..constants import AssetNamespace
from ..contract_resolver import ContractName
from ..types import UniverseInfo
from .base import Adapter


class UniverseRegistryAdapter(Adapter):
    """Adapter of ``UniverseRegistry``."""

    contract_name = ContractName.UNIVERSE_REGISTRY

    async def universe(self, universe_id: int) -> UniverseInfo:
        name, payment_tokens = await self._call("universe", universe_id)
        return UniverseInfo(
            id=universe_id,
            name=name,
            payment_tokens=[self.address_to_account_id(token) for token in payment_tokens],
        )

    async def universe_name(self, universe_id: int) -> str:
        return await self._call("universeName", universe_id)

    async def universe_owner(self, universe_id: int) -> AccountId:
        return self.address_to_account_id(await self._call("universeOwner", universe_id))

    async def is_universe_owner(self, universe_id: int, account_id: AccountId) -> bool:
        account = self.account_id_to_address(account_id)
        return await self._call("isUniverseOwner", universe_id, account)

    async def universe_token(self) -> AssetType:
        """The ERC-721 contract that mints universe NFTs."""
        address = await self._call("universeToken")
        return self.address_to_asset_type(address, AssetNamespace.ERC721)

    async def update_universe_name(self, universe_id: int, name: str) -> HexBytes:
        return await self._transact("setUniverseName", universe_id, name)

    async def register_universe_payment_token(
        self, universe_id: int, payment_token: AccountId
    ) -> HexBytes:
        token = self.account_id_to_address(payment_token)
        return await self._transact("registerUniversePaymentToken", universe_id, token)

    async def remove_universe_payment_token(
        self, universe_id: int, payment_token: AccountId
    ) -> HexBytes:
        token = self.account_id_to_address(payment_token)
        return await self._transact("removeUniversePaymentToken", universe_id, token)
