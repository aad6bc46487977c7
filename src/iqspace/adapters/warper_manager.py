"""Warper manager adapter."""

from typing import Any, List, Sequence, Tuple

from hexbytes import HexBytes

from ..caip import AssetType
from ..constants import AssetNamespace
from ..contract_resolver import ContractName
from ..types import RegisteredWarper, WarperRegistrationParams
from .base import Adapter


class WarperManagerAdapter(Adapter):
    """Adapter of ``WarperManager``."""

    contract_name = ContractName.WARPER_MANAGER

    async def register_warper(
        self, warper: AssetType, params: WarperRegistrationParams
    ) -> HexBytes:
        """Register a deployed warper in the universe named by ``params``."""
        address = self.asset_type_to_address(warper)
        return await self._transact(
            "registerWarper", address, self.encode_warper_registration_params(params)
        )

    async def deregister_warper(self, warper: AssetType) -> HexBytes:
        return await self._transact("deregisterWarper", self.asset_type_to_address(warper))

    async def pause_warper(self, warper: AssetType) -> HexBytes:
        return await self._transact("pauseWarper", self.asset_type_to_address(warper))

    async def unpause_warper(self, warper: AssetType) -> HexBytes:
        return await self._transact("unpauseWarper", self.asset_type_to_address(warper))

    async def warper(self, warper: AssetType) -> RegisteredWarper:
        address = self.asset_type_to_address(warper)
        return self._decode_warper(address, await self._call("warperInfo", address))

    async def universe_warpers(
        self, universe_id: int, offset: int = 0, limit: int = 10
    ) -> List[RegisteredWarper]:
        return self._decode_warpers(
            await self._call("universeWarpers", universe_id, offset, limit)
        )

    async def universe_warper_count(self, universe_id: int) -> int:
        return await self._call("universeWarperCount", universe_id)

    async def asset_warpers(
        self, original: AssetType, offset: int = 0, limit: int = 10
    ) -> List[RegisteredWarper]:
        """Warpers registered over the ``original`` collection."""
        address = self.asset_type_to_address(original)
        return self._decode_warpers(await self._call("assetWarpers", address, offset, limit))

    async def asset_warper_count(self, original: AssetType) -> int:
        return await self._call("assetWarperCount", self.asset_type_to_address(original))

    def _decode_warpers(
        self, result: Tuple[Sequence[str], Sequence[Any]]
    ) -> List[RegisteredWarper]:
        addresses, warpers = result
        return [
            self._decode_warper(address, warper) for address, warper in zip(addresses, warpers)
        ]

    def _decode_warper(self, address: str, struct: Sequence[Any]) -> RegisteredWarper:
        name, universe_id, paused = struct
        return RegisteredWarper(
            address=self.address_to_asset_type(address, AssetNamespace.ERC721),
            name=name,
            universe_id=universe_id,
            paused=paused,
        )
