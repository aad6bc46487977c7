"""Warper preset factory adapter."""

import logging
from typing import Any, List, Optional, Sequence, Union

from hexbytes import HexBytes

from ..caip import AssetType
from ..constants import (
    AssetNamespace,
    WarperPresetId,
    to_warper_preset_id,
    warper_preset_from_id,
)
from ..contract_resolver import ContractName
from ..terms import make_warper_preset_init_data
from ..types import WarperPreset, WarperPresetInitData
from .base import Adapter

logger = logging.getLogger(__name__)

PresetId = Union[WarperPresetId, bytes, str]


class WarperPresetFactoryAdapter(Adapter):
    """Adapter of ``WarperPresetFactory``."""

    contract_name = ContractName.WARPER_PRESET_FACTORY

    def encode_init_data(self, init_data: WarperPresetInitData) -> bytes:
        return make_warper_preset_init_data(
            self.asset_type_to_address(init_data.original),
            self.account_id_to_address(init_data.metahub),
        )

    async def deploy_preset(
        self, preset_id: PresetId, init_data: WarperPresetInitData
    ) -> HexBytes:
        """Deploy a warper from a preset.

        The new warper address is only known once the transaction is mined;
        see ``find_warper_by_deployment_transaction``.
        """
        data = self.encode_init_data(init_data)
        return await self._transact("deployPreset", to_warper_preset_id(preset_id), data)

    async def preset(self, preset_id: PresetId) -> WarperPreset:
        return self._decode_preset(await self._call("preset", to_warper_preset_id(preset_id)))

    async def presets(self) -> List[WarperPreset]:
        return [self._decode_preset(preset) for preset in await self._call("presets")]

    async def enable_preset(self, preset_id: PresetId) -> HexBytes:
        return await self._transact("enablePreset", to_warper_preset_id(preset_id))

    async def disable_preset(self, preset_id: PresetId) -> HexBytes:
        return await self._transact("disablePreset", to_warper_preset_id(preset_id))

    async def preset_enabled(self, preset_id: PresetId) -> bool:
        return await self._call("presetEnabled", to_warper_preset_id(preset_id))

    async def find_warper_by_deployment_transaction(
        self, transaction_hash: Union[HexBytes, str]
    ) -> Optional[AssetType]:
        """Warper deployed by ``transaction_hash``, or ``None`` if it deployed none.

        Waits for the transaction receipt.
        """
        receipt = await self.contract.w3.eth.wait_for_transaction_receipt(transaction_hash)
        events = self.contract.events.WarperPresetDeployed().process_receipt(receipt)
        if not events:
            logger.debug(f"No WarperPresetDeployed event in {HexBytes(transaction_hash).hex()}")
            return None
        return self.address_to_asset_type(events[0]["args"]["warper"], AssetNamespace.ERC721)

    def _decode_preset(self, struct: Sequence[Any]) -> WarperPreset:
        preset_id, implementation, enabled = struct
        return WarperPreset(
            id=warper_preset_from_id(bytes(preset_id)),
            implementation=self.address_to_account_id(implementation),
            enabled=enabled,
        )
