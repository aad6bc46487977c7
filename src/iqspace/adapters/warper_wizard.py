"""Warper wizard adapter: warper deployment and registration in one step."""

from typing import Optional, Union

from hexbytes import HexBytes

from ..caip import AssetType
from ..constants import ZERO_ADDRESS, ZERO_BYTES32, WarperPresetId, to_warper_preset_id
from ..contract_resolver import ContractName
from ..types import TaxTerms, WarperRegistrationParams
from .base import Adapter


class WarperWizardAdapterV1(Adapter):
    """Adapter of ``WarperWizardV1``."""

    contract_name = ContractName.WARPER_WIZARD_V1

    async def register_warper(
        self,
        warper: Optional[AssetType],
        tax_terms: TaxTerms,
        registration_params: WarperRegistrationParams,
        preset_id: Union[WarperPresetId, bytes, str, None] = None,
        preset_data: bytes = b"",
    ) -> HexBytes:
        """Register an existing ``warper``, or deploy one from ``preset_id``, with its tax terms."""
        warper_address = self.asset_type_to_address(warper) if warper else ZERO_ADDRESS
        preset = to_warper_preset_id(preset_id) if preset_id else ZERO_BYTES32
        return await self._transact(
            "registerWarper",
            warper_address,
            self.encode_terms(tax_terms),
            self.encode_warper_registration_params(registration_params),
            preset,
            preset_data,
        )

    async def register_existing_warper(
        self,
        warper: AssetType,
        tax_terms: TaxTerms,
        registration_params: WarperRegistrationParams,
    ) -> HexBytes:
        return await self.register_warper(warper, tax_terms, registration_params)

    async def create_warper_from_preset_and_register(
        self,
        tax_terms: TaxTerms,
        registration_params: WarperRegistrationParams,
        preset_id: Union[WarperPresetId, bytes, str],
        preset_data: bytes,
    ) -> HexBytes:
        return await self.register_warper(
            None, tax_terms, registration_params, preset_id, preset_data
        )
