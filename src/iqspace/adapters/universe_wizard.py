"""Universe wizard adapter: universe creation, optionally with a warper."""

from typing import Any, Dict, Optional, Union

from hexbytes import HexBytes

from ..caip import AssetType
from ..constants import ZERO_ADDRESS, ZERO_BYTES32, WarperPresetId, to_warper_preset_id
from ..contract_resolver import ContractName
from ..types import TaxTerms, UniverseParams, WarperRegistrationParams
from .base import Adapter


class UniverseWizardAdapterV1(Adapter):
    """Adapter of ``UniverseWizardV1``."""

    contract_name = ContractName.UNIVERSE_WIZARD_V1

    def encode_universe_params(self, universe_params: UniverseParams) -> Dict[str, Any]:
        return {
            "name": universe_params.name,
            "paymentTokens": [
                self.account_id_to_address(token) for token in universe_params.payment_tokens
            ],
        }

    async def setup_universe(self, universe_params: UniverseParams) -> HexBytes:
        """Create a universe.

        Mints the universe NFT; the sender becomes the universe owner.
        """
        return await self._transact(
            "setupUniverse", self.encode_universe_params(universe_params)
        )

    async def setup_universe_and_warper(
        self,
        universe_params: UniverseParams,
        warper: Optional[AssetType],
        warper_tax_terms: TaxTerms,
        warper_registration_params: WarperRegistrationParams,
        warper_preset_id: Union[WarperPresetId, bytes, str, None] = None,
        warper_init_data: bytes = b"",
    ) -> HexBytes:
        """Create a universe and register a warper in it.

        Pass either an existing ``warper`` or a ``warper_preset_id`` plus
        ``warper_init_data`` to deploy a new warper from a preset.
        """
        params = self.encode_universe_params(universe_params)
        warper_address = self.asset_type_to_address(warper) if warper else ZERO_ADDRESS
        preset_id = to_warper_preset_id(warper_preset_id) if warper_preset_id else ZERO_BYTES32
        return await self._transact(
            "setupUniverseAndWarper",
            params,
            self.encode_terms(warper_tax_terms),
            warper_address,
            self.encode_warper_registration_params(warper_registration_params),
            preset_id,
            warper_init_data,
        )

    async def setup_universe_and_create_warper_from_preset_and_register(
        self,
        universe_params: UniverseParams,
        warper_tax_terms: TaxTerms,
        warper_registration_params: WarperRegistrationParams,
        warper_preset_id: Union[WarperPresetId, bytes, str],
        warper_init_data: bytes,
    ) -> HexBytes:
        return await self.setup_universe_and_warper(
            universe_params,
            None,
            warper_tax_terms,
            warper_registration_params,
            warper_preset_id,
            warper_init_data,
        )

    async def setup_universe_and_register_existing_warper(
        self,
        universe_params: UniverseParams,
        warper: AssetType,
        warper_tax_terms: TaxTerms,
        warper_registration_params: WarperRegistrationParams,
    ) -> HexBytes:
        return await self.setup_universe_and_warper(
            universe_params, warper, warper_tax_terms, warper_registration_params
        )
