"""Listing wizard adapter."""

from typing import Any, Dict

from hexbytes import HexBytes

from ..contract_resolver import ContractName
from ..types import AssetListingParams, ListingParams, ListingTerms
from .base import Adapter


class ListingWizardAdapterV1(Adapter):
    """Adapter of ``ListingWizardV1``."""

    contract_name = ContractName.LISTING_WIZARD_V1

    def encode_listing_params(self, params: ListingParams) -> Dict[str, Any]:
        return {
            "lister": self.account_id_to_address(params.lister),
            "configurator": self.account_id_to_address(params.configurator),
        }

    async def create_listing_with_terms(
        self,
        universe_id: int,
        asset_listing_params: AssetListingParams,
        listing_terms: ListingTerms,
    ) -> HexBytes:
        """List assets in a universe and register their pricing terms.

        Args:
            universe_id: Universe whose warpers will serve the listing.
            asset_listing_params: Assets and listing configuration.
            listing_terms: Pricing terms, see ``iqspace.terms``.
        """
        assets = self.encode_assets(asset_listing_params.assets)
        params = self.encode_listing_params(asset_listing_params.params)
        return await self._transact(
            "createListingWithTerms",
            universe_id,
            assets,
            params,
            self.encode_terms(listing_terms),
            asset_listing_params.max_lock_period,
            asset_listing_params.immediate_payout,
        )
