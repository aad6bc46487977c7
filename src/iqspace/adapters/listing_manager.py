"""Listing manager adapter: listing lifecycle and listing queries."""

from typing import Any, List, Sequence, Tuple

from hexbytes import HexBytes

from ..caip import AccountId, AssetType
from ..contract_resolver import ContractName
from ..types import Listing
from .base import Adapter


class ListingManagerAdapter(Adapter):
    """Adapter of ``ListingManager``."""

    contract_name = ContractName.LISTING_MANAGER

    async def disable_listing(self, listing_id: int) -> HexBytes:
        return await self._transact("disableListing", listing_id)

    async def withdraw_listing_assets(self, listing_id: int) -> HexBytes:
        return await self._transact("withdrawListingAssets", listing_id)

    async def pause_listing(self, listing_id: int) -> HexBytes:
        return await self._transact("pauseListing", listing_id)

    async def unpause_listing(self, listing_id: int) -> HexBytes:
        return await self._transact("unpauseListing", listing_id)

    async def listing_info(self, listing_id: int) -> Listing:
        return self._decode_listing(listing_id, await self._call("listingInfo", listing_id))

    async def listings(self, offset: int = 0, limit: int = 10) -> List[Listing]:
        return self._decode_listings(await self._call("listings", offset, limit))

    async def user_listings(
        self, lister: AccountId, offset: int = 0, limit: int = 10
    ) -> List[Listing]:
        address = self.account_id_to_address(lister)
        return self._decode_listings(await self._call("userListings", address, offset, limit))

    async def asset_listings(
        self, original: AssetType, offset: int = 0, limit: int = 10
    ) -> List[Listing]:
        """Listings of assets from the ``original`` collection."""
        address = self.asset_type_to_address(original)
        return self._decode_listings(await self._call("assetListings", address, offset, limit))

    async def listing_count(self) -> int:
        return await self._call("listingCount")

    async def user_listing_count(self, lister: AccountId) -> int:
        return await self._call("userListingCount", self.account_id_to_address(lister))

    async def asset_listing_count(self, original: AssetType) -> int:
        return await self._call("assetListingCount", self.asset_type_to_address(original))

    def _decode_listings(self, result: Tuple[Sequence[int], Sequence[Any]]) -> List[Listing]:
        listing_ids, listings = result
        return [
            self._decode_listing(listing_id, listing)
            for listing_id, listing in zip(listing_ids, listings)
        ]

    def _decode_listing(self, listing_id: int, struct: Sequence[Any]) -> Listing:
        (
            assets,
            lister,
            beneficiary,
            configurator,
            max_lock_period,
            locked_till,
            immediate_payout,
            delisted,
            paused,
        ) = struct
        return Listing(
            id=listing_id,
            assets=self.decode_assets(assets),
            lister=self.address_to_account_id(lister),
            beneficiary=self.address_to_account_id(beneficiary),
            configurator=self.address_to_account_id(configurator),
            max_lock_period=max_lock_period,
            locked_till=locked_till,
            immediate_payout=immediate_payout,
            delisted=delisted,
            paused=paused,
        )
