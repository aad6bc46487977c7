"""Renting manager adapter: rent estimation, renting and rental queries."""

from typing import Any, Dict, List, Sequence, Union

from hexbytes import HexBytes

from ..caip import AccountId, AssetId
from ..constants import AssetNamespace, RentalStatus, normalize_bytes, rental_status_from_code
from ..contract_resolver import ContractName
from ..types import (
    AgreementTerms,
    Asset,
    RentalAgreement,
    RentalFees,
    RentingEstimationParams,
    RentingParams,
)
from .base import Adapter


class RentingManagerAdapter(Adapter):
    """Adapter of ``RentingManager``."""

    contract_name = ContractName.RENTING_MANAGER

    def encode_renting_params(
        self, params: Union[RentingEstimationParams, RentingParams]
    ) -> Dict[str, Any]:
        """``Rentings.Params`` struct shared by ``estimateRent`` and ``rent``."""
        return {
            "listingId": params.listing_id,
            "warper": self.asset_type_to_address(params.warper),
            "renter": self.account_id_to_address(params.renter),
            "rentalPeriod": params.rental_period,
            "paymentToken": self.asset_type_to_address(params.payment_token),
            "listingTermsId": params.listing_terms_id,
            "selectedConfiguratorListingTerms": self.encode_terms(
                params.selected_configurator_listing_terms
            ),
        }

    async def estimate_rent(self, params: RentingEstimationParams) -> RentalFees:
        """Price of renting under ``params``; pass ``total`` as the payment cap of ``rent``."""
        fees = await self._call("estimateRent", self.encode_renting_params(params))
        return RentalFees(*fees)

    async def rent(self, params: RentingParams) -> HexBytes:
        """Rent the listed asset.

        The renter must have approved at least ``params.max_payment_amount``
        of the payment token to the metahub beforehand.
        """
        return await self._transact(
            "rent",
            self.encode_renting_params(params),
            params.token_quote,
            params.token_quote_signature,
            params.max_payment_amount,
        )

    async def rental_agreement(self, rental_id: int) -> RentalAgreement:
        return self._decode_agreement(
            rental_id, await self._call("rentalAgreementInfo", rental_id)
        )

    async def user_rental_count(self, renter: AccountId) -> int:
        return await self._call("userRentalCount", self.account_id_to_address(renter))

    async def user_rental_agreements(
        self, renter: AccountId, offset: int = 0, limit: int = 10
    ) -> List[RentalAgreement]:
        address = self.account_id_to_address(renter)
        rental_ids, agreements = await self._call(
            "userRentalAgreements", address, offset, limit
        )
        return [
            self._decode_agreement(rental_id, agreement)
            for rental_id, agreement in zip(rental_ids, agreements)
        ]

    async def collection_rented_value(
        self, warped_collection_id: Union[bytes, str], renter: AccountId
    ) -> int:
        """Amount of tokens of a warped collection currently rented by ``renter``."""
        address = self.account_id_to_address(renter)
        return await self._call(
            "collectionRentedValue", normalize_bytes(warped_collection_id), address
        )

    async def asset_rental_status(self, warped_asset: Union[Asset, AssetId]) -> RentalStatus:
        asset_id = warped_asset.id if isinstance(warped_asset, Asset) else warped_asset
        code = await self._call("assetRentalStatus", self.encode_asset_id(asset_id))
        return rental_status_from_code(code)

    def _decode_agreement(self, rental_id: int, struct: Sequence[Any]) -> RentalAgreement:
        (
            warped_assets,
            collection_id,
            listing_id,
            renter,
            start_time,
            end_time,
            agreement_terms,
        ) = struct
        listing_terms, universe_tax_terms, protocol_tax_terms, payment = agreement_terms
        payment_token, payment_token_quote = payment
        return RentalAgreement(
            id=rental_id,
            warped_assets=self.decode_assets(warped_assets),
            collection_id=bytes(collection_id),
            listing_id=listing_id,
            renter=self.address_to_account_id(renter),
            start_time=start_time,
            end_time=end_time,
            agreement_terms=AgreementTerms(
                listing_terms=self.decode_listing_terms(listing_terms),
                universe_tax_terms=self.decode_tax_terms(universe_tax_terms),
                protocol_tax_terms=self.decode_tax_terms(protocol_tax_terms),
                payment_token=self.address_to_asset_type(payment_token, AssetNamespace.ERC20),
                payment_token_quote=payment_token_quote,
            ),
        )
