"""
Parameter and result types for the IQ Space SDK.

Parameter objects are built by the caller and translated field by field into
contract structs by the adapters. Result objects are decoded from contract
return values, with addresses lifted back into CAIP identifiers.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .caip import AccountId, AssetId, AssetType
from .constants import WarperPresetId

BytesLike = Union[bytes, str]


@dataclass(frozen=True)
class UniverseParams:
    """Universe name and the ERC-20 tokens it accepts as payment."""

    name: str
    payment_tokens: List[AccountId] = field(default_factory=list)


@dataclass(frozen=True)
class TaxTerms:
    """Strategy-tagged tax terms of a universe-warper pair."""

    strategy_id: BytesLike
    strategy_data: BytesLike


@dataclass(frozen=True)
class ListingTerms:
    """Strategy-tagged pricing terms of a listing."""

    strategy_id: BytesLike
    strategy_data: BytesLike


@dataclass(frozen=True)
class WarperRegistrationParams:
    """Warper registration params."""

    name: str
    universe_id: int
    paused: bool = False


@dataclass(frozen=True)
class WarperPresetInitData:
    """Initialization data of a warper deployed from a preset."""

    metahub: AccountId
    original: AssetType


@dataclass(frozen=True)
class ListingParams:
    lister: AccountId
    configurator: AccountId


@dataclass(frozen=True)
class Asset:
    """A token (by CAIP asset id) and the amount of it."""

    id: AssetId
    value: int = 1


@dataclass(frozen=True)
class AssetListingParams:
    """Assets to list and how they are listed."""

    assets: List[Asset]
    params: ListingParams
    max_lock_period: int
    immediate_payout: bool


@dataclass(frozen=True)
class RentingEstimationParams:
    """Everything the renting manager needs to price a rental."""

    warper: AssetType
    renter: AccountId
    payment_token: AssetType
    listing_id: int
    rental_period: int
    listing_terms_id: int
    selected_configurator_listing_terms: Optional[ListingTerms] = None


@dataclass(frozen=True)
class RentingParams:
    """Renting estimation params plus the payment cap and the token quote."""

    warper: AssetType
    renter: AccountId
    payment_token: AssetType
    listing_id: int
    rental_period: int
    listing_terms_id: int
    max_payment_amount: int
    selected_configurator_listing_terms: Optional[ListingTerms] = None
    token_quote: bytes = b""
    token_quote_signature: bytes = b""

    @classmethod
    def from_estimation(
        cls,
        params: RentingEstimationParams,
        max_payment_amount: int,
        token_quote: bytes = b"",
        token_quote_signature: bytes = b"",
    ) -> "RentingParams":
        return cls(
            warper=params.warper,
            renter=params.renter,
            payment_token=params.payment_token,
            listing_id=params.listing_id,
            rental_period=params.rental_period,
            listing_terms_id=params.listing_terms_id,
            max_payment_amount=max_payment_amount,
            selected_configurator_listing_terms=params.selected_configurator_listing_terms,
            token_quote=token_quote,
            token_quote_signature=token_quote_signature,
        )


@dataclass(frozen=True)
class RentalFees:
    """Breakdown of the price of a rental."""

    total: int
    protocol_fee: int
    lister_base_fee: int
    lister_premium: int
    universe_base_fee: int
    universe_premium: int


@dataclass(frozen=True)
class AgreementTerms:
    """Terms frozen into a rental agreement at rent time."""

    listing_terms: ListingTerms
    universe_tax_terms: TaxTerms
    protocol_tax_terms: TaxTerms
    payment_token: AssetType
    payment_token_quote: int


@dataclass(frozen=True)
class RentalAgreement:
    """On-chain record of a rental."""

    id: int
    warped_assets: List[Asset]
    collection_id: bytes
    listing_id: int
    renter: AccountId
    start_time: int
    end_time: int
    agreement_terms: AgreementTerms


@dataclass(frozen=True)
class UniverseInfo:
    id: int
    name: str
    payment_tokens: List[AccountId]


@dataclass(frozen=True)
class RegisteredWarper:
    """Warper as recorded by the warper manager."""

    address: AssetType
    name: str
    universe_id: int
    paused: bool


@dataclass(frozen=True)
class Listing:
    """Listing as recorded by the listing manager."""

    id: int
    assets: List[Asset]
    lister: AccountId
    beneficiary: AccountId
    configurator: AccountId
    max_lock_period: int
    locked_till: int
    immediate_payout: bool
    delisted: bool
    paused: bool


@dataclass(frozen=True)
class WarperPreset:
    """Preset entry of the preset factory; unknown preset ids stay raw bytes."""

    id: Union[WarperPresetId, bytes]
    implementation: AccountId
    enabled: bool


@dataclass(frozen=True)
class AccountBalance:
    token: AssetType
    amount: int

