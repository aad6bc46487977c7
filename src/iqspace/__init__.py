"""IQ Space SDK.

Async Python client for the IQ Space rental protocol: universes, warpers,
listings and rentals, addressed by CAIP identifiers.
"""

import logging

from .address_translator import AddressTranslator
from .caip import AccountId, AssetId, AssetName, AssetType, ChainId
from .client import IQSpace
from .config import IQSpaceConfig, create_web3
from .constants import (
    AssetNamespace,
    ListingStrategy,
    RentalStatus,
    TaxStrategy,
    WarperPresetId,
)
from .contract_resolver import ContractName, ContractResolver, Web3ContractResolver
from .errors import (
    ConfigurationError,
    ContractResolutionError,
    InvalidAssetTypeError,
    InvalidIdentifierError,
    IQSpaceError,
    LookupTableError,
    TranslationError,
    UnknownAssetClassError,
    UnknownNamespaceError,
    UnknownStatusCodeError,
    UnknownStrategyError,
)
from .types import (
    AccountBalance,
    AgreementTerms,
    Asset,
    AssetListingParams,
    Listing,
    ListingParams,
    ListingTerms,
    RegisteredWarper,
    RentalAgreement,
    RentalFees,
    RentingEstimationParams,
    RentingParams,
    TaxTerms,
    UniverseInfo,
    UniverseParams,
    WarperPreset,
    WarperPresetInitData,
    WarperRegistrationParams,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Client
    "IQSpace",
    "IQSpaceConfig",
    "create_web3",
    "AddressTranslator",
    "ContractName",
    "ContractResolver",
    "Web3ContractResolver",
    # Identifiers
    "ChainId",
    "AccountId",
    "AssetName",
    "AssetType",
    "AssetId",
    "AssetNamespace",
    "ListingStrategy",
    "TaxStrategy",
    "WarperPresetId",
    "RentalStatus",
    # Types
    "AccountBalance",
    "AgreementTerms",
    "Asset",
    "AssetListingParams",
    "Listing",
    "ListingParams",
    "ListingTerms",
    "RegisteredWarper",
    "RentalAgreement",
    "RentalFees",
    "RentingEstimationParams",
    "RentingParams",
    "TaxTerms",
    "UniverseInfo",
    "UniverseParams",
    "WarperPreset",
    "WarperPresetInitData",
    "WarperRegistrationParams",
    # Errors
    "IQSpaceError",
    "TranslationError",
    "InvalidIdentifierError",
    "InvalidAssetTypeError",
    "UnknownNamespaceError",
    "UnknownAssetClassError",
    "UnknownStatusCodeError",
    "UnknownStrategyError",
    "LookupTableError",
    "ConfigurationError",
    "ContractResolutionError",
]
