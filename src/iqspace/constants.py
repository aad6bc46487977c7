"""
Protocol identifier tables.

Asset classes, listing and tax strategies are identified on chain by the
first four bytes of ``keccak256(name)``; warper presets by the full 32 bytes.
Every table here is keyed by an enum and is checked when the module is
imported: each enum member must be present and no two members may share an
identifier. The reverse tables are derived from the forward ones so the two
directions cannot drift apart.
"""

from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Type, TypeVar, Union

from eth_utils import keccak, to_bytes

from .errors import (
    LookupTableError,
    TranslationError,
    UnknownAssetClassError,
    UnknownNamespaceError,
    UnknownStatusCodeError,
    UnknownStrategyError,
)

K = TypeVar("K", bound=Enum)
V = TypeVar("V")

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
ZERO_BYTES32 = b"\x00" * 32


def solidity_id(name: str) -> bytes:
    """bytes32 identifier: ``keccak256(name)``."""
    return keccak(text=name)


def solidity_id_bytes4(name: str) -> bytes:
    """bytes4 identifier: first four bytes of ``keccak256(name)``."""
    return keccak(text=name)[:4]


def normalize_bytes(value: Union[bytes, str]) -> bytes:
    """Accept raw bytes or a 0x-prefixed hex string."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return to_bytes(hexstr=value)


class AssetNamespace(str, Enum):
    """CAIP-19 asset namespaces supported by the protocol."""

    ERC20 = "erc20"
    ERC721 = "erc721"
    ERC1155 = "erc1155"


class ListingStrategy(str, Enum):
    """Listing pricing strategies."""

    FIXED_RATE = "FIXED_RATE"
    FIXED_RATE_WITH_REWARD = "FIXED_RATE_WITH_REWARD"


class TaxStrategy(str, Enum):
    """Universe and protocol tax strategies."""

    FIXED_RATE_TAX = "FIXED_RATE_TAX"
    FIXED_RATE_TAX_WITH_REWARD = "FIXED_RATE_TAX_WITH_REWARD"


class WarperPresetId(str, Enum):
    """Warper presets registered in the preset factory."""

    ERC721_CONFIGURABLE_PRESET = "ERC721ConfigurablePreset"


class RentalStatusCode(IntEnum):
    """Raw rental status returned by the renting manager."""

    NONE = 0
    AVAILABLE = 1
    RENTED = 2


class RentalStatus(str, Enum):
    """Rental status labels exposed by the SDK."""

    NONE = "none"
    AVAILABLE = "available"
    RENTED = "rented"


def build_bijection(
    name: str, keys: Type[K], forward: Dict[K, V]
) -> Tuple[Mapping[K, V], Mapping[V, K]]:
    """Freeze ``forward`` and its inverse after checking it is a complete bijection.

    Raises:
        LookupTableError: if a member of ``keys`` is missing, a key is not a
            member of ``keys``, or two keys map to the same value.
    """
    missing = [member for member in keys if member not in forward]
    if missing:
        raise LookupTableError(
            f"Table '{name}' is missing entries for {[m.name for m in missing]}",
            table=name,
        )

    foreign = [key for key in forward if not isinstance(key, keys)]
    if foreign:
        raise LookupTableError(
            f"Table '{name}' has keys outside {keys.__name__}: {foreign}", table=name
        )

    inverse: Dict[V, K] = {}
    for key, value in forward.items():
        if value in inverse:
            raise LookupTableError(
                f"Table '{name}' maps both {inverse[value].name} and {key.name} "
                f"to {value!r}",
                table=name,
            )
        inverse[value] = key

    return MappingProxyType(dict(forward)), MappingProxyType(inverse)


ASSET_CLASS_IDS, ASSET_CLASS_NAMESPACES = build_bijection(
    "asset_classes",
    AssetNamespace,
    {namespace: solidity_id_bytes4(namespace.name) for namespace in AssetNamespace},
)

LISTING_STRATEGY_IDS, LISTING_STRATEGIES = build_bijection(
    "listing_strategies",
    ListingStrategy,
    {strategy: solidity_id_bytes4(strategy.value) for strategy in ListingStrategy},
)

TAX_STRATEGY_IDS, TAX_STRATEGIES = build_bijection(
    "tax_strategies",
    TaxStrategy,
    {strategy: solidity_id_bytes4(strategy.value) for strategy in TaxStrategy},
)

WARPER_PRESET_IDS, WARPER_PRESETS = build_bijection(
    "warper_presets",
    WarperPresetId,
    {preset: solidity_id(preset.value) for preset in WarperPresetId},
)

RENTAL_STATUS_LABELS, RENTAL_STATUS_CODES = build_bijection(
    "rental_status",
    RentalStatusCode,
    {
        RentalStatusCode.NONE: RentalStatus.NONE,
        RentalStatusCode.AVAILABLE: RentalStatus.AVAILABLE,
        RentalStatusCode.RENTED: RentalStatus.RENTED,
    },
)


def parse_namespace(namespace: Union[AssetNamespace, str]) -> AssetNamespace:
    try:
        return AssetNamespace(namespace)
    except ValueError:
        raise UnknownNamespaceError(
            f"Unknown asset namespace '{namespace}'",
            field="namespace",
            value=namespace,
            expected=[n.value for n in AssetNamespace],
        ) from None


def namespace_to_asset_class(namespace: Union[AssetNamespace, str]) -> bytes:
    """Asset class id (bytes4) for a CAIP asset namespace."""
    return ASSET_CLASS_IDS[parse_namespace(namespace)]


def asset_class_to_namespace(asset_class: Union[bytes, str]) -> AssetNamespace:
    """CAIP asset namespace for an asset class id."""
    try:
        return ASSET_CLASS_NAMESPACES[normalize_bytes(asset_class)]
    except (KeyError, ValueError, TypeError):
        raise UnknownAssetClassError(
            f"Unknown asset class '{asset_class!r}'",
            field="asset_class",
            value=asset_class,
        ) from None


def rental_status_from_code(code: int) -> RentalStatus:
    """Relabel a raw rental status code.

    An unknown code is an error rather than a default: the table must cover
    every status of the deployed renting manager.
    """
    try:
        return RENTAL_STATUS_LABELS[RentalStatusCode(code)]
    except (ValueError, TypeError):
        raise UnknownStatusCodeError(
            f"Unknown rental status code {code!r}",
            field="rental_status",
            value=code,
            expected=[c.value for c in RentalStatusCode],
        ) from None


def listing_strategy_from_id(strategy_id: Union[bytes, str]) -> ListingStrategy:
    try:
        return LISTING_STRATEGIES[normalize_bytes(strategy_id)]
    except (KeyError, ValueError, TypeError):
        raise UnknownStrategyError(
            f"Unknown listing strategy '{strategy_id!r}'",
            field="strategy_id",
            value=strategy_id,
        ) from None


def tax_strategy_from_id(strategy_id: Union[bytes, str]) -> TaxStrategy:
    try:
        return TAX_STRATEGIES[normalize_bytes(strategy_id)]
    except (KeyError, ValueError, TypeError):
        raise UnknownStrategyError(
            f"Unknown tax strategy '{strategy_id!r}'",
            field="strategy_id",
            value=strategy_id,
        ) from None


def to_warper_preset_id(preset: Union[WarperPresetId, str, bytes]) -> bytes:
    """bytes32 preset id from a ``WarperPresetId``, its name, or raw bytes."""
    if isinstance(preset, (bytes, bytearray)):
        return bytes(preset)
    if isinstance(preset, str) and preset.startswith("0x"):
        return normalize_bytes(preset)
    try:
        return WARPER_PRESET_IDS[WarperPresetId(preset)]
    except ValueError:
        raise TranslationError(
            f"Unknown warper preset '{preset}'",
            field="preset_id",
            value=preset,
            expected=[p.value for p in WarperPresetId],
        ) from None


def warper_preset_from_id(preset_id: Union[bytes, str]) -> Union[WarperPresetId, bytes]:
    """Known preset for an id, or the raw id when the preset is not in the table."""
    raw = normalize_bytes(preset_id)
    return WARPER_PRESETS.get(raw, raw)
