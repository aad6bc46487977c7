"""
Chain agnostic identifiers (CAIP-2, CAIP-10 and CAIP-19).

The SDK never passes raw addresses across its public surface. Accounts are
``AccountId`` values such as ``eip155:1:0xab16...`` and assets are
``AssetType`` values such as ``eip155:1/erc721:0x06012c...``; the address
translator turns them into contract-level addresses.
"""

import re
from dataclasses import dataclass

from .errors import InvalidAssetTypeError, InvalidIdentifierError

CHAIN_NAMESPACE_PATTERN = r"[-a-z0-9]{3,8}"
CHAIN_REFERENCE_PATTERN = r"[-_a-zA-Z0-9]{1,32}"
ACCOUNT_ADDRESS_PATTERN = r"[-.%a-zA-Z0-9]{1,128}"
ASSET_NAMESPACE_PATTERN = r"[-a-z0-9]{3,8}"
ASSET_REFERENCE_PATTERN = r"[-.%a-zA-Z0-9]{1,128}"
TOKEN_ID_PATTERN = r"[-.%a-zA-Z0-9]{1,78}"

_CHAIN_ID_RE = re.compile(
    rf"^(?P<namespace>{CHAIN_NAMESPACE_PATTERN}):(?P<reference>{CHAIN_REFERENCE_PATTERN})$"
)
_ACCOUNT_ID_RE = re.compile(
    rf"^(?P<namespace>{CHAIN_NAMESPACE_PATTERN}):(?P<reference>{CHAIN_REFERENCE_PATTERN})"
    rf":(?P<address>{ACCOUNT_ADDRESS_PATTERN})$"
)
_ASSET_NAME_RE = re.compile(
    rf"^(?P<namespace>{ASSET_NAMESPACE_PATTERN}):(?P<reference>{ASSET_REFERENCE_PATTERN})$"
)
_TOKEN_ID_RE = re.compile(rf"^{TOKEN_ID_PATTERN}$")


@dataclass(frozen=True)
class ChainId:
    """CAIP-2 blockchain identifier, e.g. ``eip155:1``."""

    namespace: str
    reference: str

    def __post_init__(self):
        if not _CHAIN_ID_RE.match(f"{self.namespace}:{self.reference}"):
            raise InvalidIdentifierError(
                f"Invalid chain id '{self.namespace}:{self.reference}'",
                field="chain_id",
                value=f"{self.namespace}:{self.reference}",
            )

    @classmethod
    def parse(cls, value: str) -> "ChainId":
        match = _CHAIN_ID_RE.match(value) if isinstance(value, str) else None
        if match is None:
            raise InvalidIdentifierError(
                f"Invalid chain id '{value}'", field="chain_id", value=value
            )
        return cls(match.group("namespace"), match.group("reference"))

    @classmethod
    def eip155(cls, chain_id: int) -> "ChainId":
        """Chain id of an EVM network given its numeric chain id."""
        return cls("eip155", str(int(chain_id)))

    def __str__(self) -> str:
        return f"{self.namespace}:{self.reference}"


@dataclass(frozen=True)
class AccountId:
    """CAIP-10 account identifier, e.g. ``eip155:1:0xab16...``."""

    chain_id: ChainId
    address: str

    @classmethod
    def parse(cls, value: str) -> "AccountId":
        match = _ACCOUNT_ID_RE.match(value) if isinstance(value, str) else None
        if match is None:
            raise InvalidIdentifierError(
                f"Invalid account id '{value}'", field="account_id", value=value
            )
        chain_id = ChainId(match.group("namespace"), match.group("reference"))
        return cls(chain_id, match.group("address"))

    def __str__(self) -> str:
        return f"{self.chain_id}:{self.address}"


@dataclass(frozen=True)
class AssetName:
    """Asset namespace plus reference, e.g. ``erc721:0x06012c...``."""

    namespace: str
    reference: str

    @classmethod
    def parse(cls, value: str) -> "AssetName":
        match = _ASSET_NAME_RE.match(value) if isinstance(value, str) else None
        if match is None:
            raise InvalidAssetTypeError(
                f"Invalid asset name '{value}'", field="asset_name", value=value
            )
        return cls(match.group("namespace"), match.group("reference"))

    def __str__(self) -> str:
        return f"{self.namespace}:{self.reference}"


@dataclass(frozen=True)
class AssetType:
    """CAIP-19 asset type, e.g. ``eip155:1/erc721:0x06012c...``."""

    chain_id: ChainId
    asset_name: AssetName

    @classmethod
    def parse(cls, value: str) -> "AssetType":
        chain_part, asset_part = _split_asset(value, parts=2)
        return cls(_parse_asset_chain(chain_part, value), AssetName.parse(asset_part))

    def __str__(self) -> str:
        return f"{self.chain_id}/{self.asset_name}"


@dataclass(frozen=True)
class AssetId:
    """CAIP-19 asset id: an asset type narrowed to a single token."""

    chain_id: ChainId
    asset_name: AssetName
    token_id: str

    def __post_init__(self):
        object.__setattr__(self, "token_id", str(self.token_id))
        if not _TOKEN_ID_RE.match(self.token_id):
            raise InvalidAssetTypeError(
                f"Invalid token id '{self.token_id}'",
                field="token_id",
                value=self.token_id,
            )

    @classmethod
    def parse(cls, value: str) -> "AssetId":
        chain_part, asset_part, token_id = _split_asset(value, parts=3)
        return cls(
            _parse_asset_chain(chain_part, value), AssetName.parse(asset_part), token_id
        )

    @property
    def asset_type(self) -> AssetType:
        return AssetType(self.chain_id, self.asset_name)

    def __str__(self) -> str:
        return f"{self.chain_id}/{self.asset_name}/{self.token_id}"


def _split_asset(value: str, parts: int):
    pieces = value.split("/") if isinstance(value, str) else []
    if len(pieces) != parts:
        raise InvalidAssetTypeError(
            f"Invalid asset identifier '{value}'", field="asset", value=value
        )
    return pieces


def _parse_asset_chain(chain_part: str, value: str) -> ChainId:
    try:
        return ChainId.parse(chain_part)
    except InvalidIdentifierError as e:
        raise InvalidAssetTypeError(
            f"Invalid chain in asset identifier '{value}'",
            field="chain_id",
            value=value,
            cause=e,
        ) from e

