"""
Translation between CAIP identifiers and contract-level values.

An ``AddressTranslator`` is bound to one chain. Identifiers from another
chain are rejected rather than silently stripped to their address, since an
address on the wrong chain points at an unrelated contract.
"""

from typing import Any, Dict, Sequence, Union

from eth_abi import decode, encode
from eth_utils import is_address, to_checksum_address

from .caip import AccountId, AssetId, AssetName, AssetType, ChainId
from .constants import (
    AssetNamespace,
    asset_class_to_namespace,
    namespace_to_asset_class,
    parse_namespace,
)
from .errors import InvalidAssetTypeError, InvalidIdentifierError
from .types import Asset

EVM_NAMESPACE = "eip155"

# ABI layout of Assets.AssetId.data per asset class
_ASSET_DATA_TYPES = {
    AssetNamespace.ERC20: ["address"],
    AssetNamespace.ERC721: ["address", "uint256"],
    AssetNamespace.ERC1155: ["address", "uint256"],
}


class AddressTranslator:
    """Converts SDK identifiers into contract arguments and back."""

    def __init__(self, chain_id: ChainId):
        if chain_id.namespace != EVM_NAMESPACE:
            raise InvalidIdentifierError(
                f"Unsupported chain namespace '{chain_id.namespace}'",
                field="chain_id",
                value=str(chain_id),
                expected=EVM_NAMESPACE,
            )
        self.chain_id = chain_id

    def account_id_to_address(self, account_id: AccountId) -> str:
        """Checksum address of an account on this translator's chain."""
        if not isinstance(account_id, AccountId):
            raise InvalidIdentifierError(
                f"Expected AccountId, got {type(account_id).__name__}",
                field="account_id",
                value=account_id,
            )
        if account_id.chain_id != self.chain_id:
            raise InvalidIdentifierError(
                f"Account {account_id} is not on chain {self.chain_id}",
                field="account_id",
                value=str(account_id),
                expected=str(self.chain_id),
            )
        if not is_address(account_id.address):
            raise InvalidIdentifierError(
                f"Invalid address '{account_id.address}'",
                field="address",
                value=account_id.address,
            )
        return to_checksum_address(account_id.address)

    def address_to_account_id(self, address: str) -> AccountId:
        if not is_address(address):
            raise InvalidIdentifierError(
                f"Invalid address '{address}'", field="address", value=address
            )
        return AccountId(self.chain_id, to_checksum_address(address))

    def asset_type_to_address(self, asset_type: AssetType) -> str:
        """Contract address of an asset type. The namespace is not inspected."""
        if not isinstance(asset_type, (AssetType, AssetId)):
            raise InvalidAssetTypeError(
                f"Expected AssetType, got {type(asset_type).__name__}",
                field="asset_type",
                value=asset_type,
            )
        if asset_type.chain_id != self.chain_id:
            raise InvalidAssetTypeError(
                f"Asset {asset_type} is not on chain {self.chain_id}",
                field="asset_type",
                value=str(asset_type),
                expected=str(self.chain_id),
            )
        reference = asset_type.asset_name.reference
        if not is_address(reference):
            raise InvalidAssetTypeError(
                f"Asset reference '{reference}' is not an address",
                field="asset_name.reference",
                value=reference,
            )
        return to_checksum_address(reference)

    def address_to_asset_type(
        self, address: str, namespace: Union[AssetNamespace, str]
    ) -> AssetType:
        return self.create_asset_type(self.address_to_account_id(address), namespace)

    @staticmethod
    def create_asset_type(
        account_id: AccountId, namespace: Union[AssetNamespace, str]
    ) -> AssetType:
        """Asset type of the contract at ``account_id``."""
        namespace = parse_namespace(namespace)
        return AssetType(account_id.chain_id, AssetName(namespace.value, account_id.address))

    @staticmethod
    def create_asset(
        namespace: Union[AssetNamespace, str],
        account_id: AccountId,
        token_id: Union[int, str],
        value: int = 1,
    ) -> Asset:
        """Asset of ``value`` units of token ``token_id`` of the contract at ``account_id``."""
        asset_type = AddressTranslator.create_asset_type(account_id, namespace)
        return Asset(
            AssetId(asset_type.chain_id, asset_type.asset_name, str(token_id)), value
        )

    @staticmethod
    def namespace_to_asset_class(namespace: Union[AssetNamespace, str]) -> bytes:
        return namespace_to_asset_class(namespace)

    @staticmethod
    def asset_class_to_namespace(asset_class: Union[bytes, str]) -> AssetNamespace:
        return asset_class_to_namespace(asset_class)

    def encode_asset_id(self, asset_id: AssetId) -> Dict[str, Any]:
        """``Assets.AssetId`` struct of a CAIP asset id."""
        namespace = parse_namespace(asset_id.asset_name.namespace)
        asset_class = namespace_to_asset_class(namespace)
        token = self.asset_type_to_address(asset_id)
        data_types = _ASSET_DATA_TYPES[namespace]
        if len(data_types) == 1:
            data = encode(data_types, [token])
        else:
            data = encode(data_types, [token, _token_id(asset_id)])
        return {"class": asset_class, "data": data}

    def decode_asset_id(self, struct: Sequence[Any]) -> AssetId:
        """CAIP asset id of an ``(class, data)`` struct returned by a contract."""
        asset_class, data = struct
        namespace = asset_class_to_namespace(asset_class)
        decoded = decode(_ASSET_DATA_TYPES[namespace], bytes(data))
        token_id = decoded[1] if len(decoded) > 1 else 0
        asset_type = self.address_to_asset_type(decoded[0], namespace)
        return AssetId(asset_type.chain_id, asset_type.asset_name, str(token_id))

    def encode_asset(self, asset: Asset) -> Dict[str, Any]:
        """``Assets.Asset`` struct of an SDK asset."""
        return {"id": self.encode_asset_id(asset.id), "value": asset.value}

    def decode_asset(self, struct: Sequence[Any]) -> Asset:
        asset_id, value = struct
        return Asset(self.decode_asset_id(asset_id), value)


def _token_id(asset_id: AssetId) -> int:
    try:
        return int(asset_id.token_id)
    except ValueError:
        raise InvalidAssetTypeError(
            f"Token id '{asset_id.token_id}' is not numeric",
            field="token_id",
            value=asset_id.token_id,
        ) from None
