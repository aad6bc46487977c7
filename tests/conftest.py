"""
Shared fixtures for the IQ Space SDK tests.

Adapters are exercised against ``MagicMock`` contract handles served by a
static resolver, so no node is needed. ``InMemoryRentingManager`` keeps just
enough state to follow an asset from listed to rented.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple
from unittest.mock import AsyncMock, MagicMock

import pytest
from hexbytes import HexBytes
from web3.exceptions import ContractLogicError

from iqspace.address_translator import AddressTranslator
from iqspace.caip import AccountId, AssetId, AssetName, AssetType, ChainId
from iqspace.contract_resolver import ContractName, ContractResolver

CHAIN_ID = ChainId("eip155", "31337")
OTHER_CHAIN_ID = ChainId("eip155", "1")

SIGNER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
RENTER = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
CONTRACT = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
TOKEN = "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512"
ORIGINAL = "0x9fE46736679d2D9a65F0992F2272dE9f3c7fa6e0"
WARPER = "0xCf7Ed3AccA5a467e9e704C703E8D87F634fB0Fc9"

TX_HASH = HexBytes("0x" + "ab" * 32)


def account(address: str, chain_id: ChainId = CHAIN_ID) -> AccountId:
    return AccountId(chain_id, address)


def asset_type(address: str, namespace: str = "erc721", chain_id: ChainId = CHAIN_ID) -> AssetType:
    return AssetType(chain_id, AssetName(namespace, address))


def asset_id(address: str, token_id: str, namespace: str = "erc721") -> AssetId:
    return AssetId(CHAIN_ID, AssetName(namespace, address), token_id)


def stub_function(contract: MagicMock, name: str, result: Any = None) -> MagicMock:
    """Make ``contract.functions.<name>(...)`` answer ``call`` with ``result``."""
    function = getattr(contract.functions, name)
    function.return_value.call = AsyncMock(return_value=result)
    function.return_value.transact = AsyncMock(return_value=TX_HASH)
    return function


class StaticContractResolver(ContractResolver):
    """Serves preset contract handles and records every resolution."""

    def __init__(self, contracts: Optional[Dict[ContractName, Any]] = None):
        self.contracts = dict(contracts or {})
        self.resolved: List[Tuple[ContractName, str]] = []

    def resolve(self, name: ContractName, address: str) -> Any:
        self.resolved.append((name, address))
        if name not in self.contracts:
            self.contracts[name] = MagicMock(name=name.value)
        return self.contracts[name]


class _PreparedCall:
    def __init__(self, handler, *args):
        self._handler = handler
        self._args = args

    async def call(self) -> Any:
        return self._handler(*self._args)

    async def transact(self, transaction: Optional[Dict[str, Any]] = None) -> HexBytes:
        return self._handler(*self._args)


class _RentingFunctions:
    def __init__(self, manager: "InMemoryRentingManager"):
        self._manager = manager

    def estimateRent(self, params):
        return _PreparedCall(lambda: self._manager.fees)

    def rent(self, params, token_quote, token_quote_signature, max_payment_amount):
        return _PreparedCall(self._manager.rent, params, max_payment_amount)

    def assetRentalStatus(self, asset_id):
        return _PreparedCall(self._manager.status_of, asset_id)


class InMemoryRentingManager:
    """Renting manager holding listings and rental status in memory."""

    def __init__(self, fees: Sequence[int]):
        self.fees = tuple(fees)
        self.listings: Dict[int, List[Dict[str, Any]]] = {}
        self.status: Dict[Tuple[bytes, bytes], int] = {}
        self.functions = _RentingFunctions(self)

    @staticmethod
    def _key(asset_id: Dict[str, Any]) -> Tuple[bytes, bytes]:
        return bytes(asset_id["class"]), bytes(asset_id["data"])

    def list_assets(self, listing_id: int, asset_ids: List[Dict[str, Any]]) -> None:
        self.listings[listing_id] = asset_ids

    def status_of(self, asset_id: Dict[str, Any]) -> int:
        return self.status.get(self._key(asset_id), 0)

    def rent(self, params: Dict[str, Any], max_payment_amount: int) -> HexBytes:
        if params["listingId"] not in self.listings:
            raise ContractLogicError("execution reverted: ListingIsNotRegistered")
        if max_payment_amount < self.fees[0]:
            raise ContractLogicError("execution reverted: RentalPriceSlippage")
        for listed in self.listings[params["listingId"]]:
            self.status[self._key(listed)] = 2
        return TX_HASH


@pytest.fixture
def translator() -> AddressTranslator:
    return AddressTranslator(CHAIN_ID)


@pytest.fixture
def resolver() -> StaticContractResolver:
    return StaticContractResolver()


@pytest.fixture
def contract_account() -> AccountId:
    return account(CONTRACT)


@pytest.fixture
def transaction_params() -> Dict[str, Any]:
    return {"from": SIGNER}
