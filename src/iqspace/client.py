"""
IQ Space client.

``IQSpace`` binds a web3 connection to one chain and hands out adapters for
the protocol contracts deployed there. Every adapter it creates shares the
same address translator and contract resolver.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar

from web3 import AsyncWeb3

from .adapters import (
    Adapter,
    ListingManagerAdapter,
    ListingWizardAdapterV1,
    MetahubAdapter,
    RentingManagerAdapter,
    UniverseRegistryAdapter,
    UniverseWizardAdapterV1,
    WarperManagerAdapter,
    WarperPresetFactoryAdapter,
    WarperWizardAdapterV1,
)
from .address_translator import AddressTranslator
from .caip import AccountId, ChainId
from .config import IQSpaceConfig, create_web3
from .contract_resolver import ContractResolver, Web3ContractResolver
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=Adapter)


class IQSpace:
    """Entry point of the SDK.

    Example:
        >>> sdk = await IQSpace.init(IQSpaceConfig(rpc_url="http://localhost:8545"))
        >>> wizard = sdk.universe_wizard_v1(AccountId.parse("eip155:31337:0x5FbD..."))
        >>> await wizard.setup_universe(UniverseParams("Universe One", [token]))
    """

    def __init__(
        self,
        web3: AsyncWeb3,
        chain_id: ChainId,
        signer: Optional[str] = None,
        contract_resolver: Optional[ContractResolver] = None,
        abi_dir: Optional[str] = None,
    ):
        self.web3 = web3
        self.chain_id = chain_id
        self.signer = signer
        self.address_translator = AddressTranslator(chain_id)
        self.contract_resolver = contract_resolver or Web3ContractResolver(web3, abi_dir)

    @classmethod
    async def init(
        cls,
        config: Optional[IQSpaceConfig] = None,
        web3: Optional[AsyncWeb3] = None,
        contract_resolver: Optional[ContractResolver] = None,
    ) -> "IQSpace":
        """Connect according to ``config``, asking the node for its chain id if unset."""
        config = config or IQSpaceConfig.from_env()
        if web3 is None:
            web3 = create_web3(config)
        else:
            config.validate()

        chain_id = config.chain_id
        if chain_id is None:
            chain_id = await web3.eth.chain_id
            if not chain_id:
                raise ConfigurationError(
                    "Node did not report a chain id", config_key="chain_id"
                )
        logger.info(f"IQ Space client on chain eip155:{chain_id} via {config.rpc_url}")

        return cls(
            web3,
            ChainId.eip155(chain_id),
            signer=config.signer,
            contract_resolver=contract_resolver,
            abi_dir=config.abi_path,
        )

    @property
    def transaction_params(self) -> Dict[str, Any]:
        return {"from": self.signer} if self.signer else {}

    def account_id(self, address: str) -> AccountId:
        """Account id of ``address`` on the client's chain."""
        return self.address_translator.address_to_account_id(address)

    def _adapter(self, adapter_class: Type[A], account_id: AccountId) -> A:
        return adapter_class(
            account_id,
            self.contract_resolver,
            self.address_translator,
            self.transaction_params,
        )

    def metahub(self, account_id: AccountId) -> MetahubAdapter:
        return self._adapter(MetahubAdapter, account_id)

    def universe_registry(self, account_id: AccountId) -> UniverseRegistryAdapter:
        return self._adapter(UniverseRegistryAdapter, account_id)

    def universe_wizard_v1(self, account_id: AccountId) -> UniverseWizardAdapterV1:
        return self._adapter(UniverseWizardAdapterV1, account_id)

    def listing_manager(self, account_id: AccountId) -> ListingManagerAdapter:
        return self._adapter(ListingManagerAdapter, account_id)

    def listing_wizard_v1(self, account_id: AccountId) -> ListingWizardAdapterV1:
        return self._adapter(ListingWizardAdapterV1, account_id)

    def renting_manager(self, account_id: AccountId) -> RentingManagerAdapter:
        return self._adapter(RentingManagerAdapter, account_id)

    def warper_manager(self, account_id: AccountId) -> WarperManagerAdapter:
        return self._adapter(WarperManagerAdapter, account_id)

    def warper_preset_factory(self, account_id: AccountId) -> WarperPresetFactoryAdapter:
        return self._adapter(WarperPresetFactoryAdapter, account_id)

    def warper_wizard_v1(self, account_id: AccountId) -> WarperWizardAdapterV1:
        return self._adapter(WarperWizardAdapterV1, account_id)
