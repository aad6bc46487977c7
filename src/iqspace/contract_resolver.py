"""
Contract resolution for the IQ Space SDK.

Adapters never look contracts up on their own. They receive a
``ContractResolver`` that turns a contract name and an address into a
callable contract handle, which keeps adapters testable without a node.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, List, Optional

from web3 import AsyncWeb3

from .errors import ContractResolutionError

logger = logging.getLogger(__name__)

ABI_DIR = os.path.join(os.path.dirname(__file__), "abi")


class ContractName(Enum):
    """Protocol contracts the SDK talks to."""

    METAHUB = "Metahub"
    UNIVERSE_REGISTRY = "UniverseRegistry"
    UNIVERSE_WIZARD_V1 = "UniverseWizardV1"
    LISTING_MANAGER = "ListingManager"
    LISTING_WIZARD_V1 = "ListingWizardV1"
    RENTING_MANAGER = "RentingManager"
    WARPER_MANAGER = "WarperManager"
    WARPER_PRESET_FACTORY = "WarperPresetFactory"
    WARPER_WIZARD_V1 = "WarperWizardV1"


class ContractResolver(ABC):
    """Maps (contract name, address) to a contract handle."""

    @abstractmethod
    def resolve(self, name: ContractName, address: str) -> Any:
        """Return a handle exposing ``functions`` and ``events`` for ``address``."""
        pass


@lru_cache(maxsize=None)
def _read_abi(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_abi(name: ContractName, abi_dir: Optional[str] = None) -> List[Dict[str, Any]]:
    """ABI of ``name`` from ``abi_dir`` (the bundled ABIs by default)."""
    path = os.path.join(abi_dir or ABI_DIR, f"{name.value}.json")
    try:
        return json.loads(_read_abi(path))
    except FileNotFoundError as e:
        raise ContractResolutionError(
            f"No ABI for contract '{name.value}' in {abi_dir or ABI_DIR}",
            contract_name=name.value,
            cause=e,
        ) from e
    except json.JSONDecodeError as e:
        raise ContractResolutionError(
            f"Malformed ABI for contract '{name.value}': {e}",
            contract_name=name.value,
            cause=e,
        ) from e


class Web3ContractResolver(ContractResolver):
    """Builds web3 contract handles from the bundled ABIs."""

    def __init__(self, web3: AsyncWeb3, abi_dir: Optional[str] = None):
        self.web3 = web3
        self.abi_dir = abi_dir

    def resolve(self, name: ContractName, address: str) -> Any:
        if not isinstance(name, ContractName):
            raise ContractResolutionError(
                f"Unknown contract '{name}'", contract_name=str(name), address=address
            )
        abi = load_abi(name, self.abi_dir)
        logger.debug(f"Resolved {name.value} at {address}")
        return self.web3.eth.contract(address=address, abi=abi)
