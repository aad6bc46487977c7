"""
SDK configuration.

``IQSpaceConfig`` describes how to reach a node and which account signs
transactions. It can be built directly, from a dictionary, or from
``IQSPACE_*`` environment variables.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from aiohttp import ClientTimeout
from eth_utils import is_address
from web3 import AsyncHTTPProvider, AsyncWeb3

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "IQSPACE_"


@dataclass
class IQSpaceConfig:
    """IQ Space client configuration."""

    rpc_url: str = "http://localhost:8545"
    chain_id: Optional[int] = None  # read from the node when unset
    signer: Optional[str] = None
    request_timeout: int = 30
    abi_path: Optional[str] = None

    def validate(self) -> None:
        """Raise ``ConfigurationError`` on the first invalid setting."""
        if not self.rpc_url or not self.rpc_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"rpc_url must be an http(s) URL, got '{self.rpc_url}'",
                config_key="rpc_url",
                config_value=self.rpc_url,
            )
        if self.chain_id is not None and self.chain_id <= 0:
            raise ConfigurationError(
                f"chain_id must be positive, got {self.chain_id}",
                config_key="chain_id",
                config_value=self.chain_id,
            )
        if self.signer is not None and not is_address(self.signer):
            raise ConfigurationError(
                f"signer must be an address, got '{self.signer}'",
                config_key="signer",
                config_value=self.signer,
            )
        if self.request_timeout <= 0:
            raise ConfigurationError(
                f"request_timeout must be positive, got {self.request_timeout}",
                config_key="request_timeout",
                config_value=self.request_timeout,
            )
        if self.abi_path is not None and not os.path.isdir(self.abi_path):
            raise ConfigurationError(
                f"abi_path '{self.abi_path}' is not a directory",
                config_key="abi_path",
                config_value=self.abi_path,
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "rpc_url": self.rpc_url,
            "chain_id": self.chain_id,
            "signer": self.signer,
            "request_timeout": self.request_timeout,
            "abi_path": self.abi_path,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IQSpaceConfig":
        """Create from dictionary."""
        return cls(
            rpc_url=data.get("rpc_url", "http://localhost:8545"),
            chain_id=data.get("chain_id"),
            signer=data.get("signer"),
            request_timeout=data.get("request_timeout", 30),
            abi_path=data.get("abi_path"),
        )

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, prefix: str = ENV_PREFIX
    ) -> "IQSpaceConfig":
        """Create from ``<prefix>RPC_URL``, ``<prefix>CHAIN_ID`` and friends."""
        environ = os.environ if environ is None else environ
        defaults = cls()

        def _int(key: str, default: Optional[int]) -> Optional[int]:
            raw = environ.get(prefix + key)
            if raw is None or raw == "":
                return default
            try:
                return int(raw)
            except ValueError:
                raise ConfigurationError(
                    f"{prefix + key} must be an integer, got '{raw}'",
                    config_key=prefix + key,
                    config_value=raw,
                ) from None

        config = cls(
            rpc_url=environ.get(prefix + "RPC_URL", defaults.rpc_url),
            chain_id=_int("CHAIN_ID", defaults.chain_id),
            signer=environ.get(prefix + "SIGNER") or None,
            request_timeout=_int("REQUEST_TIMEOUT", defaults.request_timeout),
            abi_path=environ.get(prefix + "ABI_PATH") or None,
        )
        logger.debug(f"Loaded configuration from environment: {config.to_dict()}")
        return config


def create_web3(config: IQSpaceConfig) -> AsyncWeb3:
    """Async web3 client for ``config.rpc_url``."""
    config.validate()
    provider = AsyncHTTPProvider(
        config.rpc_url, request_kwargs={"timeout": ClientTimeout(total=config.request_timeout)}
    )
    return AsyncWeb3(provider)
