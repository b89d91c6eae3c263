"""Reporter configuration value object."""

import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Literal, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "GAS_REPORTER_"

# OVM_GasPriceOracle predeploy on OP-stack chains
DEFAULT_GAS_PRICE_ORACLE = "0x420000000000000000000000000000000000000F"

ProxyResolverOption = Union[None, Literal["EtherRouter"], Callable[..., Any]]


class GasReporterConfig(BaseModel):
    """
    Configuration shared by the watcher, ledger and resolver.

    Built once per run and passed by reference into each component.
    """
    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    rpc_url: str = "http://localhost:8545"
    request_timeout: float = Field(default=30.0, gt=0)
    block_limit: int = Field(default=6718946, gt=0)

    # Cost conversion
    currency: str = "USD"
    token: str = "ETH"
    eth_price: Optional[float] = Field(default=None, ge=0)
    gas_price: Optional[float] = Field(default=None, ge=0)

    # Statistics presentation
    show_all_methods: bool = False
    show_method_sig: bool = False

    # L1 calldata fee accounting (OP-stack style roll-ups)
    track_calldata_fee: bool = False
    l1_rpc_url: str = "https://mainnet.optimism.io"
    gas_price_oracle_address: str = DEFAULT_GAS_PRICE_ORACLE

    # Scanning
    include_failed_transactions: bool = False
    max_concurrent_requests: int = Field(default=8, ge=1)
    proxy_resolver: ProxyResolverOption = None
    collected_outside: bool = False

    output_file: Optional[Path] = None

    def has_prices(self) -> bool:
        return bool(self.eth_price) and bool(self.gas_price)

    def to_output_dict(self) -> Dict[str, Any]:
        """Serializable view of the config; callables are reported by name."""
        data = self.model_dump(mode="json", exclude={"proxy_resolver"})
        resolver = self.proxy_resolver
        if callable(resolver):
            data["proxy_resolver"] = getattr(resolver, "__name__", "custom")
        else:
            data["proxy_resolver"] = resolver
        return data

    @classmethod
    def from_env(cls, **overrides: Any) -> "GasReporterConfig":
        """
        Build a config from GAS_REPORTER_* environment variables.

        Priority: explicit overrides > environment variables > defaults.
        A .env file in the working directory is loaded first.
        """
        load_dotenv(override=False)

        values: Dict[str, Any] = {}
        for name in cls.model_fields:
            if name == "proxy_resolver":
                continue
            raw = os.getenv(ENV_PREFIX + name.upper())
            if raw is not None and raw != "":
                values[name] = raw

        resolver = os.getenv(ENV_PREFIX + "PROXY_RESOLVER")
        if resolver:
            values["proxy_resolver"] = resolver

        values.update({k: v for k, v in overrides.items() if v is not None})

        try:
            config = cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid gas reporter configuration: {e}") from e

        logger.debug(f"Loaded configuration: {config.to_output_dict()}")
        return config
