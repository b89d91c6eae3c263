"""L1 calldata fee oracle (OP-stack GasPriceOracle)."""

import logging
from typing import Optional

from web3 import AsyncWeb3, Web3

from .chain import make_async_web3
from .constants import GAS_PRICE_ORACLE_ABI

logger = logging.getLogger(__name__)


class FeeOracleClient:
    def __init__(
        self,
        rpc_url: str,
        oracle_address: str,
        request_timeout: float = 30.0,
        w3: Optional[AsyncWeb3] = None,
    ):
        """
        Args:
            rpc_url: Endpoint of the roll-up exposing the oracle
            oracle_address: GasPriceOracle contract address
            request_timeout: Per-request timeout in seconds
            w3: Pre-built AsyncWeb3 instance (overrides rpc_url)
        """
        self.w3 = w3 or make_async_web3(rpc_url, request_timeout)
        self.contract = self.w3.eth.contract(
            address=Web3.to_checksum_address(oracle_address),
            abi=GAS_PRICE_ORACLE_ABI,
        )

    async def get_l1_fee(self, serialized_tx: bytes) -> int:
        """Estimated L1 fee in wei for posting the serialized transaction."""
        fee = await self.contract.functions.getL1Fee(serialized_tx).call()
        return int(fee)

    async def close(self) -> None:
        provider = self.w3.provider
        if hasattr(provider, "disconnect"):
            await provider.disconnect()
