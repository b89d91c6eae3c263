"""Async JSON-RPC client for blocks, receipts and deployed code."""

import logging
from typing import Any, Dict, List, Optional

from aiohttp import ClientTimeout
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3
from web3.exceptions import BlockNotFound

from .serialization import normalize_receipt, normalize_transaction, to_hex_str

logger = logging.getLogger(__name__)


def make_async_web3(rpc_url: str, request_timeout: float) -> AsyncWeb3:
    return AsyncWeb3(AsyncHTTPProvider(
        rpc_url,
        request_kwargs={"timeout": ClientTimeout(total=request_timeout)},
    ))


class ChainClient:
    """
    Block/receipt query interface over an AsyncWeb3 connection.

    Returned blocks, transactions and receipts are plain dicts with hex string
    fields (see serialization.normalize_*).
    """

    def __init__(self, rpc_url: str, request_timeout: float = 30.0, w3: Optional[AsyncWeb3] = None):
        self.rpc_url = rpc_url
        self.w3 = w3 or make_async_web3(rpc_url, request_timeout)

    async def get_block_number(self) -> int:
        return int(await self.w3.eth.block_number)

    async def get_block(self, number: int) -> Optional[Dict[str, Any]]:
        """Block with full transactions, or None if the block does not exist (yet)."""
        try:
            block = await self.w3.eth.get_block(number, full_transactions=True)
        except BlockNotFound:
            return None
        if block is None:
            return None

        transactions: List[Dict[str, Any]] = [normalize_transaction(tx) for tx in block["transactions"]]
        return {
            "number": int(block["number"]),
            "hash": to_hex_str(block.get("hash")),
            "gasLimit": int(block.get("gasLimit", 0) or 0),
            "transactions": transactions,
        }

    async def get_transaction(self, tx_hash: str) -> Dict[str, Any]:
        return normalize_transaction(await self.w3.eth.get_transaction(tx_hash))

    async def get_transaction_receipt(self, tx_hash: str) -> Dict[str, Any]:
        return normalize_receipt(await self.w3.eth.get_transaction_receipt(tx_hash))

    async def get_code(self, address: str) -> str:
        code = await self.w3.eth.get_code(Web3.to_checksum_address(address))
        return to_hex_str(code) or "0x"

    async def call_function(self, address: str, abi: List[Dict[str, Any]], fn_name: str, *args: Any) -> Any:
        contract = self.w3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)
        return await getattr(contract.functions, fn_name)(*args).call()

    async def close(self) -> None:
        provider = self.w3.provider
        if hasattr(provider, "disconnect"):
            await provider.disconnect()
