"""Transaction normalization and RLP serialization for fee estimation."""

import logging
from typing import Any, Dict, Optional

import rlp
from eth_utils import to_bytes
from web3 import Web3

logger = logging.getLogger(__name__)


def to_hex_str(value: Any) -> Optional[str]:
    """Render bytes/HexBytes/str values as 0x-prefixed lowercase hex."""
    if value is None:
        return None
    if isinstance(value, str):
        if not value.startswith("0x"):
            value = "0x" + value
        return value.lower()
    return Web3.to_hex(value)


def normalize_transaction(tx: Any) -> Dict[str, Any]:
    """
    Convert a web3 transaction (AttributeDict, HexBytes fields) into a plain dict.

    Keys: hash, from, to, input, nonce, gasPrice, gas, value, chainId.
    """
    data = tx.get("input")
    if data is None:
        data = tx.get("data", "0x")
    return {
        "hash": to_hex_str(tx.get("hash")),
        "from": tx.get("from"),
        "to": tx.get("to"),
        "input": to_hex_str(data) or "0x",
        "nonce": int(tx.get("nonce", 0) or 0),
        "gasPrice": int(tx.get("gasPrice", 0) or 0),
        "gas": int(tx.get("gas", 0) or 0),
        "value": int(tx.get("value", 0) or 0),
        "chainId": tx.get("chainId"),
    }


def normalize_receipt(receipt: Any) -> Dict[str, Any]:
    status = receipt.get("status")
    return {
        "transactionHash": to_hex_str(receipt.get("transactionHash")),
        "status": int(status, 16) if isinstance(status, str) else status,
        "gasUsed": int(receipt.get("gasUsed", 0) or 0),
        "contractAddress": receipt.get("contractAddress"),
    }


def serialize_transaction(tx: Dict[str, Any]) -> bytes:
    """
    RLP-encode the unsigned legacy form of a transaction.

    Structure: [nonce, gasPrice, gasLimit, to, value, data]. This is the payload
    the L1 gas price oracle prices; it adds the signature overhead itself.
    """
    to_address = tx.get("to")
    fields = [
        int(tx.get("nonce", 0) or 0),
        int(tx.get("gasPrice", 0) or 0),
        int(tx.get("gas", 0) or 0),
        to_bytes(hexstr=to_address) if to_address else b"",
        int(tx.get("value", 0) or 0),
        to_bytes(hexstr=tx.get("input") or "0x"),
    ]
    encoded = rlp.encode(fields)
    logger.debug(f"Serialized tx {tx.get('hash')} to {len(encoded)} bytes")
    return encoded
