"""Selector computation and method key derivation."""

from typing import Any, Dict

from eth_utils import keccak

SELECTOR_HEX_LENGTH = 8


def param_abi_type_to_str(param: Dict[str, Any]) -> str:
    """
    Recursively convert an ABI input definition into its canonical type string.

    Args:
        param: Parameter definition from ABI

    Returns:
        Type string for signature (e.g., "address", "(uint256,address)[]")
    """
    param_type = param["type"]
    if param_type.startswith("tuple"):
        inner = ",".join(param_abi_type_to_str(p) for p in param.get("components", []))
        return f"({inner})" + param_type[len("tuple"):]
    return param_type


def function_signature(abi_item: Dict[str, Any]) -> str:
    """Canonical signature of an ABI function entry, e.g. "transfer(address,uint256)"."""
    types = ",".join(param_abi_type_to_str(p) for p in abi_item.get("inputs", []))
    return f"{abi_item['name']}({types})"


def function_selector(signature: str) -> str:
    """
    Compute the 4-byte function selector from a canonical signature.

    Returns:
        Selector as 8 lowercase hex characters without prefix (e.g. "a9059cbb")
    """
    return keccak(text=signature).hex()[:SELECTOR_HEX_LENGTH]


def selector_from_input(input_data: str) -> str:
    """Leading selector of call data as bare lowercase hex ("" for empty input)."""
    if not input_data:
        return ""
    data = input_data[2:] if input_data.startswith("0x") else input_data
    return data[:SELECTOR_HEX_LENGTH].lower()


def method_id(contract_name: str, input_data: str) -> str:
    """Ledger key for a call: contract name plus the call data's selector."""
    return f"{contract_name}_{selector_from_input(input_data)}"
