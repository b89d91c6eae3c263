"""Reporting helpers: cost conversion and JSON snapshot output."""

from .costs import gas_fee_to_cost, gas_to_cost, gas_to_percent_of_limit
from .output import build_output, resolve_output_path, save_json_snapshot

__all__ = [
    "build_output",
    "gas_fee_to_cost",
    "gas_to_cost",
    "gas_to_percent_of_limit",
    "resolve_output_path",
    "save_json_snapshot",
]
