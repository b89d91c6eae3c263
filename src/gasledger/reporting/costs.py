"""Gas and fee conversions into currency and block-limit terms."""

from typing import Optional

GWEI = 10 ** 9
WEI_PER_ETH = 10 ** 18


def gas_to_cost(gas: int, eth_price: float, gas_price: float) -> str:
    """Cost of `gas` units at `gas_price` gwei, in the configured currency (2 decimals)."""
    return f"{(float(gas_price) / GWEI) * gas * float(eth_price):.2f}"


def gas_fee_to_cost(fee_wei: int, eth_price: float) -> str:
    """Cost of a fee already expressed in wei, in the configured currency (2 decimals)."""
    return f"{(fee_wei / WEI_PER_ETH) * float(eth_price):.2f}"


def gas_to_percent_of_limit(gas_used: int, block_limit: Optional[int]) -> Optional[float]:
    """Share of the block gas limit, as a percentage rounded to one decimal."""
    if not block_limit:
        return None
    return round((1000 * gas_used) / block_limit) / 10
