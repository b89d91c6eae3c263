"""Heuristic resolution of transaction targets to catalog contracts."""

import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from web3 import Web3

from ..catalog.selectors import selector_from_input
from ..clients.constants import ETHER_ROUTER_ABI, ZERO_ADDRESS
from ..config import GasReporterConfig
from .strategies import STRATEGY_ORDER, Resolution, ResolutionStrategy

logger = logging.getLogger(__name__)


class ProxyResolver:
    """
    Resolves a call's target to a catalog contract name.

    Strategies are tried in STRATEGY_ORDER and the first one producing a name
    that owns the called method wins. Each strategy returns a name or None.
    """

    def __init__(self, ledger, client, config: Optional[GasReporterConfig] = None):
        """
        Args:
            ledger: GasLedger holding the catalog and address cache
            client: ChainClient used for deployed code and router lookups
            config: Reporter configuration (selects the proxy strategy)
        """
        self.ledger = ledger
        self.client = client
        self.config = config or ledger.config

        custom = self.config.proxy_resolver
        if callable(custom):
            self._proxy_strategy = self._resolve_with_custom
        elif custom == "EtherRouter":
            self._proxy_strategy = self.resolve_by_ether_router
        else:
            self._proxy_strategy = self.resolve_by_proxied_selector

        self._handlers: Dict[ResolutionStrategy, Callable[..., Awaitable[Optional[str]]]] = {
            ResolutionStrategy.DIRECT: self.resolve_direct,
            ResolutionStrategy.PROXY: self.resolve_proxy,
            ResolutionStrategy.DEPLOYED_BYTECODE: self.resolve_unbound_by_bytecode,
            ResolutionStrategy.METHOD_SIGNATURE: self.resolve_by_method_signature,
        }

    async def resolve(self, transaction: Dict[str, Any]) -> Resolution:
        bound_name = self.ledger.lookup_address(transaction.get("to"))
        input_data = transaction.get("input", "0x")

        for strategy in STRATEGY_ORDER:
            name = await self._handlers[strategy](transaction, bound_name)
            if name and self.ledger.has_method(name, input_data):
                if strategy is not ResolutionStrategy.DIRECT:
                    logger.debug(f"Resolved {transaction.get('hash')} to {name} via {strategy.value}")
                return Resolution(name, strategy)

        logger.debug(
            f"Could not resolve {transaction.get('hash')} to {transaction.get('to')} "
            f"(selector 0x{selector_from_input(input_data)})"
        )
        return Resolution(None, ResolutionStrategy.UNRESOLVED)

    # -- strategies --------------------------------------------------------

    async def resolve_direct(self, transaction: Dict[str, Any], bound_name: Optional[str]) -> Optional[str]:
        return bound_name

    async def resolve_proxy(self, transaction: Dict[str, Any], bound_name: Optional[str]) -> Optional[str]:
        """Bound address whose contract lacks the called method: a proxied call."""
        if not bound_name:
            return None
        return await self._proxy_strategy(transaction, bound_name)

    async def resolve_by_proxied_selector(self, transaction: Dict[str, Any], bound_name: str) -> Optional[str]:
        """The one other catalog contract exposing the called selector, if unique."""
        candidates = {
            record.contract
            for record in self.ledger.get_all_contracts_with_method(transaction.get("input", "0x"))
            if record.contract != bound_name
        }
        if len(candidates) == 1:
            return candidates.pop()
        if candidates:
            logger.debug(f"Proxy call through {bound_name} is ambiguous between {sorted(candidates)}")
        return None

    async def resolve_by_ether_router(self, transaction: Dict[str, Any], bound_name: str) -> Optional[str]:
        """Ask an EtherRouter for the implementation behind the selector."""
        selector = selector_from_input(transaction.get("input", "0x"))
        if len(selector) != 8:
            return None
        try:
            implementation = await self.client.call_function(
                transaction["to"], ETHER_ROUTER_ABI, "lookup", bytes.fromhex(selector)
            )
        except Exception as e:
            logger.debug(f"EtherRouter lookup failed on {transaction.get('to')}: {e}")
            return None

        if not implementation or implementation.lower() == ZERO_ADDRESS:
            return None
        implementation = Web3.to_checksum_address(implementation)

        name = self.ledger.lookup_address(implementation)
        if name:
            return name
        return await self.resolve_by_deployed_bytecode(implementation)

    async def _resolve_with_custom(self, transaction: Dict[str, Any], bound_name: str) -> Optional[str]:
        result = self.config.proxy_resolver(self, transaction)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def resolve_unbound_by_bytecode(self, transaction: Dict[str, Any], bound_name: Optional[str]) -> Optional[str]:
        """Unbound target (factory deployment, pre-range deployment): match its code."""
        if bound_name or not transaction.get("to"):
            return None
        return await self.resolve_by_deployed_bytecode(transaction["to"])

    async def resolve_by_deployed_bytecode(self, address: str) -> Optional[str]:
        """
        Match the code deployed at address against known runtime bytecode.

        A match is bound into the address cache. Query failures count as no match.
        """
        try:
            code = await self.client.get_code(address)
        except Exception as e:
            logger.debug(f"Failed to fetch code at {address}: {e}")
            return None

        deployment = self.ledger.get_contract_by_deployed_bytecode(code)
        if deployment is None:
            return None

        self.ledger.bind_address(address, deployment.name)
        return deployment.name

    async def resolve_by_method_signature(self, transaction: Dict[str, Any], bound_name: Optional[str]) -> Optional[str]:
        """Last resort: first catalog contract (registration order) exposing the selector."""
        matches = self.ledger.get_all_contracts_with_method(transaction.get("input", "0x"))
        if matches:
            return matches[0].contract
        return None
