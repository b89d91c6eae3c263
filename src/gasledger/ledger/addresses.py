"""Address -> contract name cache, scoped to one unit of work."""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class GasLedgerAddressMixin:
    def lookup_address(self, address: Optional[str]) -> Optional[str]:
        if not address:
            return None
        return self.address_cache.get(address.lower())

    def bind_address(self, address: str, name: str) -> None:
        """Bind an address to a contract name; a newer observation replaces an older one."""
        key = address.lower()
        previous = self.address_cache.get(key)
        if previous and previous != name:
            logger.debug(f"Rebinding {address} from {previous} to {name}")
        self.address_cache[key] = name

    def reset_address_cache(self) -> None:
        """
        Forget every address binding.

        Called once at each unit-of-work boundary: snapshot/revert between
        units can place a different contract at a previously seen address.
        """
        logger.debug(f"Clearing address cache ({len(self.address_cache)} entries)")
        self.address_cache = {}
