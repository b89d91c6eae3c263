"""L1 calldata fee estimation for roll-up transactions."""

import logging
from typing import Any, Dict, Optional

from ..clients.serialization import serialize_transaction

logger = logging.getLogger(__name__)


class TransactionWatcherFeeMixin:
    @property
    def tracks_calldata_fee(self) -> bool:
        return self.config.track_calldata_fee and self.oracle is not None

    async def _calculate_l1_fee(self, transaction: Dict[str, Any]) -> Optional[int]:
        """
        Ask the gas price oracle what posting this transaction's data to L1 costs.

        Returns:
            Fee in wei, or None when fee tracking is off
        """
        if not self.tracks_calldata_fee:
            return None
        fee = await self.oracle.get_l1_fee(serialize_transaction(transaction))
        logger.debug(f"L1 fee for {transaction.get('hash')}: {fee} wei")
        return fee
