"""Recording of individual transactions observed by a host."""

import asyncio
import logging

from ..errors import ScanError

logger = logging.getLogger(__name__)


class TransactionWatcherRecordingMixin:
    def record_transaction(self, tx_hash: str) -> bool:
        """
        Fetch and classify a single transaction (for hosts collecting outside a range scan).

        Returns:
            True if the transaction succeeded and was classified

        Raises:
            ScanError: if the transaction, receipt or fee query fails
        """
        async def run() -> bool:
            try:
                return await self.record_transaction_async(tx_hash)
            finally:
                await self.aclose()

        return asyncio.run(run())

    async def record_transaction_async(self, tx_hash: str) -> bool:
        try:
            transaction = await self.client.get_transaction(tx_hash)
            receipt = await self.client.get_transaction_receipt(tx_hash)
        except Exception as e:
            raise ScanError(f"Failed to fetch transaction: {e}", tx_hash=tx_hash) from e

        if not self._is_successful(receipt):
            logger.debug(f"Skipping failed transaction {tx_hash}")
            return False

        try:
            calldata_fee = await self._calculate_l1_fee(transaction)
            await self.collect_data(transaction, receipt, calldata_fee)
        except ScanError:
            raise
        except Exception as e:
            raise ScanError(f"Failed to record transaction: {e}", tx_hash=tx_hash) from e
        return True
