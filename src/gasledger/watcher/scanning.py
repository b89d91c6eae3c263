"""Block range scanning: concurrent fetch, ordered aggregation."""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Tuple

from ..errors import ScanError

logger = logging.getLogger(__name__)

FetchedTransaction = Tuple[Dict[str, Any], Dict[str, Any], Optional[int]]


class TransactionWatcherScanMixin:
    def current_block_number(self) -> int:
        """
        Latest block number, fetched synchronously.

        Raises:
            ScanError: if the node cannot be queried
        """
        async def run() -> int:
            try:
                return await self.client.get_block_number()
            except Exception as e:
                raise ScanError(f"Failed to fetch current block number: {e}") from e
            finally:
                await self.aclose()

        return asyncio.run(run())

    def collect_gas_usage(self, start_block: int, end_block: int) -> int:
        """
        Scan [start_block, end_block] inclusive and record every successful transaction.

        Blocks until the whole range is classified. Synchronous wrapper that runs
        the async pipeline with asyncio.run(), so it must not be called from a
        running event loop (await collect_gas_usage_async there instead).

        Returns:
            Number of successful transactions classified

        Raises:
            ScanError: if any block, receipt or fee query fails
        """
        async def run() -> int:
            try:
                return await self.collect_gas_usage_async(start_block, end_block)
            finally:
                await self.aclose()

        return asyncio.run(run())

    async def collect_gas_usage_async(self, start_block: int, end_block: int) -> int:
        """
        Async body of collect_gas_usage().

        If the scan fails (ScanError or cancellation) the ledger is restored to
        its state before the scan, so a failed range leaves no partial samples
        or bindings behind.
        """
        logger.info(f"Collecting gas usage for blocks {start_block}..{end_block}")
        checkpoint = self.ledger.checkpoint()
        try:
            processed = await self._scan_range(start_block, end_block)
        except BaseException:
            self.ledger.restore(checkpoint)
            raise

        logger.info(
            f"Scan complete: {processed} transaction(s) classified, "
            f"{self.ledger.unresolved_calls} unresolved call(s)"
        )
        return processed

    async def _scan_range(self, start_block: int, end_block: int) -> int:
        processed = 0

        for block_number in range(start_block, end_block + 1):
            try:
                block = await self.client.get_block(block_number)
            except Exception as e:
                raise ScanError(f"Failed to fetch block: {e}", block_number=block_number) from e

            if block is None:
                logger.debug(f"Block {block_number} unavailable, skipping")
                continue

            fetched = await self._fetch_block_transactions(block_number, block.get("transactions", []))

            # Aggregation is sequential so samples keep block/transaction order
            for transaction, receipt, calldata_fee in fetched:
                if not self._is_successful(receipt):
                    logger.debug(f"Skipping failed transaction {transaction.get('hash')}")
                    continue
                try:
                    await self.collect_data(transaction, receipt, calldata_fee)
                except ScanError:
                    raise
                except Exception as e:
                    raise ScanError(
                        f"Failed to classify transaction: {e}",
                        block_number=block_number,
                        tx_hash=transaction.get("hash"),
                    ) from e
                processed += 1

        return processed

    async def _fetch_block_transactions(
        self,
        block_number: int,
        transactions: List[Dict[str, Any]],
    ) -> List[FetchedTransaction]:
        """Fetch receipts (and L1 fees) for a block's transactions, preserving order."""
        semaphore = asyncio.Semaphore(self.config.max_concurrent_requests)

        async def fetch(transaction: Dict[str, Any]) -> FetchedTransaction:
            async with semaphore:
                tx_hash = transaction.get("hash")
                try:
                    receipt = await self.client.get_transaction_receipt(tx_hash)
                except Exception as e:
                    raise ScanError(f"Failed to fetch receipt: {e}", block_number, tx_hash) from e

                calldata_fee = None
                if self._is_successful(receipt):
                    try:
                        calldata_fee = await self._calculate_l1_fee(transaction)
                    except Exception as e:
                        raise ScanError(f"Failed to fetch L1 fee: {e}", block_number, tx_hash) from e
                return transaction, receipt, calldata_fee

        tasks = [asyncio.ensure_future(fetch(tx)) for tx in transactions]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            # First failure wins; the remaining fetches are abandoned
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
