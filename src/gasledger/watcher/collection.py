"""Classification of successful transactions into deployment/method samples."""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

EMPTY_INPUT = ("", "0x")


class TransactionWatcherCollectMixin:
    def _is_successful(self, receipt: Dict[str, Any]) -> bool:
        # Pre-Byzantium receipts carry no status
        status = receipt.get("status")
        if status is None or self.config.include_failed_transactions:
            return True
        return int(status) != 0

    async def collect_data(
        self,
        transaction: Dict[str, Any],
        receipt: Dict[str, Any],
        calldata_fee: Optional[int] = None,
    ) -> None:
        """Record one successful transaction as a deployment or a method call."""
        if receipt.get("contractAddress"):
            self._collect_deployment_data(transaction, receipt, calldata_fee)
        else:
            await self._collect_method_data(transaction, receipt, calldata_fee)

    def _collect_deployment_data(
        self,
        transaction: Dict[str, Any],
        receipt: Dict[str, Any],
        calldata_fee: Optional[int],
    ) -> None:
        match = self.ledger.record_deployment_sample(
            transaction.get("input", "0x"),
            receipt["contractAddress"],
            receipt["gasUsed"],
            calldata_fee,
        )
        if match:
            logger.debug(f"Deployment of {match.name} at {receipt['contractAddress']}: {receipt['gasUsed']} gas")

    async def _collect_method_data(
        self,
        transaction: Dict[str, Any],
        receipt: Dict[str, Any],
        calldata_fee: Optional[int],
    ) -> None:
        input_data = transaction.get("input") or "0x"

        # Plain value transfer: nothing to attribute, and not an unresolved call
        if input_data in EMPTY_INPUT and not self.ledger.lookup_address(transaction.get("to")):
            return

        resolution = await self.resolver.resolve(transaction)
        recorded = self.ledger.record_method_sample(
            resolution.name,
            input_data,
            receipt["gasUsed"],
            calldata_fee,
        )
        if recorded:
            logger.debug(
                f"{resolution.name} 0x{input_data[2:10]} ({resolution.strategy.value}): {receipt['gasUsed']} gas"
            )
