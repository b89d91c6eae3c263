"""Derived statistics over recorded samples."""

import logging
from typing import List, Optional

from ..catalog.bytecode import is_empty_bytecode
from ..reporting.costs import gas_fee_to_cost, gas_to_cost, gas_to_percent_of_limit
from .models import DeploymentStats, LedgerSnapshot, MethodStats

logger = logging.getLogger(__name__)


def truncated_mean(samples: List[int]) -> Optional[int]:
    if not samples:
        return None
    return sum(samples) // len(samples)


class GasLedgerStatisticsMixin:
    def _method_stats(self) -> List[MethodStats]:
        show_all = self.config.show_all_methods
        rows = []
        for record in self.methods.values():
            if not record.gas_data and not show_all:
                continue

            average = truncated_mean(record.gas_data)
            fee_average = truncated_mean(record.calldata_fee)
            rows.append(MethodStats(
                contract=record.contract,
                method=record.fn_sig if self.config.show_method_sig else record.method,
                fn_sig=record.fn_sig,
                key=record.key,
                min=min(record.gas_data) if record.gas_data else None,
                max=max(record.gas_data) if record.gas_data else None,
                average=average,
                number_of_calls=len(record.gas_data),
                calldata_fee_average=fee_average,
                cost=self._cost(average),
                calldata_cost=self._calldata_cost(fee_average),
            ))

        rows.sort(key=lambda row: (row.contract, row.method))
        return rows

    def _deployment_stats(self) -> List[DeploymentStats]:
        show_all = self.config.show_all_methods
        rows = []
        for record in self.deployments:
            if not record.gas_data and (not show_all or is_empty_bytecode(record.bytecode)):
                continue

            average = truncated_mean(record.gas_data)
            fee_average = truncated_mean(record.calldata_fee)
            rows.append(DeploymentStats(
                name=record.name,
                min=min(record.gas_data) if record.gas_data else None,
                max=max(record.gas_data) if record.gas_data else None,
                average=average,
                number_of_calls=len(record.gas_data),
                percent_of_limit=(
                    gas_to_percent_of_limit(average, self.block_limit) if average is not None else None
                ),
                calldata_fee_average=fee_average,
                cost=self._cost(average),
                calldata_cost=self._calldata_cost(fee_average),
            ))

        rows.sort(key=lambda row: row.name)
        return rows

    def _cost(self, average: Optional[int]) -> Optional[str]:
        if average is None or not self.config.has_prices():
            return None
        return gas_to_cost(average, self.config.eth_price, self.config.gas_price)

    def _calldata_cost(self, fee_average: Optional[int]) -> Optional[str]:
        if fee_average is None or not self.config.eth_price:
            return None
        return gas_fee_to_cost(fee_average, self.config.eth_price)

    def finalize(self) -> LedgerSnapshot:
        """
        Compute min/max/truncated-mean statistics for every record with samples.

        Zero-sample records are included only when show_all_methods is set,
        and never for contracts without creation bytecode (interfaces).
        Samples are left untouched, so finalize can be called repeatedly.
        """
        snapshot = LedgerSnapshot(
            methods=self._method_stats(),
            deployments=self._deployment_stats(),
            unresolved_calls=self.unresolved_calls,
            block_limit=self.block_limit,
        )
        logger.info(
            f"Finalized ledger: {len(snapshot.methods)} method(s), "
            f"{len(snapshot.deployments)} deployment(s), {snapshot.unresolved_calls} unresolved call(s)"
        )
        return snapshot
