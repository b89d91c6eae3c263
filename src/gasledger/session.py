"""
Run/unit lifecycle bridge for synchronous test-runner hosts.

A host calls begin_run() once before any test, begin_unit() at the start of
each test and end_run() after the last one. Every call blocks until its
async work has finished.
"""

import logging
from typing import Iterable, Optional

from .catalog.artifacts import ContractArtifact
from .config import GasReporterConfig
from .ledger.models import LedgerSnapshot
from .reporting.output import resolve_output_path, save_json_snapshot
from .watcher import TransactionWatcher

logger = logging.getLogger(__name__)


class GasReporterSession:
    def __init__(
        self,
        config: GasReporterConfig,
        artifacts: Iterable[ContractArtifact],
        watcher: Optional[TransactionWatcher] = None,
    ):
        self.config = config
        self.artifacts = list(artifacts)
        self.watcher = watcher or TransactionWatcher(config)
        self.start_block: Optional[int] = None
        self.end_block: Optional[int] = None

    @property
    def ledger(self):
        return self.watcher.ledger

    def begin_run(self) -> int:
        """
        Build the catalog and remember where the run starts.

        Raises:
            CatalogError: if the artifacts are malformed (before any scanning)
        """
        self.ledger.initialize(self.artifacts)
        self.start_block = self.watcher.current_block_number()
        logger.info(f"Gas reporter run starting at block {self.start_block}")
        return self.start_block

    def begin_unit(self) -> None:
        self.ledger.reset_address_cache()

    def record_transaction(self, tx_hash: str) -> bool:
        return self.watcher.record_transaction(tx_hash)

    def end_run(self) -> LedgerSnapshot:
        """
        Scan the blocks mined during the run and finalize statistics.

        The range runs from the block current at begin_run() through the latest
        block, both inclusive, so deployments mined in the start block (fixtures,
        migrations) are attributed and bound. With collected_outside the scan
        is skipped, since the host already recorded transactions through
        record_transaction().

        Raises:
            ScanError: if the scan fails; no snapshot is produced then
        """
        if self.start_block is None:
            raise RuntimeError("end_run() called before begin_run()")

        self.end_block = self.watcher.current_block_number()
        if not self.config.collected_outside:
            self.watcher.collect_gas_usage(self.start_block, self.end_block)

        snapshot = self.ledger.finalize()

        output_path = resolve_output_path(self.config)
        if output_path:
            save_json_snapshot(snapshot, self.config, output_path)
        return snapshot
