"""Watcher setup: ledger, chain client, fee oracle and resolver wiring."""

import logging
from typing import Optional

from ..clients import ChainClient, FeeOracleClient
from ..config import GasReporterConfig
from ..ledger import GasLedger
from ..resolution import ProxyResolver

logger = logging.getLogger(__name__)


class TransactionWatcherBaseMixin:
    def __init__(
        self,
        config: Optional[GasReporterConfig] = None,
        client=None,
        oracle=None,
        ledger: Optional[GasLedger] = None,
    ):
        """
        Initialize the watcher.

        Args:
            config: Reporter configuration; defaults are used when omitted
            client: Block/receipt query client (defaults to a ChainClient on config.rpc_url)
            oracle: L1 fee oracle client; built from config when fee tracking is on
            ledger: Ledger to record into (defaults to a fresh GasLedger)
        """
        self.config = config or GasReporterConfig()
        self.ledger = ledger or GasLedger(self.config)
        self.client = client or ChainClient(self.config.rpc_url, self.config.request_timeout)

        self.oracle = oracle
        if self.oracle is None and self.config.track_calldata_fee:
            self.oracle = FeeOracleClient(
                self.config.l1_rpc_url,
                self.config.gas_price_oracle_address,
                self.config.request_timeout,
            )

        self.resolver = ProxyResolver(self.ledger, self.client, self.config)

    async def aclose(self) -> None:
        """Release network sessions held by the clients."""
        for client in (self.client, self.oracle):
            close = getattr(client, "close", None)
            if close is not None:
                await close()
