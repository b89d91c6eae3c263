"""Ledger state and catalog initialization."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..config import GasReporterConfig
from .models import DeploymentRecord, MethodRecord

logger = logging.getLogger(__name__)


class GasLedgerBaseMixin:
    def __init__(self, config: Optional[GasReporterConfig] = None):
        """
        Initialize an empty ledger.

        Args:
            config: Reporter configuration (block limit, display and cost options)
        """
        self.config = config or GasReporterConfig()
        self.block_limit = self.config.block_limit
        self.methods: Dict[str, MethodRecord] = {}
        self.deployments: List[DeploymentRecord] = []
        self.address_cache: Dict[str, str] = {}
        self.unresolved_calls = 0

    def initialize(self, artifacts: Iterable) -> None:
        """
        Populate method and deployment records from contract artifacts.

        Raises:
            CatalogError: if an artifact is malformed; nothing is populated then
        """
        from ..catalog.builder import build_catalog

        catalog = build_catalog(artifacts)
        self.methods = catalog.methods
        self.deployments = catalog.deployments
        self.address_cache = {}
        self.unresolved_calls = 0

    def checkpoint(self) -> Dict[str, Any]:
        """Copy of every mutable part of the ledger, for restore() after a failed scan."""
        return {
            "methods": {key: record.model_copy(deep=True) for key, record in self.methods.items()},
            "deployments": [record.model_copy(deep=True) for record in self.deployments],
            "address_cache": dict(self.address_cache),
            "unresolved_calls": self.unresolved_calls,
        }

    def restore(self, checkpoint: Dict[str, Any]) -> None:
        self.methods = checkpoint["methods"]
        self.deployments = checkpoint["deployments"]
        self.address_cache = checkpoint["address_cache"]
        self.unresolved_calls = checkpoint["unresolved_calls"]
        logger.debug("Ledger restored to checkpoint")
