"""Gas attribution for EVM contract methods and deployments over block ranges."""

from .catalog import ContractArtifact, build_catalog, load_artifacts
from .config import GasReporterConfig
from .errors import CatalogError, ConfigurationError, GasLedgerError, ScanError
from .ledger import GasLedger, LedgerSnapshot
from .resolution import ProxyResolver, ResolutionStrategy
from .session import GasReporterSession
from .watcher import TransactionWatcher

__all__ = [
    "CatalogError",
    "ConfigurationError",
    "ContractArtifact",
    "GasLedger",
    "GasLedgerError",
    "GasReporterConfig",
    "GasReporterSession",
    "LedgerSnapshot",
    "ProxyResolver",
    "ResolutionStrategy",
    "ScanError",
    "TransactionWatcher",
    "build_catalog",
    "load_artifacts",
]
