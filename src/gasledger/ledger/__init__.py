"""Gas ledger package: records, address cache and statistics."""

from .ledger import GasLedger
from .models import (
    DeploymentRecord,
    DeploymentStats,
    LedgerSnapshot,
    MethodRecord,
    MethodStats,
)

__all__ = [
    "DeploymentRecord",
    "DeploymentStats",
    "GasLedger",
    "LedgerSnapshot",
    "MethodRecord",
    "MethodStats",
]
