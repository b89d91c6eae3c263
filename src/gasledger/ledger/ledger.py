"""Public gas ledger composed from focused mixins."""

from .addresses import GasLedgerAddressMixin
from .base import GasLedgerBaseMixin
from .deployments import GasLedgerDeploymentsMixin
from .methods import GasLedgerMethodsMixin
from .statistics import GasLedgerStatisticsMixin


class GasLedger(
    GasLedgerBaseMixin,
    GasLedgerAddressMixin,
    GasLedgerMethodsMixin,
    GasLedgerDeploymentsMixin,
    GasLedgerStatisticsMixin,
):
    """Single-writer aggregation store for method and deployment gas samples."""

    pass
