"""Exception hierarchy for catalog construction, configuration and scanning."""

from typing import Optional


class GasLedgerError(Exception):
    """Base class for all gas ledger failures."""


class ConfigurationError(GasLedgerError):
    """Raised when reporter configuration values are invalid."""


class CatalogError(GasLedgerError):
    """Raised when contract artifacts are missing or malformed."""

    def __init__(self, message: str, contract_name: Optional[str] = None):
        self.contract_name = contract_name
        if contract_name:
            message = f"{contract_name}: {message}"
        super().__init__(message)


class ScanError(GasLedgerError):
    """
    Raised when a block range scan cannot complete.

    A scan either records every transaction in the range or fails as a whole,
    so this error always means the ledger must not be reported.
    """

    def __init__(self, message: str, block_number: Optional[int] = None, tx_hash: Optional[str] = None):
        self.block_number = block_number
        self.tx_hash = tx_hash

        location = []
        if block_number is not None:
            location.append(f"block {block_number}")
        if tx_hash:
            location.append(f"tx {tx_hash}")
        if location:
            message = f"{message} ({', '.join(location)})"
        super().__init__(message)
