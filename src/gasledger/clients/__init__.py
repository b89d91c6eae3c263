"""Chain and fee-oracle clients."""

from .chain import ChainClient
from .oracle import FeeOracleClient
from .serialization import normalize_receipt, normalize_transaction, serialize_transaction

__all__ = [
    "ChainClient",
    "FeeOracleClient",
    "normalize_receipt",
    "normalize_transaction",
    "serialize_transaction",
]
