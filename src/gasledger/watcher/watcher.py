"""Public transaction watcher composed from focused mixins."""

from .base import TransactionWatcherBaseMixin
from .collection import TransactionWatcherCollectMixin
from .fees import TransactionWatcherFeeMixin
from .recording import TransactionWatcherRecordingMixin
from .scanning import TransactionWatcherScanMixin


class TransactionWatcher(
    TransactionWatcherBaseMixin,
    TransactionWatcherScanMixin,
    TransactionWatcherCollectMixin,
    TransactionWatcherFeeMixin,
    TransactionWatcherRecordingMixin,
):
    """Walks block ranges and attributes gas usage to contracts and methods."""

    pass
