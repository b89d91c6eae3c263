"""Block scanning package split by fetch/classify/fee flows."""

from .watcher import TransactionWatcher

__all__ = ["TransactionWatcher"]
