"""Identity resolution for calls the address cache cannot explain."""

from .resolver import ProxyResolver
from .strategies import STRATEGY_ORDER, Resolution, ResolutionStrategy

__all__ = ["ProxyResolver", "Resolution", "ResolutionStrategy", "STRATEGY_ORDER"]
