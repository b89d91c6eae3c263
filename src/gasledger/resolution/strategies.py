"""Identity resolution strategies, in the order they are tried."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ResolutionStrategy(str, Enum):
    DIRECT = "direct"
    PROXY = "proxy"
    DEPLOYED_BYTECODE = "deployed_bytecode"
    # Ambiguous: ties go to the first-registered contract exposing the selector
    METHOD_SIGNATURE = "method_signature"
    UNRESOLVED = "unresolved"


STRATEGY_ORDER = (
    ResolutionStrategy.DIRECT,
    ResolutionStrategy.PROXY,
    ResolutionStrategy.DEPLOYED_BYTECODE,
    ResolutionStrategy.METHOD_SIGNATURE,
)


@dataclass
class Resolution:
    name: Optional[str]
    strategy: ResolutionStrategy

    @property
    def resolved(self) -> bool:
        return self.name is not None
