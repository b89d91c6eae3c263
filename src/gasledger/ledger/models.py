"""Ledger records and the finalized statistics they produce."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MethodRecord(BaseModel):
    """
    Gas samples for one contract method.

    Keyed by contract name plus the method's 4-byte selector. Fee samples run
    parallel to gas samples whenever calldata fees are tracked.
    """
    model_config = ConfigDict(extra="forbid")
    key: str                 # bare selector hex, e.g. "a9059cbb"
    contract: str
    method: str
    fn_sig: str
    gas_data: List[int] = Field(default_factory=list)
    calldata_fee: List[int] = Field(default_factory=list)

    @property
    def number_of_calls(self) -> int:
        return len(self.gas_data)


class DeploymentRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    bytecode: str
    deployed_bytecode: str
    gas_data: List[int] = Field(default_factory=list)
    calldata_fee: List[int] = Field(default_factory=list)


class MethodStats(BaseModel):
    model_config = ConfigDict(extra="forbid")
    contract: str
    method: str              # display name: short name or full signature
    fn_sig: str
    key: str
    min: Optional[int] = None
    max: Optional[int] = None
    average: Optional[int] = None
    number_of_calls: int = 0
    calldata_fee_average: Optional[int] = None
    cost: Optional[str] = None
    calldata_cost: Optional[str] = None


class DeploymentStats(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    min: Optional[int] = None
    max: Optional[int] = None
    average: Optional[int] = None
    number_of_calls: int = 0
    percent_of_limit: Optional[float] = None
    calldata_fee_average: Optional[int] = None
    cost: Optional[str] = None
    calldata_cost: Optional[str] = None


class LedgerSnapshot(BaseModel):
    """Finalized, read-only view of a run handed to reporting."""
    model_config = ConfigDict(extra="forbid")
    methods: List[MethodStats] = Field(default_factory=list)
    deployments: List[DeploymentStats] = Field(default_factory=list)
    unresolved_calls: int = 0
    block_limit: int
