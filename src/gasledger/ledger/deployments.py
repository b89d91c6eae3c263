"""Deployment matching and sample recording."""

import logging
from typing import Optional

from ..catalog.bytecode import matches_creation_prefix, matches_runtime_bytecode
from .models import DeploymentRecord

logger = logging.getLogger(__name__)


class GasLedgerDeploymentsMixin:
    def get_contract_by_deployment_input(self, input_data: str) -> Optional[DeploymentRecord]:
        """First deployment whose creation bytecode is a prefix of the transaction input."""
        if not input_data:
            return None
        for deployment in self.deployments:
            if matches_creation_prefix(input_data, deployment.bytecode):
                return deployment
        return None

    def get_contract_by_deployed_bytecode(self, code: str) -> Optional[DeploymentRecord]:
        """First deployment whose runtime bytecode matches code fetched from chain."""
        for deployment in self.deployments:
            if matches_runtime_bytecode(code, deployment.deployed_bytecode):
                return deployment
        return None

    def record_deployment_sample(
        self,
        input_data: str,
        contract_address: str,
        gas_used: int,
        calldata_fee: Optional[int] = None,
    ) -> Optional[DeploymentRecord]:
        """
        Attribute a deployment transaction to a known contract.

        On a match the new address is bound to the contract name. Deployments
        of unknown bytecode are left unattributed.
        """
        deployment = self.get_contract_by_deployment_input(input_data)
        if deployment is None:
            logger.debug(f"Unattributed deployment at {contract_address}")
            return None

        self.bind_address(contract_address, deployment.name)
        deployment.gas_data.append(int(gas_used))
        if calldata_fee is not None:
            deployment.calldata_fee.append(int(calldata_fee))
        return deployment
