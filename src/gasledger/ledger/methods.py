"""Method sample recording and catalog lookups by selector."""

import logging
from typing import List, Optional

from ..catalog.selectors import method_id, selector_from_input
from .models import MethodRecord

logger = logging.getLogger(__name__)


class GasLedgerMethodsMixin:
    def get_method(self, contract_name: Optional[str], input_data: str) -> Optional[MethodRecord]:
        if not contract_name:
            return None
        return self.methods.get(method_id(contract_name, input_data))

    def has_method(self, contract_name: Optional[str], input_data: str) -> bool:
        return self.get_method(contract_name, input_data) is not None

    def get_all_contracts_with_method(self, input_data: str) -> List[MethodRecord]:
        """Every method record matching the call data's selector, in catalog order."""
        selector = selector_from_input(input_data)
        if not selector:
            return []
        return [record for record in self.methods.values() if record.key == selector]

    def record_method_sample(
        self,
        contract_name: Optional[str],
        input_data: str,
        gas_used: int,
        calldata_fee: Optional[int] = None,
    ) -> bool:
        """
        Append a gas sample to the method addressed by contract name + selector.

        An unknown method is not an error: the sample is dropped and counted
        in unresolved_calls.

        Returns:
            True if the sample was recorded
        """
        record = self.get_method(contract_name, input_data)
        if record is None:
            self.unresolved_calls += 1
            logger.debug(
                f"Unresolved call: {contract_name or '<unknown>'} selector "
                f"0x{selector_from_input(input_data)}"
            )
            return False

        record.gas_data.append(int(gas_used))
        if calldata_fee is not None:
            record.calldata_fee.append(int(calldata_fee))
        return True
