"""Tests for the gas ledger: recording, address cache and statistics."""

from __future__ import annotations

import pytest

from gasledger.config import GasReporterConfig
from gasledger.errors import CatalogError
from gasledger.ledger import GasLedger
from gasledger.ledger.statistics import truncated_mean

from conftest import (
    APPROVE,
    DEPOSIT,
    PING,
    TOKEN_ADDRESS,
    TOKEN_BYTECODE,
    TRANSFER,
    VAULT_ADDRESS,
    calldata,
)


def _method(snapshot, contract, method):
    return next(m for m in snapshot.methods if m.contract == contract and m.method == method)


class TestRecording:
    def test_record_known_method(self, ledger):
        assert ledger.record_method_sample("Token", calldata(TRANSFER, 1, 2), 51000)
        assert ledger.methods[f"Token_{TRANSFER}"].gas_data == [51000]
        assert ledger.unresolved_calls == 0

    def test_unknown_method_counts_as_unresolved(self, ledger):
        assert not ledger.record_method_sample("Token", calldata(DEPOSIT, 1), 30000)
        assert not ledger.record_method_sample(None, calldata(TRANSFER), 30000)
        assert ledger.unresolved_calls == 2
        assert all(not record.gas_data for record in ledger.methods.values())

    def test_fee_samples_run_parallel_to_gas(self, ledger):
        ledger.record_method_sample("Token", calldata(TRANSFER), 51000, calldata_fee=700)
        ledger.record_method_sample("Token", calldata(TRANSFER), 34000, calldata_fee=500)
        record = ledger.methods[f"Token_{TRANSFER}"]
        assert record.gas_data == [51000, 34000]
        assert record.calldata_fee == [700, 500]

    def test_get_all_contracts_with_method_in_catalog_order(self, ledger):
        matches = ledger.get_all_contracts_with_method(calldata(PING))
        assert [m.contract for m in matches] == ["Vault", "Pinger"]
        assert ledger.get_all_contracts_with_method("0x") == []

    def test_initialize_resets_state(self, ledger, artifacts):
        ledger.record_method_sample("Token", calldata(TRANSFER), 1)
        ledger.record_method_sample(None, calldata(TRANSFER), 1)
        ledger.bind_address(TOKEN_ADDRESS, "Token")

        ledger.initialize(artifacts)

        assert ledger.methods[f"Token_{TRANSFER}"].gas_data == []
        assert ledger.unresolved_calls == 0
        assert ledger.lookup_address(TOKEN_ADDRESS) is None

    def test_malformed_catalog_leaves_ledger_untouched(self, ledger):
        from gasledger.catalog import ContractArtifact

        broken = ContractArtifact(name="Broken", bytecode="0x60", abi=[{"type": "function"}])
        with pytest.raises(CatalogError):
            ledger.initialize([broken])
        assert f"Token_{TRANSFER}" in ledger.methods


class TestDeployments:
    def test_deployment_binds_address(self, ledger):
        record = ledger.record_deployment_sample(TOKEN_BYTECODE + "00" * 32, TOKEN_ADDRESS, 500000)
        assert record.name == "Token"
        assert record.gas_data == [500000]
        assert ledger.lookup_address(TOKEN_ADDRESS.upper().replace("0X", "0x")) == "Token"

    def test_unknown_deployment_is_ignored(self, ledger):
        assert ledger.record_deployment_sample("0xbeef", TOKEN_ADDRESS, 500000) is None
        assert ledger.lookup_address(TOKEN_ADDRESS) is None
        assert ledger.unresolved_calls == 0

    def test_interface_never_matches_deployment(self, ledger):
        assert ledger.get_contract_by_deployment_input("0x") is None
        assert ledger.get_contract_by_deployment_input("0x6080") is None


class TestAddressCache:
    def test_reset_between_units(self, ledger):
        ledger.bind_address(VAULT_ADDRESS, "Token")
        assert ledger.lookup_address(VAULT_ADDRESS) == "Token"

        ledger.reset_address_cache()
        assert ledger.lookup_address(VAULT_ADDRESS) is None

        ledger.bind_address(VAULT_ADDRESS, "Vault")
        assert ledger.lookup_address(VAULT_ADDRESS) == "Vault"

    def test_rebind_replaces_previous_name(self, ledger):
        ledger.bind_address(VAULT_ADDRESS, "Token")
        ledger.bind_address(VAULT_ADDRESS, "Vault")
        assert ledger.lookup_address(VAULT_ADDRESS) == "Vault"

    def test_lookup_of_missing_address(self, ledger):
        assert ledger.lookup_address(None) is None
        assert ledger.lookup_address("") is None


class TestStatistics:
    def test_truncated_mean(self):
        assert truncated_mean([]) is None
        assert truncated_mean([1, 2]) == 1
        assert truncated_mean([100, 101, 101]) == 100

    def test_min_mean_max(self, ledger):
        for gas in (51000, 34000, 34001):
            ledger.record_method_sample("Token", calldata(TRANSFER), gas)

        stats = _method(ledger.finalize(), "Token", "transfer")
        assert stats.min == 34000
        assert stats.max == 51000
        assert stats.average == 39667
        assert stats.number_of_calls == 3
        assert stats.min <= stats.average <= stats.max

    def test_zero_sample_records_hidden_by_default(self, ledger):
        ledger.record_method_sample("Token", calldata(TRANSFER), 51000)
        snapshot = ledger.finalize()
        assert [(m.contract, m.method) for m in snapshot.methods] == [("Token", "transfer")]
        assert snapshot.deployments == []

    def test_show_all_methods(self, artifacts):
        ledger = GasLedger(GasReporterConfig(show_all_methods=True))
        ledger.initialize(artifacts)

        snapshot = ledger.finalize()
        approve = _method(snapshot, "Token", "approve")
        assert approve.key == APPROVE
        assert approve.number_of_calls == 0
        assert approve.average is None
        assert {d.name for d in snapshot.deployments} == {"Token", "Proxy", "Vault", "Pinger"}

    def test_rows_sorted_by_contract_then_method(self, ledger):
        ledger.record_method_sample("Vault", calldata(DEPOSIT, 1), 40000)
        ledger.record_method_sample("Token", calldata(TRANSFER), 51000)
        ledger.record_method_sample("Token", calldata(APPROVE), 46000)

        rows = [(m.contract, m.method) for m in ledger.finalize().methods]
        assert rows == [("Token", "approve"), ("Token", "transfer"), ("Vault", "deposit")]

    def test_show_method_sig(self, artifacts):
        ledger = GasLedger(GasReporterConfig(show_method_sig=True))
        ledger.initialize(artifacts)
        ledger.record_method_sample("Token", calldata(TRANSFER), 51000)

        [row] = ledger.finalize().methods
        assert row.method == "transfer(address,uint256)"

    def test_percent_of_limit(self, ledger):
        ledger.record_deployment_sample(TOKEN_BYTECODE, TOKEN_ADDRESS, 500000)
        [deployment] = ledger.finalize().deployments
        assert deployment.percent_of_limit == 5.0

    def test_costs_when_prices_configured(self, artifacts):
        config = GasReporterConfig(eth_price=2000, gas_price=20)
        ledger = GasLedger(config)
        ledger.initialize(artifacts)
        ledger.record_method_sample("Token", calldata(TRANSFER), 50000, calldata_fee=10 ** 15)

        [row] = ledger.finalize().methods
        assert row.cost == "2.00"
        assert row.calldata_fee_average == 10 ** 15
        assert row.calldata_cost == "2.00"

    def test_no_costs_without_prices(self, ledger):
        ledger.record_method_sample("Token", calldata(TRANSFER), 50000)
        [row] = ledger.finalize().methods
        assert row.cost is None
        assert row.calldata_cost is None

    def test_finalize_is_repeatable(self, ledger):
        ledger.record_method_sample("Token", calldata(TRANSFER), 50000)
        ledger.record_method_sample(None, calldata(TRANSFER), 50000)
        first = ledger.finalize()
        second = ledger.finalize()
        assert first == second
        assert first.unresolved_calls == 1
