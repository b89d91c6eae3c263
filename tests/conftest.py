"""Shared fixtures for the gas ledger test suite."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from gasledger.catalog import ContractArtifact, function_selector
from gasledger.config import GasReporterConfig
from gasledger.ledger import GasLedger
from gasledger.watcher import TransactionWatcher


# ── Addresses & bytecode ─────────────────────────────────────────────────────

TOKEN_ADDRESS = "0x1000000000000000000000000000000000000001"
PROXY_ADDRESS = "0x2000000000000000000000000000000000000002"
VAULT_ADDRESS = "0x3000000000000000000000000000000000000003"
EOA_ADDRESS = "0x9000000000000000000000000000000000000009"
SENDER = "0x8000000000000000000000000000000000000008"

TOKEN_BYTECODE = "0xaaaa6080604052348015600f57600080fd5b50"
TOKEN_RUNTIME = "0xaaaa6080604052600436106100"
PROXY_BYTECODE = "0xcccc6080604052348015600f57"
PROXY_RUNTIME = "0xcccc60806040523661001357"
VAULT_BYTECODE = "0xdddd608060405234801561001057"
VAULT_RUNTIME = "0xdddd6080604052348015610010"

TRANSFER = function_selector("transfer(address,uint256)")
APPROVE = function_selector("approve(address,uint256)")
DEPOSIT = function_selector("deposit(uint256)")
UPGRADE_TO = function_selector("upgradeTo(address)")
PING = function_selector("ping()")


def fn(name: str, inputs: Optional[List[Dict[str, Any]]] = None, mutability: str = "nonpayable") -> Dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "inputs": inputs or [],
        "outputs": [],
        "stateMutability": mutability,
    }


ADDRESS_ARG = {"name": "to", "type": "address"}
AMOUNT_ARG = {"name": "amount", "type": "uint256"}


def calldata(selector: str, *words: int) -> str:
    return "0x" + selector + "".join(f"{w:064x}" for w in words)


# ── Fake chain ───────────────────────────────────────────────────────────────


def make_tx(tx_hash: str, to: Optional[str], input_data: str = "0x", **extra: Any) -> Dict[str, Any]:
    tx = {
        "hash": tx_hash,
        "from": SENDER,
        "to": to,
        "input": input_data,
        "nonce": 0,
        "gasPrice": 1_000_000_000,
        "gas": 1_000_000,
        "value": 0,
        "chainId": 10,
    }
    tx.update(extra)
    return tx


def make_receipt(tx_hash: str, gas_used: int, status: int = 1, contract_address: Optional[str] = None) -> Dict[str, Any]:
    return {
        "transactionHash": tx_hash,
        "status": status,
        "gasUsed": gas_used,
        "contractAddress": contract_address,
    }


class FakeChainClient:
    """In-memory stand-in for ChainClient; values that are exceptions are raised."""

    def __init__(self):
        self.blocks: Dict[int, Any] = {}
        self.transactions: Dict[str, Any] = {}
        self.receipts: Dict[str, Any] = {}
        self.codes: Dict[str, Any] = {}
        self.router_lookups: Dict[str, Any] = {}
        self.block_number = 0
        self.code_requests: List[str] = []
        self.closed = 0

    def add_block(self, number: int, *entries) -> None:
        """entries: (transaction, receipt) pairs."""
        txs = []
        for tx, receipt in entries:
            txs.append(tx)
            self.transactions[tx["hash"]] = tx
            self.receipts[tx["hash"]] = receipt
        self.blocks[number] = {"number": number, "hash": f"0xblock{number}", "gasLimit": 30_000_000, "transactions": txs}
        self.block_number = max(self.block_number, number)

    @staticmethod
    def _value(value: Any) -> Any:
        if isinstance(value, Exception):
            raise value
        return value

    async def get_block_number(self) -> int:
        return self._value(self.block_number)

    async def get_block(self, number: int):
        return self._value(self.blocks.get(number))

    async def get_transaction(self, tx_hash: str):
        return self._value(self.transactions[tx_hash])

    async def get_transaction_receipt(self, tx_hash: str):
        return self._value(self.receipts[tx_hash])

    async def get_code(self, address: str) -> str:
        self.code_requests.append(address.lower())
        return self._value(self.codes.get(address.lower(), "0x"))

    async def call_function(self, address: str, abi, fn_name: str, *args):
        return self._value(self.router_lookups.get(address.lower()))

    async def close(self) -> None:
        self.closed += 1


class FakeFeeOracle:
    def __init__(self, fee_per_byte: int = 16):
        self.fee_per_byte = fee_per_byte
        self.requests: List[bytes] = []

    async def get_l1_fee(self, serialized_tx: bytes) -> int:
        self.requests.append(serialized_tx)
        return len(serialized_tx) * self.fee_per_byte


# ── Fixtures ─────────────────────────────────────────────────────────────────


@pytest.fixture
def token_artifact() -> ContractArtifact:
    return ContractArtifact(
        name="Token",
        bytecode=TOKEN_BYTECODE,
        deployed_bytecode=TOKEN_RUNTIME,
        abi=[
            {"type": "constructor", "inputs": [AMOUNT_ARG]},
            fn("transfer", [ADDRESS_ARG, AMOUNT_ARG]),
            fn("approve", [ADDRESS_ARG, AMOUNT_ARG]),
            fn("balanceOf", [ADDRESS_ARG], mutability="view"),
            {"type": "event", "name": "Transfer", "inputs": []},
        ],
    )


@pytest.fixture
def proxy_artifact() -> ContractArtifact:
    return ContractArtifact(
        name="Proxy",
        bytecode=PROXY_BYTECODE,
        deployed_bytecode=PROXY_RUNTIME,
        abi=[fn("upgradeTo", [{"name": "impl", "type": "address"}]), {"type": "fallback"}],
    )


@pytest.fixture
def vault_artifact() -> ContractArtifact:
    return ContractArtifact(
        name="Vault",
        bytecode=VAULT_BYTECODE,
        deployed_bytecode=VAULT_RUNTIME,
        abi=[fn("deposit", [AMOUNT_ARG]), fn("ping")],
    )


@pytest.fixture
def pinger_artifact() -> ContractArtifact:
    return ContractArtifact(
        name="Pinger",
        bytecode="0xeeee6080",
        deployed_bytecode="0xeeee6081",
        abi=[fn("ping")],
    )


@pytest.fixture
def interface_artifact() -> ContractArtifact:
    return ContractArtifact(
        name="IToken",
        bytecode="0x",
        deployed_bytecode="0x",
        abi=[fn("transfer", [ADDRESS_ARG, AMOUNT_ARG])],
    )


@pytest.fixture
def artifacts(token_artifact, proxy_artifact, vault_artifact, pinger_artifact, interface_artifact):
    return [token_artifact, proxy_artifact, vault_artifact, pinger_artifact, interface_artifact]


@pytest.fixture
def config() -> GasReporterConfig:
    return GasReporterConfig(block_limit=10_000_000)


@pytest.fixture
def ledger(config, artifacts) -> GasLedger:
    ledger = GasLedger(config)
    ledger.initialize(artifacts)
    return ledger


@pytest.fixture
def chain() -> FakeChainClient:
    return FakeChainClient()


@pytest.fixture
def watcher(config, chain, artifacts) -> TransactionWatcher:
    watcher = TransactionWatcher(config, client=chain)
    watcher.ledger.initialize(artifacts)
    return watcher
