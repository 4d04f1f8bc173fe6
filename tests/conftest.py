from typing import Any

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.models.abi import AbiEntry
from app.routes.interaction import get_provider
from app.services.abi import AbiService


class FakeProvider:
    def __init__(self) -> None:
        self.reads: list[tuple[int, str, str, list[Any]]] = []
        self.submits: list[tuple[int, str, str, list[Any]]] = []
        self.read_result: Any = 1000
        self.error: Exception | None = None

    def read_call(self, chain_id: int, address: str, entry: AbiEntry, args: list[Any]) -> Any:
        if self.error:
            raise self.error
        self.reads.append((chain_id, address, entry.name, args))
        return self.read_result

    def submit_call(self, chain_id: int, address: str, entry: AbiEntry, args: list[Any]) -> str:
        if self.error:
            raise self.error
        self.submits.append((chain_id, address, entry.name, args))
        return "0x" + "ab" * 32


@pytest.fixture
def sample_abi() -> list[AbiEntry]:
    return AbiService.validate(
        """[
        {"type": "function", "name": "balanceOf",
         "inputs": [{"name": "owner", "type": "address"}],
         "outputs": [{"name": "", "type": "uint256"}], "stateMutability": "view"},
        {"type": "event", "name": "Transfer",
         "inputs": [{"name": "from", "type": "address", "indexed": true}]},
        {"type": "function", "name": "transfer",
         "inputs": [{"name": "to", "type": "address"}, {"name": "amount", "type": "uint256"}],
         "outputs": [{"type": "bool"}], "stateMutability": "nonpayable"},
        {"type": "constructor", "inputs": [{"name": "supply", "type": "uint256"}]},
        {"type": "error", "name": "InsufficientBalance",
         "inputs": [{"name": "needed", "type": "uint256"}]}
        ]"""
    )


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def client(fake_provider: FakeProvider):
    app.dependency_overrides[get_provider] = lambda: fake_provider
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
