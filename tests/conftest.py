from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Tuple

import pytest
import requests

from savethindex.beacon import ChainHead, ValidatorBalanceRecord
from savethindex.constants import INDEX_FUND_CONTRACT_NAME
from savethindex.errors import NetworkError
from savethindex.subgraph import IndexMembership

GWEI = 10**9
ACTIVATION_EPOCH = 900
CURRENT_SLOT = 32_000  # epoch 1000

SLASHED_KEY = "0x" + "a9" * 48
HEALTHY_KEY = "0x" + "b4" * 48

SAVETH_REGISTRY = "0x9A8B5A4F3E0BbC5B0E4C3f4bE8E8eD8bA6e2cC01"
SHARE_RECIPIENT = "0x1F2e3D4c5B6a7980A1b2C3d4E5f60718293A4b5C"
DEPLOYED_ADDRESS = "0x00000000000000000000000000000000000F00D"


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, malformed: bool = False):
        self.payload = payload
        self.status_code = status_code
        self.malformed = malformed

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self) -> Any:
        if self.malformed:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """Stands in for requests.Session; routes requests by URL suffix."""

    def __init__(self, routes: Optional[Dict[str, Any]] = None):
        self.routes = routes or dict()
        self.calls: List[Tuple[str, str, Dict[str, Any]]] = []

    def _respond(self, url: str) -> FakeResponse:
        for suffix, response in self.routes.items():
            if url.endswith(suffix):
                if isinstance(response, Exception):
                    raise response
                return response
        return FakeResponse(status_code=404)

    def get(self, url, timeout=None):
        self.calls.append(("GET", url, {"timeout": timeout}))
        return self._respond(url)

    def post(self, url, json=None, timeout=None):  # noqa: A002 - match requests API
        self.calls.append(("POST", url, {"json": json, "timeout": timeout}))
        return self._respond(url)


def headers_payload(slot: int) -> Dict[str, Any]:
    return {"data": [{"root": "0x00", "header": {"message": {"slot": str(slot)}}}]}


def validator_payload(
    balance: int, effective_balance: int, activation_epoch: int, slashed: bool = False
) -> Dict[str, Any]:
    return {
        "data": {
            "index": "1",
            "balance": str(balance),
            "status": "active_ongoing",
            "validator": {
                "effective_balance": str(effective_balance),
                "slashed": slashed,
                "activation_epoch": str(activation_epoch),
            },
        }
    }


def make_record(
    bls_public_key: str = HEALTHY_KEY,
    balance: int = 32_100_000_000,
    effective_balance: int = 32 * GWEI,
    activation_epoch: int = ACTIVATION_EPOCH,
    slashed: bool = False,
) -> ValidatorBalanceRecord:
    return ValidatorBalanceRecord(
        bls_public_key=bls_public_key,
        current_balance_gwei=balance,
        effective_balance_gwei=effective_balance,
        activation_epoch=activation_epoch,
        slashed=slashed,
    )


class StubBeacon:
    def __init__(self, records: Dict[str, Any], current_slot: int = CURRENT_SLOT):
        self.records = records
        self.current_slot = current_slot
        self.head_calls = 0
        self.fetched: List[str] = []

    def fetch_chain_head(self) -> ChainHead:
        self.head_calls += 1
        return ChainHead(current_slot=self.current_slot)

    def fetch_validator_state(self, bls_public_key: str) -> ValidatorBalanceRecord:
        self.fetched.append(bls_public_key)
        record = self.records[bls_public_key]
        if isinstance(record, Exception):
            raise record
        return record


class StubSubgraph:
    def __init__(self, knot_ids: Optional[Tuple[str, ...]]):
        self.knot_ids = knot_ids
        self.queried: List[int] = []

    def fetch_index_members(self, index_id: int) -> Optional[IndexMembership]:
        self.queried.append(index_id)
        if not self.knot_ids:
            return None
        return IndexMembership(index_id=index_id, index_owner="0x01", knot_ids=self.knot_ids)


@pytest.fixture()
def index_records():
    return {
        SLASHED_KEY: make_record(bls_public_key=SLASHED_KEY, balance=31 * GWEI, slashed=True),
        HEALTHY_KEY: make_record(bls_public_key=HEALTHY_KEY),
    }


@pytest.fixture()
def beacon(index_records):
    return StubBeacon(records=index_records)


@pytest.fixture()
def subgraph():
    return StubSubgraph(knot_ids=(SLASHED_KEY, HEALTHY_KEY))


@pytest.fixture()
def failing_beacon(index_records):
    index_records[HEALTHY_KEY] = NetworkError("Failed to get response")
    return StubBeacon(records=index_records)


class FakeAccount:
    address = "0x0000000000000000000000000000000000000bEE"

    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.autosign = False
        self.deployments = []

    def set_autosign(self, enabled: bool) -> None:
        self.autosign = enabled

    def deploy(self, container, *args, publish=False):
        if self.error:
            raise self.error
        self.deployments.append((container, args, publish))
        return SimpleNamespace(address=DEPLOYED_ADDRESS)


@pytest.fixture()
def account():
    return FakeAccount()


@pytest.fixture()
def container():
    return SimpleNamespace(contract_type=SimpleNamespace(name=INDEX_FUND_CONTRACT_NAME))
