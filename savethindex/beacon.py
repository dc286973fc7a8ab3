from typing import Any, Dict, NamedTuple, Optional

import requests

from savethindex.constants import (
    BEACON_HEADERS_PATH,
    BEACON_VALIDATOR_PATH,
    DEFAULT_HTTP_TIMEOUT,
    SLOTS_PER_EPOCH,
)
from savethindex.errors import NetworkError


class ChainHead(NamedTuple):
    """Head of the beacon chain as reported by the headers endpoint."""

    current_slot: int

    @property
    def current_epoch(self) -> int:
        return self.current_slot // SLOTS_PER_EPOCH


class ValidatorBalanceRecord(NamedTuple):
    """Balance and activation data of a single validator at the finalized state."""

    bls_public_key: str
    current_balance_gwei: int
    effective_balance_gwei: int
    activation_epoch: int
    slashed: bool


def _parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        if value.lower() not in ("true", "false"):
            raise ValueError(f"'{value}' is not a boolean")
        return value.lower() == "true"
    if not isinstance(value, bool):
        raise TypeError(f"'{value}' is not a boolean")
    return value


class BeaconClient:
    """Thin client for the standard beacon node HTTP API."""

    def __init__(
        self,
        endpoint: str,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, path: str) -> Dict[str, Any]:
        url = f"{self.endpoint}{path}"
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            raise NetworkError(f"Failed to get response from {url}: {e}") from e

    def fetch_chain_head(self) -> ChainHead:
        payload = self._get(BEACON_HEADERS_PATH)
        try:
            slot = payload["data"][0]["header"]["message"]["slot"]
            return ChainHead(current_slot=int(slot))
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise NetworkError(f"Malformed beacon headers response: {e!r}") from e

    def fetch_validator_state(self, bls_public_key: str) -> ValidatorBalanceRecord:
        payload = self._get(BEACON_VALIDATOR_PATH.format(bls_public_key=bls_public_key))
        try:
            data = payload["data"]
            validator = data["validator"]
            return ValidatorBalanceRecord(
                bls_public_key=bls_public_key,
                current_balance_gwei=int(data["balance"]),
                effective_balance_gwei=int(validator["effective_balance"]),
                activation_epoch=int(validator["activation_epoch"]),
                slashed=_parse_bool(validator["slashed"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise NetworkError(
                f"Malformed validator response for {bls_public_key}: {e!r}"
            ) from e
