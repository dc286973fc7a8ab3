from typing import Any, Dict, NamedTuple, Optional, Tuple

import requests

from savethindex.constants import DEFAULT_HTTP_TIMEOUT
from savethindex.errors import QueryError


class IndexMembership(NamedTuple):
    """Knots (validators) held by a savETH index, in subgraph order."""

    index_id: int
    index_owner: Optional[str]
    knot_ids: Tuple[str, ...]


def build_index_query(index_id: int) -> str:
    return f"""
        query listOfKnots {{
            savETHIndex(id: {int(index_id)}) {{
                id
                indexOwner
                knots {{
                    id
                }}
            }}
        }}
    """


class SubgraphClient:
    def __init__(
        self,
        endpoint: str,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()

    def query(self, query: str) -> Dict[str, Any]:
        """Runs a GraphQL query and returns its 'data' payload."""
        try:
            response = self.session.post(
                self.endpoint, json={"query": query}, timeout=self.timeout
            )
            response.raise_for_status()
            body = response.json()
        except (requests.RequestException, ValueError) as e:
            raise QueryError(f"Subgraph query to {self.endpoint} failed: {e}") from e

        if not body or not isinstance(body, dict):
            raise QueryError(f"Invalid response from subgraph {self.endpoint}: {body!r}")

        data = body.get("data")
        if data is None:
            errors = body.get("errors") or []
            if not isinstance(errors, list):
                errors = [errors]
            messages = "; ".join(
                str(error.get("message", error)) if isinstance(error, dict) else str(error)
                for error in errors
            )
            raise QueryError(f"Subgraph returned no data: {messages or body}")
        if not isinstance(data, dict):
            raise QueryError(f"Malformed data from subgraph {self.endpoint}: {data!r}")
        return data

    def fetch_index_members(self, index_id: int) -> Optional[IndexMembership]:
        """
        Returns the knots of a savETH index, or None when the index is
        unknown or holds no knots.
        """
        data = self.query(build_index_query(index_id))
        index = data.get("savETHIndex")
        if not index:
            return None
        if not isinstance(index, dict):
            raise QueryError(f"Malformed savETH index {index_id}: {index!r}")

        knots = index.get("knots")
        if not knots:
            return None

        try:
            knot_ids = tuple(knot["id"] for knot in knots)
        except (KeyError, TypeError) as e:
            raise QueryError(f"Malformed knot list for savETH index {index_id}: {e!r}") from e

        return IndexMembership(
            index_id=index_id,
            index_owner=index.get("indexOwner"),
            knot_ids=knot_ids,
        )
