class SavETHIndexError(Exception):
    """Base class for all savETH index tooling errors."""


class NetworkError(SavETHIndexError):
    """An HTTP call failed, returned a non-2xx status or a malformed body."""


class QueryError(SavETHIndexError):
    """A subgraph query returned no usable response."""


class InvalidStateError(SavETHIndexError, ValueError):
    """Validator state cannot produce a yield (e.g. no elapsed epochs)."""


class EmptyMembershipError(SavETHIndexError):
    """The index has no knots; there is nothing to report."""
