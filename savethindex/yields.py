from decimal import Decimal
from typing import NamedTuple, Optional, Union

from savethindex.beacon import ValidatorBalanceRecord
from savethindex.constants import (
    EPOCH_MINUTES,
    GWEI_PER_ETH,
    MINUTES_PER_YEAR,
    VALIDATOR_STAKE_ETH,
)
from savethindex.errors import InvalidStateError

Number = Union[int, str, Decimal]


class ValidatorYield(NamedTuple):
    """Implied yield of a single non-slashed validator."""

    bls_public_key: str
    eth_diff: Decimal
    epoch_diff: int
    eth_per_epoch: Decimal
    eth_per_year: Decimal


def gwei_to_eth(gwei: Number) -> Decimal:
    """Converts Gwei to Ether, keeping fractional Ether."""
    return Decimal(gwei) / GWEI_PER_ETH


def epochs_per_year(epoch_minutes: Number = EPOCH_MINUTES) -> Decimal:
    return Decimal(MINUTES_PER_YEAR) / Decimal(epoch_minutes)


def calculate_validator_yield(
    record: ValidatorBalanceRecord,
    current_epoch: int,
    epoch_minutes: Number = EPOCH_MINUTES,
) -> Optional[ValidatorYield]:
    """
    Annualizes the rewards a validator accrued above its effective balance
    since activation. Returns None for slashed validators.
    """
    if record.slashed:
        return None

    current_balance = gwei_to_eth(record.current_balance_gwei)
    effective_balance = gwei_to_eth(record.effective_balance_gwei)
    eth_diff = current_balance - effective_balance

    epoch_diff = current_epoch - record.activation_epoch
    if epoch_diff <= 0:
        raise InvalidStateError(
            f"Validator {record.bls_public_key} has no elapsed epochs "
            f"(current epoch {current_epoch}, activation epoch {record.activation_epoch})"
        )

    eth_per_epoch = eth_diff / epoch_diff
    eth_per_year = eth_per_epoch * epochs_per_year(epoch_minutes)

    return ValidatorYield(
        bls_public_key=record.bls_public_key,
        eth_diff=eth_diff,
        epoch_diff=epoch_diff,
        eth_per_epoch=eth_per_epoch,
        eth_per_year=eth_per_year,
    )


def calculate_apy_percent(
    average_eth_per_year: Decimal, stake_eth: Number = VALIDATOR_STAKE_ETH
) -> Decimal:
    return average_eth_per_year / Decimal(stake_eth) * 100
