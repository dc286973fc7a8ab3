from decimal import Decimal
from typing import Callable, NamedTuple, Optional, Tuple

from savethindex.beacon import BeaconClient
from savethindex.constants import EPOCH_MINUTES, VALIDATOR_STAKE_ETH
from savethindex.subgraph import SubgraphClient
from savethindex.yields import (
    Number,
    ValidatorYield,
    calculate_apy_percent,
    calculate_validator_yield,
)

# (bls public key, yield or None if slashed, running sum of yields)
ValidatorCallback = Callable[[str, Optional[ValidatorYield], Decimal], None]


class IndexApyEstimate(NamedTuple):
    index_id: int
    member_count: int
    contributing_count: int
    eth_sum: Decimal
    average_eth_per_year: Decimal
    apy_percent: Decimal
    yields: Tuple[ValidatorYield, ...]


def estimate_index_apy(
    index_id: int,
    beacon: BeaconClient,
    subgraph: SubgraphClient,
    stake_eth: Number = VALIDATOR_STAKE_ETH,
    epoch_minutes: Number = EPOCH_MINUTES,
    average_over_members: bool = True,
    on_validator: Optional[ValidatorCallback] = None,
) -> Optional[IndexApyEstimate]:
    """
    Estimates the APY of a savETH index from the yields of its knots.

    Returns None when the index holds no knots. By default the summed yield
    is divided by the full membership size, so slashed knots lower the
    average; with average_over_members=False only contributing knots count.
    """
    membership = subgraph.fetch_index_members(index_id)
    if membership is None:
        return None

    current_epoch = beacon.fetch_chain_head().current_epoch

    eth_sum = Decimal(0)
    yields = list()
    for bls_public_key in membership.knot_ids:
        record = beacon.fetch_validator_state(bls_public_key)
        validator_yield = calculate_validator_yield(
            record, current_epoch=current_epoch, epoch_minutes=epoch_minutes
        )
        if validator_yield is not None:
            eth_sum += validator_yield.eth_per_year
            yields.append(validator_yield)
        if on_validator:
            on_validator(bls_public_key, validator_yield, eth_sum)

    member_count = len(membership.knot_ids)
    denominator = member_count if average_over_members else len(yields)
    average = eth_sum / denominator if denominator else Decimal(0)

    return IndexApyEstimate(
        index_id=index_id,
        member_count=member_count,
        contributing_count=len(yields),
        eth_sum=eth_sum,
        average_eth_per_year=average,
        apy_percent=calculate_apy_percent(average, stake_eth=stake_eth),
        yields=tuple(yields),
    )
