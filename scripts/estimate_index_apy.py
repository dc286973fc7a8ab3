#!/usr/bin/python3

from decimal import Decimal
from typing import Optional

import click

from savethindex.beacon import BeaconClient
from savethindex.constants import (
    BEACON_ENDPOINT_ENVVAR,
    DEFAULT_SUBGRAPH_ENDPOINT,
    SUBGRAPH_ENDPOINT_ENVVAR,
)
from savethindex.errors import SavETHIndexError
from savethindex.estimator import estimate_index_apy
from savethindex.options import (
    beacon_endpoint_option,
    contributing_only_option,
    epoch_minutes_option,
    index_id_option,
    stake_eth_option,
    subgraph_endpoint_option,
    timeout_option,
)
from savethindex.subgraph import SubgraphClient
from savethindex.utils import get_endpoint, load_environment
from savethindex.yields import ValidatorYield


def _print_validator(
    bls_public_key: str, validator_yield: Optional[ValidatorYield], eth_sum: Decimal
) -> None:
    click.secho(f"blsPublicKey: {bls_public_key}", fg="cyan")
    if validator_yield is None:
        click.secho("\t! Slashed; excluded from the sum", fg="yellow")
    else:
        click.echo(f"\tethDiff     : {validator_yield.eth_diff:f}")
        click.echo(f"\tepochDiff   : {validator_yield.epoch_diff}")
        click.echo(f"\tethPerEpoch : {validator_yield.eth_per_epoch:f}")
        click.echo(f"\tethPerYear  : {validator_yield.eth_per_year:f}")
    click.echo(f"\tethSum      : {eth_sum:f}")


@click.command()
@index_id_option
@beacon_endpoint_option
@subgraph_endpoint_option
@timeout_option
@stake_eth_option
@epoch_minutes_option
@contributing_only_option
@click.option("--quiet", "-q", help="Only print the final estimate", is_flag=True, default=False)
def cli(
    index_id,
    beacon_endpoint,
    subgraph_endpoint,
    timeout,
    stake_eth,
    epoch_minutes,
    contributing_only,
    quiet,
):
    """Estimate the APY of the validators in a savETH index."""
    load_environment()
    try:
        beacon_endpoint = get_endpoint(beacon_endpoint, BEACON_ENDPOINT_ENVVAR)
    except ValueError as e:
        raise click.UsageError(str(e))
    subgraph_endpoint = get_endpoint(
        subgraph_endpoint, SUBGRAPH_ENDPOINT_ENVVAR, default=DEFAULT_SUBGRAPH_ENDPOINT
    )

    beacon = BeaconClient(endpoint=beacon_endpoint, timeout=timeout)
    subgraph = SubgraphClient(endpoint=subgraph_endpoint, timeout=timeout)

    click.secho(f"savETH Index #{index_id}", fg="green")
    try:
        estimate = estimate_index_apy(
            index_id=index_id,
            beacon=beacon,
            subgraph=subgraph,
            stake_eth=stake_eth,
            epoch_minutes=epoch_minutes,
            average_over_members=not contributing_only,
            on_validator=None if quiet else _print_validator,
        )
    except SavETHIndexError as e:
        click.secho(f"x {e}", fg="red", err=True)
        raise click.Abort()

    if estimate is None:
        click.secho(f"(i) No knots in savETH Index #{index_id}; no estimate available", fg="yellow")
        return

    click.echo()
    click.echo(
        f"Knots             : {estimate.member_count} "
        f"({estimate.contributing_count} contributing)"
    )
    click.echo(f"avgEthInTheIndex  : {estimate.average_eth_per_year:f}")
    click.secho(f"APY               : {estimate.apy_percent:f}%", fg="green")


if __name__ == "__main__":
    cli()
