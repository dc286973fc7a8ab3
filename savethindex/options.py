import click

from savethindex.constants import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_INDEX_ID,
    EPOCH_MINUTES,
    INDEX_FUND_CONTRACT_NAME,
    VALIDATOR_STAKE_ETH,
)
from savethindex.types import MinInt, PositiveDecimal

index_id_option = click.option(
    "--index-id",
    "-i",
    help="ID of the savETH index",
    type=MinInt(0),
    default=DEFAULT_INDEX_ID,
    show_default=True,
)

beacon_endpoint_option = click.option(
    "--beacon-endpoint",
    "-b",
    help="Beacon node HTTP endpoint; defaults to $STAKEHOUSE_PRATER_HTTP_ENDPOINT",
    type=click.STRING,
    required=False,
)

subgraph_endpoint_option = click.option(
    "--subgraph-endpoint",
    "-s",
    help="Stakehouse subgraph endpoint; defaults to $STAKEHOUSE_SUBGRAPH_ENDPOINT",
    type=click.STRING,
    required=False,
)

timeout_option = click.option(
    "--timeout",
    "-t",
    help="HTTP timeout in seconds",
    type=MinInt(1),
    default=DEFAULT_HTTP_TIMEOUT,
    show_default=True,
)

stake_eth_option = click.option(
    "--stake-eth",
    help="ETH staked per validator",
    type=PositiveDecimal(),
    default=str(VALIDATOR_STAKE_ETH),
    show_default=True,
)

epoch_minutes_option = click.option(
    "--epoch-minutes",
    help="Length of a beacon chain epoch in minutes",
    type=PositiveDecimal(),
    default=str(EPOCH_MINUTES),
    show_default=True,
)

contributing_only_option = click.option(
    "--contributing-only",
    help="Average over non-slashed validators only, instead of the full index membership",
    is_flag=True,
    default=False,
)

contract_name_option = click.option(
    "--contract-name",
    "-c",
    help="Name of the index fund contract",
    type=click.STRING,
    default=INDEX_FUND_CONTRACT_NAME,
    show_default=True,
)

autosign_option = click.option(
    "--autosign",
    help="Sign transactions automatically and skip confirmations",
    is_flag=True,
    default=False,
)

verify_option = click.option(
    "--verify",
    help="Publish the contract source to the block explorer",
    is_flag=True,
    default=False,
)
