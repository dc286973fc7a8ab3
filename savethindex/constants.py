from decimal import Decimal

#
# Environment
#

BEACON_ENDPOINT_ENVVAR = "STAKEHOUSE_PRATER_HTTP_ENDPOINT"
SUBGRAPH_ENDPOINT_ENVVAR = "STAKEHOUSE_SUBGRAPH_ENDPOINT"

#
# Endpoints
#

# Stakehouse protocol subgraph (Goerli / Prater)
DEFAULT_SUBGRAPH_ENDPOINT = "https://api.thegraph.com/subgraphs/name/bswap-eng/stakehouse-protocol"

BEACON_HEADERS_PATH = "/eth/v1/beacon/headers"
BEACON_VALIDATOR_PATH = "/eth/v1/beacon/states/finalized/validators/{bls_public_key}"

DEFAULT_HTTP_TIMEOUT = 30  # seconds

#
# Beacon chain
#

SLOTS_PER_EPOCH = 32
EPOCH_MINUTES = Decimal("6.4")  # 12 second slots * 32 slots
MINUTES_PER_YEAR = 365 * 24 * 60
GWEI_PER_ETH = 10**9

#
# savETH index
#

DEFAULT_INDEX_ID = 3
VALIDATOR_STAKE_ETH = Decimal(32)

#
# Deployment
#

INDEX_FUND_CONTRACT_NAME = "savETHIndexERC20Fund"
