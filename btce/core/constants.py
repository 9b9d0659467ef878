"""Core constants and enums for the BTC-e client"""

from enum import Enum


class Direction(str, Enum):
    """Order direction"""
    BUY = "buy"
    SELL = "sell"


class SortOrder(str, Enum):
    """Result ordering for history queries"""
    ASCENDING = "ASC"
    DESCENDING = "DESC"


# Trading pairs listed by the exchange. Not enforced client-side;
# the server is the authority on which pairs exist.
PAIR_BTC_USD = "btc_usd"
PAIR_BTC_RUR = "btc_rur"
PAIR_BTC_EUR = "btc_eur"

PAIR_LTC_BTC = "ltc_btc"
PAIR_LTC_USD = "ltc_usd"
PAIR_LTC_RUR = "ltc_rur"
PAIR_LTC_EUR = "ltc_eur"

PAIR_NMC_BTC = "nmc_btc"
PAIR_NMC_USD = "nmc_usd"

PAIR_NVC_BTC = "nvc_btc"
PAIR_NVC_USD = "nvc_usd"

PAIR_USD_RUR = "usd_rur"
PAIR_EUR_USD = "eur_usd"
PAIR_EUR_RUR = "eur_rur"

PAIR_PPC_BTC = "ppc_btc"
PAIR_PPC_USD = "ppc_usd"

PAIR_DSH_BTC = "dsh_btc"
PAIR_DSH_USD = "dsh_usd"

PAIR_ETH_BTC = "eth_btc"
PAIR_ETH_USD = "eth_usd"
PAIR_ETH_EUR = "eth_eur"
PAIR_ETH_LTC = "eth_ltc"
PAIR_ETH_RUR = "eth_rur"

PAIR_TRC_BTC = "trc_btc"
PAIR_FTC_BTC = "ftc_btc"
PAIR_XPM_BTC = "xpm_btc"

KNOWN_PAIRS = (
    PAIR_BTC_USD, PAIR_BTC_RUR, PAIR_BTC_EUR,
    PAIR_LTC_BTC, PAIR_LTC_USD, PAIR_LTC_RUR, PAIR_LTC_EUR,
    PAIR_NMC_BTC, PAIR_NMC_USD,
    PAIR_NVC_BTC, PAIR_NVC_USD,
    PAIR_USD_RUR, PAIR_EUR_USD, PAIR_EUR_RUR,
    PAIR_PPC_BTC, PAIR_PPC_USD,
    PAIR_DSH_BTC, PAIR_DSH_USD,
    PAIR_ETH_BTC, PAIR_ETH_USD, PAIR_ETH_EUR, PAIR_ETH_LTC, PAIR_ETH_RUR,
    PAIR_TRC_BTC, PAIR_FTC_BTC, PAIR_XPM_BTC,
)

# Public API result-count bounds (trades, depth)
MIN_PUBLIC_LIMIT = 1
MAX_PUBLIC_LIMIT = 2000
DEFAULT_PUBLIC_LIMIT = 150

# Envelope keys owned by the transport
RESERVED_PARAMS = ("method", "nonce")
