"""Exchange layer: signing, nonce handling, transport and API operations"""

from btce.exchange.client import BtceClient
from btce.exchange.exceptions import (
    BtceError,
    InvalidParameter,
    MalformedResponse,
    RemoteError,
    TransportFailure,
)
from btce.exchange.nonce import NonceSource
from btce.exchange.nonce_recovery import RetryCoordinator, RetryDecision, extract_server_nonce
from btce.exchange.public_client import PublicDataClient
from btce.exchange.signer import sign
from btce.exchange.trading import HistoryQuery, TradingOperations
from btce.exchange.transport import AuthenticatedTransport

__all__ = [
    "AuthenticatedTransport",
    "BtceClient",
    "BtceError",
    "HistoryQuery",
    "InvalidParameter",
    "MalformedResponse",
    "NonceSource",
    "PublicDataClient",
    "RemoteError",
    "RetryCoordinator",
    "RetryDecision",
    "TradingOperations",
    "TransportFailure",
    "extract_server_nonce",
    "sign",
]
