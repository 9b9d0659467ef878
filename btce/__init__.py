"""BTC-e trading API client"""

from btce.core.constants import Direction, SortOrder
from btce.exchange import (
    BtceClient,
    BtceError,
    InvalidParameter,
    MalformedResponse,
    RemoteError,
    TransportFailure,
)

__version__ = "1.0.0"

__all__ = [
    "BtceClient",
    "BtceError",
    "Direction",
    "InvalidParameter",
    "MalformedResponse",
    "RemoteError",
    "SortOrder",
    "TransportFailure",
]
