"""Unauthenticated market-data lookups"""

import logging
from typing import Any, Dict, Optional

import requests

from btce.core.constants import DEFAULT_PUBLIC_LIMIT, MAX_PUBLIC_LIMIT, MIN_PUBLIC_LIMIT
from btce.exchange.exceptions import (
    InvalidParameter,
    MalformedResponse,
    RemoteError,
    TransportFailure,
)


logger = logging.getLogger("btce.exchange")

DEFAULT_PUBLIC_URL = "https://btc-e.nz/api/3/"


class PublicDataClient:
    """
    Public API v3 client (ticker, depth, trades, fee).

    No signing, no nonce and no retry: a failed lookup is reported to the
    caller as-is.
    """

    def __init__(
        self,
        public_url: str = DEFAULT_PUBLIC_URL,
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.public_url = public_url if public_url.endswith("/") else public_url + "/"
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    @staticmethod
    def _validate_limit(limit: int) -> int:
        if not isinstance(limit, int) or isinstance(limit, bool):
            raise InvalidParameter(f"limit must be an integer, got: {limit!r}")
        if limit < MIN_PUBLIC_LIMIT or limit > MAX_PUBLIC_LIMIT:
            raise InvalidParameter(
                f"limit must be between {MIN_PUBLIC_LIMIT} and {MAX_PUBLIC_LIMIT}, got: {limit}"
            )
        return limit

    def _get(self, endpoint: str, pair: str, limit: Optional[int] = None) -> Any:
        """
        GET ``<public_url><endpoint>/<pair>`` and decode the JSON body.

        Raises:
            TransportFailure: endpoint unreachable or timed out
            MalformedResponse: body is not JSON
            RemoteError: server replied with an ``error`` field
        """
        url = f"{self.public_url}{endpoint}/{pair}"
        params = {"limit": limit} if limit is not None else None

        try:
            response = self.session.get(url, params=params, timeout=self.timeout_seconds)
        except requests.RequestException as e:
            logger.error(f"Public API request failed ({endpoint}/{pair}): {e}")
            raise TransportFailure(f"Could not get reply: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponse(
                f"Invalid data received from {endpoint}/{pair} (HTTP {response.status_code})"
            ) from e

        if isinstance(data, dict) and data.get("error") is not None:
            raise RemoteError(str(data["error"]), data)

        return data

    def get_pair_fee(self, pair: str) -> Dict[str, Any]:
        """Fetch the trading fee for a pair"""
        return self._get("fee", pair)

    def get_pair_ticker(self, pair: str) -> Dict[str, Any]:
        """Fetch the ticker for a pair"""
        return self._get("ticker", pair)

    def get_pair_trades(self, pair: str, limit: int = DEFAULT_PUBLIC_LIMIT) -> Dict[str, Any]:
        """
        Fetch recent trades for a pair.

        Args:
            pair: Trading pair (e.g. "btc_usd")
            limit: Number of trades, 1..2000

        Raises:
            InvalidParameter: limit outside 1..2000 (no request is made)
        """
        return self._get("trades", pair, self._validate_limit(limit))

    def get_pair_depth(self, pair: str, limit: int = DEFAULT_PUBLIC_LIMIT) -> Dict[str, Any]:
        """
        Fetch order book depth for a pair.

        Args:
            pair: Trading pair (e.g. "btc_usd")
            limit: Number of levels per side, 1..2000

        Raises:
            InvalidParameter: limit outside 1..2000 (no request is made)
        """
        return self._get("depth", pair, self._validate_limit(limit))
