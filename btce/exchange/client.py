"""BTC-e API client: trading calls plus public market data"""

import logging
import os
from typing import Any, Dict, Optional

import requests

from btce.config.models import ExchangeConfig
from btce.core.constants import DEFAULT_PUBLIC_LIMIT
from btce.exchange.nonce import NonceSource
from btce.exchange.public_client import DEFAULT_PUBLIC_URL, PublicDataClient
from btce.exchange.trading import TradingOperations
from btce.exchange.transport import (
    DEFAULT_TRADING_URL,
    DEFAULT_USER_AGENT,
    AuthenticatedTransport,
)


logger = logging.getLogger("btce.exchange")


class BtceClient(TradingOperations):
    """
    BTC-e trading and market-data client.

    Features:
    - HMAC-SHA512 signed trading calls with a monotonic nonce
    - One automatic retry after a server-reported nonce resync
    - Unauthenticated ticker/depth/trades/fee lookups

    The nonce lives in this process only. Two client instances (or two
    processes) sharing one API key will race each other's nonces; give
    each concurrent user its own key.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        base_nonce: Optional[int] = None,
        trading_url: str = DEFAULT_TRADING_URL,
        public_url: str = DEFAULT_PUBLIC_URL,
        request_timeout_seconds: float = 30.0,
        public_timeout_seconds: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize BtceClient.

        Args:
            api_key: BTC-e API key
            api_secret: BTC-e API secret
            base_nonce: Starting nonce (None = current Unix time)
            trading_url: Trading API endpoint
            public_url: Public API v3 base URL
            request_timeout_seconds: Timeout for trading calls
            public_timeout_seconds: Timeout for public lookups
            user_agent: User-Agent header for trading calls
            session: Shared requests.Session (None = one per sub-client)
        """
        transport = AuthenticatedTransport(
            api_key=api_key,
            api_secret=api_secret,
            nonce_source=NonceSource(base_nonce),
            trading_url=trading_url,
            timeout_seconds=request_timeout_seconds,
            user_agent=user_agent,
            session=session,
        )
        super().__init__(transport)

        self.public = PublicDataClient(
            public_url=public_url,
            timeout_seconds=public_timeout_seconds,
            session=session,
        )

        logger.info(f"BTC-e client initialized (trading_url={trading_url})")

    @classmethod
    def from_config(cls, config: ExchangeConfig, session: Optional[requests.Session] = None) -> "BtceClient":
        """Create client from config, reading credentials from the environment"""
        api_key = os.getenv(config.api_key_env)
        api_secret = os.getenv(config.api_secret_env)

        if not api_key or not api_secret:
            raise ValueError(
                f"API credentials not found in environment: "
                f"{config.api_key_env}, {config.api_secret_env}"
            )

        return cls(
            api_key=api_key,
            api_secret=api_secret,
            base_nonce=config.base_nonce,
            trading_url=config.trading_url,
            public_url=config.public_url,
            request_timeout_seconds=config.request_timeout_seconds,
            public_timeout_seconds=config.public_timeout_seconds,
            user_agent=config.user_agent,
            session=session,
        )

    @property
    def nonce_source(self) -> NonceSource:
        return self.transport.nonce_source

    def dispatch(self, method: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Alias of ``query``"""
        return self.query(method, params)

    def get_pair_fee(self, pair: str) -> Dict[str, Any]:
        return self.public.get_pair_fee(pair)

    def get_pair_ticker(self, pair: str) -> Dict[str, Any]:
        return self.public.get_pair_ticker(pair)

    def get_pair_trades(self, pair: str, limit: int = DEFAULT_PUBLIC_LIMIT) -> Dict[str, Any]:
        return self.public.get_pair_trades(pair, limit)

    def get_pair_depth(self, pair: str, limit: int = DEFAULT_PUBLIC_LIMIT) -> Dict[str, Any]:
        return self.public.get_pair_depth(pair, limit)
