"""Authenticated request pipeline for the trading API"""

import logging
from threading import RLock
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import requests

from btce.core.constants import RESERVED_PARAMS
from btce.exchange.exceptions import (
    InvalidParameter,
    MalformedResponse,
    RemoteError,
    TransportFailure,
)
from btce.exchange.nonce import NonceSource
from btce.exchange.nonce_recovery import RetryCoordinator
from btce.exchange.signer import sign


logger = logging.getLogger("btce.exchange")

DEFAULT_TRADING_URL = "https://btc-e.nz/tapi/"
DEFAULT_USER_AGENT = "btce-client (python-requests)"

# One original attempt plus one nonce-resynced retry
MAX_ATTEMPTS = 2


def build_envelope(method: str, nonce: int, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Build the request envelope: method, nonce, then caller fields.

    Fields whose value is None are omitted.
    """
    envelope: Dict[str, Any] = {"method": method, "nonce": nonce}
    for key, value in (params or {}).items():
        if value is None:
            continue
        envelope[key] = value
    return envelope


def encode_body(envelope: Mapping[str, Any]) -> str:
    """URL-encode an envelope in insertion order"""
    return urlencode(list(envelope.items()))


class AuthenticatedTransport:
    """
    Signs and sends trading API calls.

    Each attempt takes a fresh nonce, encodes the envelope once, signs
    exactly that body and POSTs it with ``Key``/``Sign`` headers. A
    nonce rejection carrying the server's expected value is retried once
    after resyncing; every other failure surfaces to the caller.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        nonce_source: Optional[NonceSource] = None,
        trading_url: str = DEFAULT_TRADING_URL,
        timeout_seconds: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize AuthenticatedTransport.

        Args:
            api_key: Public API key (sent as ``Key`` header)
            api_secret: Signing secret (never transmitted or logged)
            nonce_source: Counter to draw nonces from (None = time-seeded)
            trading_url: Trading endpoint
            timeout_seconds: HTTP timeout per attempt
            user_agent: User-Agent header value
            session: requests.Session to use (None = new session)
        """
        self.api_key = api_key
        self._api_secret = api_secret
        self.nonce_source = nonce_source or NonceSource()
        self.retry_coordinator = RetryCoordinator(self.nonce_source)
        self.trading_url = trading_url
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self.session = session or requests.Session()

        # Held across nonce draw and send so nonces reach the server in order
        self._dispatch_lock = RLock()

    def dispatch(self, method: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Call a trading API method.

        Args:
            method: API method name (e.g. "getInfo")
            params: Method-specific fields (None values are omitted)

        Returns:
            Decoded response, ``{"success": 1, "return": {...}}``

        Raises:
            InvalidParameter: params contain a reserved key
            TransportFailure: endpoint unreachable or timed out
            MalformedResponse: empty or non-JSON reply
            RemoteError: server error that was not recovered
        """
        params = dict(params or {})
        reserved = [key for key in RESERVED_PARAMS if key in params]
        if reserved:
            raise InvalidParameter(f"Reserved parameter(s) not allowed: {reserved}")

        retry_in_progress = False

        for _ in range(MAX_ATTEMPTS):
            result = self._send_once(method, params)

            error = result.get("error")
            if error is None:
                return result

            with self._dispatch_lock:
                decision = self.retry_coordinator.assess(str(error), retry_in_progress)
            if not decision.retry:
                break

            retry_in_progress = True

        logger.error(f"{method} failed ({decision.reason}): {error}")
        raise RemoteError(str(error), result)

    def _send_once(self, method: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Run one attempt: nonce, encode, sign, POST, decode"""
        with self._dispatch_lock:
            nonce = self.nonce_source.next()
            body = encode_body(build_envelope(method, nonce, params))
            headers = {
                "Key": self.api_key,
                "Sign": sign(self._api_secret, body),
                "Content-Type": "application/x-www-form-urlencoded",
                "User-Agent": self.user_agent,
            }

            logger.debug(f"Dispatching {method} (nonce={nonce})")

            try:
                response = self.session.post(
                    self.trading_url,
                    data=body,
                    headers=headers,
                    timeout=self.timeout_seconds,
                )
            except requests.RequestException as e:
                logger.error(f"Could not reach trading API for {method}: {e}")
                raise TransportFailure(f"Could not get reply: {e}") from e

        return parse_response(response)


def parse_response(response: requests.Response) -> Dict[str, Any]:
    """
    Decode a JSON object reply.

    Raises:
        MalformedResponse: Body empty, not JSON, falsy, or not an object
    """
    try:
        result = response.json()
    except ValueError as e:
        raise MalformedResponse(
            f"Invalid data received (HTTP {response.status_code}), please make sure "
            f"connection is working and requested API exists"
        ) from e

    if not result or not isinstance(result, dict):
        raise MalformedResponse(
            f"Invalid data received (HTTP {response.status_code}): expected a JSON object"
        )

    return result
