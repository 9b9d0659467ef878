"""Recovery from server-rejected nonces"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from btce.exchange.nonce import NonceSource


logger = logging.getLogger("btce.exchange")


# Server phrasings that carry the nonce it expects next. Anything else
# that merely mentions "nonce" is not trusted for a resync.
NONCE_ERROR_PATTERNS = (
    re.compile(r"you should send(?:\s+nonce)?\s*:\s*(\d+)", re.IGNORECASE),
    re.compile(r"minimal nonce value\D*?(\d+)", re.IGNORECASE),
)


def extract_server_nonce(message: str) -> Optional[int]:
    """
    Pull the server-expected nonce out of an error message.

    Examples:
        >>> extract_server_nonce("invalid nonce parameter; on key:0, you should send nonce:150,")
        150
        >>> extract_server_nonce("invalid nonce parameter; on key:4000000, you should send:4000001")
        4000001
        >>> extract_server_nonce("invalid pair") is None
        True
    """
    if not message or "nonce" not in message.lower():
        return None

    for pattern in NONCE_ERROR_PATTERNS:
        match = pattern.search(message)
        if match:
            return int(match.group(1))

    return None


@dataclass(frozen=True)
class RetryDecision:
    """Outcome of inspecting a remote error"""
    retry: bool
    server_nonce: Optional[int] = None
    reason: str = ""


class RetryCoordinator:
    """
    Decides whether a failed authenticated call may be retried once.

    Only an explicit nonce-rejection message with a recoverable value
    qualifies. The retry budget belongs to the caller's dispatch loop:
    one attempt, one retry, then the error is final.
    """

    def __init__(self, nonce_source: NonceSource):
        self.nonce_source = nonce_source

    def assess(self, error_message: str, retry_in_progress: bool) -> RetryDecision:
        """
        Inspect a remote error and resync the nonce when recoverable.

        Args:
            error_message: Server ``error`` text
            retry_in_progress: True if this call already used its retry

        Returns:
            RetryDecision (retry=True means the counter was resynced)
        """
        if retry_in_progress:
            return RetryDecision(retry=False, reason="retry budget exhausted")

        server_nonce = extract_server_nonce(error_message)
        if server_nonce is None:
            return RetryDecision(retry=False, reason="not a recoverable nonce error")

        sent_nonce = self.nonce_source.current
        self.nonce_source.resync(server_nonce)
        logger.warning(
            f"Nonce we sent ({sent_nonce}) is invalid, retrying request "
            f"with server returned nonce: ({server_nonce})"
        )
        return RetryDecision(retry=True, server_nonce=server_nonce)
