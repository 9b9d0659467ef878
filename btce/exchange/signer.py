"""HMAC-SHA512 request signing"""

import hashlib
import hmac


def sign(secret: str, body: str) -> str:
    """
    Sign a canonical request body.

    The body must be the exact string sent on the wire; signing a
    re-encoded copy can reorder fields and break verification.

    Args:
        secret: API secret (shared signing key)
        body: URL-encoded request body

    Returns:
        128-character lowercase hex digest
    """
    return hmac.new(
        secret.encode("utf-8"),
        body.encode("utf-8"),
        hashlib.sha512,
    ).hexdigest()
