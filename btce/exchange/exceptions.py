"""Custom exceptions for exchange layer"""

from typing import Any, Dict, Optional


class BtceError(Exception):
    """Base exception for all BTC-e client errors"""
    pass


class TransportFailure(BtceError):
    """Endpoint could not be reached (connection error, timeout)"""
    pass


class MalformedResponse(BtceError):
    """Reply received but body is empty or not valid JSON"""
    pass


class RemoteError(BtceError):
    """Server returned a structured error"""

    def __init__(self, message: str, response: Optional[Dict[str, Any]] = None):
        self.message = message
        self.response = response
        detail = f"API Error Message: {message}"
        if response is not None:
            detail += f". Response: {response}"
        super().__init__(detail)


class InvalidParameter(BtceError, ValueError):
    """Caller argument rejected before any request was made"""
    pass
