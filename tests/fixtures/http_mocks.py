"""Mocked requests objects for exchange tests (no network)"""

from typing import Any, Optional
from unittest.mock import Mock

import requests


def make_response(payload: Any = None, status_code: int = 200, invalid_json: bool = False) -> Mock:
    """Build a requests.Response stand-in"""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    if invalid_json:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        response.text = "<html>502 Bad Gateway</html>"
    else:
        response.json.return_value = payload
        response.text = repr(payload)
    return response


def make_session(*responses: Any, method: str = "post", error: Optional[Exception] = None) -> Mock:
    """
    Build a requests.Session whose ``post``/``get`` replies in sequence.

    Payload dicts are wrapped with make_response; Mock responses and
    exceptions are passed through as-is.
    """
    session = Mock(spec=requests.Session)
    call = getattr(session, method)
    if error is not None:
        call.side_effect = error
    else:
        call.side_effect = [
            r if isinstance(r, (Mock, Exception)) else make_response(r)
            for r in responses
        ]
    return session


def sent_bodies(session: Mock) -> list:
    """Request bodies POSTed through a mocked session, in order"""
    return [c.kwargs["data"] for c in session.post.call_args_list]
