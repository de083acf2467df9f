#!/usr/bin/env python3
from __future__ import annotations

from typing import Optional

import httpx


class NotifierError(Exception):
    pass


class PayloadEncodingError(NotifierError, TypeError):
    """Raised when a notification body cannot be encoded as JSON.

    Happens before anything is sent, so it surfaces at the call site in both
    blocking and non-blocking mode.
    """


def describe_transport_error(exc: Optional[BaseException]) -> str:
    """Return a short label for an httpx request failure.

    Labels: 'timeout', 'connect', 'network', 'protocol', 'decoding',
    'redirect', 'transport'.
    Returns an empty string when there is no error.
    """
    if exc is None:
        return ""
    if isinstance(exc, httpx.TimeoutException):
        return "timeout"
    if isinstance(exc, httpx.ConnectError):
        return "connect"
    if isinstance(exc, httpx.NetworkError):
        return "network"
    if isinstance(exc, httpx.ProtocolError):
        return "protocol"
    if isinstance(exc, httpx.DecodingError):
        return "decoding"
    if isinstance(exc, httpx.TooManyRedirects):
        return "redirect"
    return "transport"


__all__ = ["NotifierError", "PayloadEncodingError", "describe_transport_error"]
