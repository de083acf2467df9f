#!/usr/bin/env python3
"""
Delivery modes for notifications.

A notifier is either blocking (send and hand the response back) or
non-blocking (send in the background and pass the response to a callback).
The default is non-blocking with a callback that does nothing, so callers
must ask for blocking explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol


class CompletionCallback(Protocol):
    def __call__(self, client: Any, response: Any) -> None: ...


def noop_callback(client: Any, response: Any) -> None:
    """Default completion callback."""
    return None


class DeliveryMode:
    blocking = False


@dataclass(frozen=True)
class Blocking(DeliveryMode):
    blocking = True

    def __repr__(self) -> str:
        return "BLOCKING"


@dataclass(frozen=True)
class NonBlocking(DeliveryMode):
    callback: Callable[[Any, Any], None] = noop_callback


BLOCKING = Blocking()


def as_delivery_mode(value: Any) -> DeliveryMode:
    """Coerce a constructor/setter value into a DeliveryMode.

    - DeliveryMode instances are returned unchanged.
    - None selects blocking delivery.
    - Any callable selects non-blocking delivery with that callback,
      including a callback that does nothing.
    """
    if isinstance(value, DeliveryMode):
        return value
    if value is None:
        return BLOCKING
    if callable(value):
        return NonBlocking(value)
    raise TypeError(
        f"completion_callback must be callable, None or BLOCKING, not {type(value).__name__}"
    )


__all__ = [
    "BLOCKING",
    "Blocking",
    "CompletionCallback",
    "DeliveryMode",
    "NonBlocking",
    "as_delivery_mode",
    "noop_callback",
]
