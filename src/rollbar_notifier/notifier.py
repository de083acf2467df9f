#!/usr/bin/env python3
"""
Rollbar notifier.

Sends severity-leveled messages, with optional custom data, to the Rollbar
item API. Delivery is non-blocking by default: ``notify`` returns True at
once and the completion callback receives ``(transport, transaction)`` when
the request finishes. Set ``completion_callback`` to ``BLOCKING`` (or None)
to wait for the request and get the Transaction back instead.

    roll = Notifier(access_token="YOUR_post_server_item_ACCESS_TOKEN")
    roll.debug("Testing example stuff!", {"foo": "bar"})

    roll.completion_callback = BLOCKING
    tx = roll.error("Something broke")
    print(tx.status_code, tx.json())
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Union

from .config import DEFAULT_ENVIRONMENT, DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT_SECONDS, NotifierConfig
from .delivery import BLOCKING, DeliveryMode, as_delivery_mode, noop_callback
from .errors import NotifierError
from .payload import ITEM_URL, build_payload, encode_payload, find_caller_context
from .transport import Transaction, Transport


logger = logging.getLogger(__name__)


class Notifier:
    def __init__(
        self,
        access_token: Optional[str] = None,
        environment: str = DEFAULT_ENVIRONMENT,
        code_version: Optional[str] = None,
        completion_callback: Any = noop_callback,
        transport: Optional[Transport] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        self.access_token = access_token
        self.environment = environment
        self.code_version = code_version
        self.completion_callback = completion_callback
        self._owns_transport = transport is None
        self.transport = (
            transport if transport is not None else Transport(timeout=timeout, max_workers=max_workers)
        )
        self._closed = False

    @classmethod
    def from_config(
        cls,
        config: NotifierConfig,
        completion_callback: Any = noop_callback,
        transport: Optional[Transport] = None,
    ) -> "Notifier":
        return cls(
            access_token=config.access_token,
            environment=config.environment,
            code_version=config.code_version,
            completion_callback=completion_callback,
            transport=transport,
            timeout=config.timeout_seconds,
            max_workers=config.max_workers,
        )

    @property
    def delivery_mode(self) -> DeliveryMode:
        return self._delivery_mode

    @delivery_mode.setter
    def delivery_mode(self, value: DeliveryMode) -> None:
        self._delivery_mode = as_delivery_mode(value)

    @property
    def completion_callback(self) -> Union[Callable[[Any, Any], None], DeliveryMode]:
        """The completion callback, or BLOCKING when sends are synchronous."""
        mode = self._delivery_mode
        return BLOCKING if mode.blocking else mode.callback

    @completion_callback.setter
    def completion_callback(self, value: Any) -> None:
        self._delivery_mode = as_delivery_mode(value)

    def notify(
        self,
        severity: str,
        message: str,
        custom: Optional[Mapping[str, Any]] = None,
        context: Optional[str] = None,
    ) -> Union[Transaction, bool]:
        """Send one notification.

        Returns the Transaction in blocking mode, True otherwise. Raises
        PayloadEncodingError if ``custom`` is not JSON serializable and
        NotifierError once the notifier has been closed.
        """
        if self._closed:
            raise NotifierError("Notifier is closed")
        if context is None:
            context = find_caller_context()
        payload = build_payload(
            self.access_token,
            self.environment,
            severity,
            message,
            custom,
            code_version=self.code_version,
            context=context,
        )
        content = encode_payload(payload)

        mode = self._delivery_mode
        if mode.blocking:
            return self.transport.post(ITEM_URL, content)
        self.transport.post_async(ITEM_URL, content, mode.callback)
        return True

    def critical(
        self, message: str, custom: Optional[Mapping[str, Any]] = None, context: Optional[str] = None
    ) -> Union[Transaction, bool]:
        return self.notify("critical", message, custom, context)

    def error(
        self, message: str, custom: Optional[Mapping[str, Any]] = None, context: Optional[str] = None
    ) -> Union[Transaction, bool]:
        return self.notify("error", message, custom, context)

    def warning(
        self, message: str, custom: Optional[Mapping[str, Any]] = None, context: Optional[str] = None
    ) -> Union[Transaction, bool]:
        return self.notify("warning", message, custom, context)

    def info(
        self, message: str, custom: Optional[Mapping[str, Any]] = None, context: Optional[str] = None
    ) -> Union[Transaction, bool]:
        return self.notify("info", message, custom, context)

    def debug(
        self, message: str, custom: Optional[Mapping[str, Any]] = None, context: Optional[str] = None
    ) -> Union[Transaction, bool]:
        return self.notify("debug", message, custom, context)

    def close(self) -> None:
        """Stop accepting notifications and release the transport if this notifier created it."""
        self._closed = True
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "Notifier":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


__all__ = ["Notifier"]
