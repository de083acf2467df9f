#!/usr/bin/env python3
"""
HTTP transport for notifications.

Wraps an httpx.Client for synchronous posts and a ThreadPoolExecutor for
fire-and-forget posts. Network failures never raise out of a post: they are
captured in the returned Transaction so callers can inspect them like any
other response.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Optional

import httpx

from .errors import NotifierError, describe_transport_error


logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass
class Transaction:
    """Outcome of one POST: either a response or a transport error."""

    url: str
    request_body: bytes
    response: Optional[httpx.Response] = None
    error: Optional[Exception] = None

    def __bool__(self) -> bool:
        return True

    @property
    def ok(self) -> bool:
        return self.error is None and self.response is not None and self.response.is_success

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None

    @property
    def text(self) -> str:
        return self.response.text if self.response is not None else ""

    @property
    def error_message(self) -> str:
        if self.error is not None:
            return f"{describe_transport_error(self.error)}: {self.error}"
        if self.response is not None and not self.response.is_success:
            return f"HTTP {self.response.status_code} {self.response.reason_phrase}".strip()
        return ""

    def json(self) -> Any:
        if self.response is None:
            return None
        return self.response.json()


class Transport:
    def __init__(
        self,
        timeout: float = 10.0,
        max_workers: int = 4,
        client: Optional[httpx.Client] = None,
    ):
        self.timeout = timeout
        self.max_workers = max_workers
        self._owns_client = client is None
        self.client = client if client is not None else httpx.Client(timeout=timeout)
        self.executor: Optional[ThreadPoolExecutor] = None
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def post(self, url: str, content: bytes) -> Transaction:
        """POST a JSON body and wait for the outcome.

        Raises NotifierError if the transport has been closed.
        """
        if self._closed:
            raise NotifierError("Transport is closed")
        return self._send(url, content)

    def _send(self, url: str, content: bytes) -> Transaction:
        tx = Transaction(url=url, request_body=content)
        logger.debug(f"POST {url} ({len(content)} bytes)")
        try:
            tx.response = self.client.post(url, content=content, headers=JSON_HEADERS)
        except httpx.RequestError as e:
            logger.warning(f"Notification to {url} failed ({describe_transport_error(e)}): {e}")
            tx.error = e
        else:
            logger.debug(f"POST {url} -> HTTP {tx.response.status_code}")
        return tx

    def post_async(
        self,
        url: str,
        content: bytes,
        callback: Callable[[Any, Any], None],
    ) -> "Future[Transaction]":
        """POST in the background and call ``callback(self, transaction)`` when done.

        Raises NotifierError if the transport has been closed.
        """

        def _run() -> Transaction:
            try:
                tx = self._send(url, content)
            except Exception:
                logger.exception(f"Background notification to {url} failed")
                raise
            try:
                callback(self, tx)
            except Exception:
                logger.exception("Notification completion callback raised")
                raise
            return tx

        return self._get_executor().submit(_run)

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._closed:
                raise NotifierError("Transport is closed")
            if self.executor is None:
                self.executor = ThreadPoolExecutor(
                    max_workers=self.max_workers, thread_name_prefix="rollbar-notifier"
                )
                logger.debug(f"Async executor initialized with {self.max_workers} workers")
            return self.executor

    def close(self) -> None:
        """Wait for pending background posts, then release the HTTP client.

        Calling it again is a no-op.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            executor, self.executor = self.executor, None
        if executor is not None:
            executor.shutdown(wait=True)
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


__all__ = ["JSON_HEADERS", "Transaction", "Transport"]
