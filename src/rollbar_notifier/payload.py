#!/usr/bin/env python3
"""
Request body assembly for the Rollbar item API.

Builds the JSON document posted to ``/api/1/item/``:

    {
      "access_token": ...,
      "data": {
        "environment": ...,
        "body": {"message": {"body": <message>, **custom}},
        "platform": ..., "title": <message>, "timestamp": ..., "level": ...,
        "code_version": ...,            # only when configured
        "notifier": {"name": ..., "version": ...},
        "context": ...                  # only when known
      }
    }
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Any, Dict, Mapping, Optional

from . import __version__
from .errors import PayloadEncodingError


API_URL = "https://api.rollbar.com/api/1/"
ITEM_URL = API_URL + "item/"

NOTIFIER_NAME = "rollbar-notifier"

LEVELS = ("critical", "error", "warning", "info", "debug")

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def build_payload(
    access_token: Optional[str],
    environment: str,
    severity: str,
    message: str,
    custom: Optional[Mapping[str, Any]] = None,
    *,
    code_version: Optional[str] = None,
    context: Optional[str] = None,
    timestamp: Optional[int] = None,
    platform: Optional[str] = None,
) -> Dict[str, Any]:
    """Return the item payload for one notification.

    Custom keys are merged after the message text, so a custom ``body`` key
    replaces it.
    """
    message_obj: Dict[str, Any] = {"body": message}
    if custom:
        message_obj.update(custom)

    data: Dict[str, Any] = {
        "environment": environment,
        "body": {"message": message_obj},
        "platform": platform if platform is not None else sys.platform,
        "title": message,
        "timestamp": int(time.time()) if timestamp is None else int(timestamp),
        "level": severity,
    }
    if code_version is not None:
        data["code_version"] = code_version
    data["notifier"] = {"name": NOTIFIER_NAME, "version": __version__}
    if context is not None:
        data["context"] = context

    return {"access_token": access_token, "data": data}


def encode_payload(payload: Mapping[str, Any]) -> bytes:
    try:
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise PayloadEncodingError(f"Notification payload is not JSON serializable: {e}") from e


def find_caller_context() -> Optional[str]:
    """Return 'module:function' for the first frame outside this package.

    Returns None when no such frame can be found.
    """
    try:
        frame = sys._getframe(1)
    except ValueError:
        return None
    while frame is not None:
        filename = os.path.abspath(frame.f_code.co_filename)
        if os.path.dirname(filename) != _PACKAGE_DIR:
            module = frame.f_globals.get("__name__", "")
            func = frame.f_code.co_name
            return f"{module}:{func}" if module else func
        frame = frame.f_back
    return None


__all__ = [
    "API_URL",
    "ITEM_URL",
    "LEVELS",
    "NOTIFIER_NAME",
    "build_payload",
    "encode_payload",
    "find_caller_context",
]
