#!/usr/bin/env python3
"""
Notifier configuration helpers.

Normalizes settings coming from a plain dict (e.g. an application's JSON
config) or from environment variables into a NotifierConfig.

Recognized keys / variables:
- access_token   / ROLLBAR_ACCESS_TOKEN
- environment    / ROLLBAR_ENVIRONMENT   (default 'production')
- code_version   / ROLLBAR_CODE_VERSION  (blank means unset)
- timeout_seconds / ROLLBAR_TIMEOUT      (default 10)
- max_workers                            (default 4)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional


DEFAULT_ENVIRONMENT = "production"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_MAX_WORKERS = 4


@dataclass
class NotifierConfig:
    access_token: Optional[str] = None
    environment: str = DEFAULT_ENVIRONMENT
    code_version: Optional[str] = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    max_workers: int = DEFAULT_MAX_WORKERS


def _optional_str(value) -> Optional[str]:
    if value is None:
        return None
    s = str(value).strip()
    return s or None


def _num(cfg: Mapping, name: str, default_val):
    try:
        val = type(default_val)(cfg.get(name, default_val))
    except (TypeError, ValueError):
        return default_val
    return val if val > 0 else default_val


def load_config(cfg: Mapping) -> NotifierConfig:
    """Build a NotifierConfig from a dict, falling back to defaults on bad values."""
    return NotifierConfig(
        access_token=_optional_str(cfg.get("access_token")),
        environment=_optional_str(cfg.get("environment")) or DEFAULT_ENVIRONMENT,
        code_version=_optional_str(cfg.get("code_version")),
        timeout_seconds=_num(cfg, "timeout_seconds", DEFAULT_TIMEOUT_SECONDS),
        max_workers=_num(cfg, "max_workers", DEFAULT_MAX_WORKERS),
    )


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> NotifierConfig:
    """Build a NotifierConfig from ROLLBAR_* environment variables."""
    env = os.environ if environ is None else environ
    cfg: Dict[str, Optional[str]] = {
        "access_token": env.get("ROLLBAR_ACCESS_TOKEN"),
        "environment": env.get("ROLLBAR_ENVIRONMENT"),
        "code_version": env.get("ROLLBAR_CODE_VERSION"),
    }
    if env.get("ROLLBAR_TIMEOUT"):
        cfg["timeout_seconds"] = env.get("ROLLBAR_TIMEOUT")
    return load_config(cfg)


__all__ = [
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_TIMEOUT_SECONDS",
    "NotifierConfig",
    "config_from_env",
    "load_config",
]
