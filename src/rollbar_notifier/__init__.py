"""
rollbar_notifier - send messages to the rollbar.com item API.

Blocking and non-blocking delivery of severity-leveled notifications with
optional custom data.
"""

__version__ = "1.1.1"

from .config import NotifierConfig, config_from_env, load_config
from .delivery import BLOCKING, Blocking, DeliveryMode, NonBlocking, noop_callback
from .errors import NotifierError, PayloadEncodingError
from .notifier import Notifier
from .payload import API_URL, ITEM_URL, LEVELS
from .transport import Transaction, Transport

__all__ = [
    "API_URL",
    "BLOCKING",
    "Blocking",
    "DeliveryMode",
    "ITEM_URL",
    "LEVELS",
    "NonBlocking",
    "Notifier",
    "NotifierConfig",
    "NotifierError",
    "PayloadEncodingError",
    "Transaction",
    "Transport",
    "config_from_env",
    "load_config",
    "noop_callback",
]
