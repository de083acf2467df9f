import pytest

from rollbar_notifier.delivery import (
    BLOCKING,
    Blocking,
    NonBlocking,
    as_delivery_mode,
    noop_callback,
)


def test_none_and_sentinel_select_blocking() -> None:
    assert as_delivery_mode(None) is BLOCKING
    assert as_delivery_mode(BLOCKING) is BLOCKING
    assert as_delivery_mode(Blocking()).blocking is True


def test_any_callable_selects_non_blocking_including_noop() -> None:
    mode = as_delivery_mode(noop_callback)
    assert isinstance(mode, NonBlocking)
    assert mode.blocking is False
    assert mode.callback is noop_callback

    def cb(client, response):
        pass

    assert as_delivery_mode(cb) == NonBlocking(cb)


def test_existing_mode_is_kept() -> None:
    mode = NonBlocking(noop_callback)
    assert as_delivery_mode(mode) is mode


def test_non_callable_is_rejected() -> None:
    with pytest.raises(TypeError):
        as_delivery_mode("not a callback")


def test_noop_callback_accepts_client_and_response() -> None:
    assert noop_callback(object(), object()) is None
