"""Module-level metric functions backed by a replaceable default client."""

import threading

from netstatsd.client import StatsdClient
from netstatsd.config import load_config

_lock = threading.Lock()
_client: StatsdClient | None = None


def get_client() -> StatsdClient:
    """Return the process default client, building it from env vars on first use."""
    global _client
    with _lock:
        if _client is None:
            _client = StatsdClient(load_config([]))
        return _client


def set_client(client: StatsdClient | None):
    """Replace the default client. ``None`` rebuilds it on next use."""
    global _client
    with _lock:
        _client = client


def configure(host: str | None = None, port: int | None = None):
    return get_client().configure(host=host, port=port)


def timing(name, milliseconds, rate=1) -> bool:
    return get_client().timing(name, milliseconds, rate)


def increment(names, rate=1) -> bool:
    return get_client().increment(names, rate)


def decrement(names, rate=1) -> bool:
    return get_client().decrement(names, rate)


def update_stats(names, delta=1, rate=1) -> bool:
    return get_client().update_stats(names, delta, rate)


def send(data, rate=1) -> bool:
    return get_client().send(data, rate)


inc = increment
dec = decrement
