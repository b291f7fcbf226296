"""Statsd client: public metric operations over the UDP transport."""

import dataclasses
import logging
import random
import time
from collections.abc import Iterable, Mapping
from contextlib import contextmanager

from netstatsd.config import Config
from netstatsd.encoder import (
    apply_sample_suffix,
    encode_counter,
    encode_timing,
    format_line,
)
from netstatsd.sampler import should_send, validate_rate
from netstatsd.transport import UDPTransport

logger = logging.getLogger(__name__)

_USAGE = "Usage: update_stats(name, ...) or update_stats([name, ...], ...)"


def _normalize_names(names) -> list[str]:
    """Turn a single name or a sequence of names into a list of names."""
    if isinstance(names, str):
        names = [names]
    elif isinstance(names, Mapping):
        raise TypeError(f"{_USAGE}; got a mapping")
    elif not isinstance(names, Iterable):
        raise TypeError(f"{_USAGE}; got {type(names).__name__}")

    result = []
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"Stat name must be a string, got {type(name).__name__}")
        if not name:
            raise ValueError("Stat name must be non-empty")
        try:
            name.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError(f"Stat name {name!r} is not valid UTF-8 text") from e
        result.append(name)
    return result


class StatsdClient:
    """Sends counters and timings to a statsd daemon.

    Every call is independent: the sample decision is taken once per call and
    a fresh UDP socket is used for its datagrams. Transport failures are
    logged and turned into a ``False`` return value.
    """

    def __init__(self, config: Config | None = None, transport=None, rng=random.random):
        self._config = config or Config()
        self._transport = transport or UDPTransport(lambda: self._config)
        self._rng = rng

    @property
    def config(self) -> Config:
        return self._config

    def configure(self, host: str | None = None, port: int | None = None) -> Config:
        """Point subsequent sends at a new destination."""
        changes = {}
        if host is not None:
            changes["host"] = host
        if port is not None:
            changes["port"] = int(port)
        self._config = dataclasses.replace(self._config, **changes)
        logger.info("Statsd destination set to %s:%d", self._config.host, self._config.port)
        return self._config

    def timing(self, name: str, milliseconds, rate=1) -> bool:
        """Log timing information in milliseconds."""
        if not isinstance(name, str):
            raise TypeError(f"Timer name must be a string, got {type(name).__name__}")
        (name,) = _normalize_names(name)
        return self.send({name: encode_timing(milliseconds)}, rate)

    def increment(self, names, rate=1) -> bool:
        """Increment one or more counters by 1."""
        return self.update_stats(names, 1, rate)

    def decrement(self, names, rate=1) -> bool:
        """Decrement one or more counters by 1."""
        return self.update_stats(names, -1, rate)

    inc = increment
    dec = decrement

    def update_stats(self, names, delta: int = 1, rate=1) -> bool:
        """Update one or more counters by an arbitrary delta."""
        value = encode_counter(delta)
        data = {name: value for name in _normalize_names(names)}
        return self.send(data, rate)

    def send(self, data: Mapping[str, str], rate=1) -> bool:
        """Sample once, then send every ``name: value`` entry as its own datagram.

        Returns True when the call was sampled out or every datagram was
        accepted by the local network stack.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"send() expects a mapping of name to value, got {type(data).__name__}")
        validate_rate(rate)
        _normalize_names(list(data))

        if not should_send(rate, self._rng):
            logger.debug("Sampled out %d stat(s) at rate %s", len(data), rate)
            return True

        if rate < 1:
            data = {name: apply_sample_suffix(value, rate) for name, value in data.items()}

        lines = [format_line(name, value) for name, value in data.items()]
        return self._transport.send_lines(lines)

    @contextmanager
    def timer(self, name: str, rate=1):
        """Time the enclosed block and record it with ``timing``."""
        start = time.monotonic()
        try:
            yield
        finally:
            elapsed_ms = (time.monotonic() - start) * 1000
            self.timing(name, elapsed_ms, rate)
