"""Best-effort UDP delivery of statsd wire lines."""

import logging
import socket
from typing import Callable, Iterable

from netstatsd.config import Config

logger = logging.getLogger(__name__)


class UDPTransport:
    """Sends one datagram per wire line to the configured statsd daemon.

    The destination is read from ``config_provider`` on every ``open()`` so a
    reconfigured client takes effect on the next send. Network errors are
    logged and reported as ``False``/``None``, never raised.
    """

    def __init__(self, config_provider: Callable[[], Config]):
        self._config_provider = config_provider

    def open(self) -> socket.socket | None:
        """Create a datagram socket connected to the destination, or None on failure."""
        config = self._config_provider()
        try:
            infos = socket.getaddrinfo(
                config.host, config.port, socket.AF_INET, socket.SOCK_DGRAM
            )
            family, socktype, proto, _, addr = infos[0]
            sock = socket.socket(family, socktype, proto)
            try:
                sock.connect(addr)
            except OSError:
                sock.close()
                raise
            return sock
        # ValueError covers hosts that fail IDNA encoding or contain NUL bytes
        except (OSError, ValueError, IndexError) as e:
            logger.warning(
                "Could not create UDP socket for %s:%s: %s", config.host, config.port, e
            )
            return None

    def send_line(self, sock: socket.socket, line: str) -> bool:
        """Send a single datagram. True only means the local stack accepted it."""
        try:
            sock.send(line.encode("utf-8"))
            logger.debug("Sent %s", line)
            return True
        except OSError as e:
            logger.warning("UDP packet '%s' send failed: %s", line, e)
            return False

    def send_lines(self, lines: Iterable[str]) -> bool:
        """Send every line on a fresh socket. Returns True if all were accepted."""
        sock = self.open()
        if sock is None:
            return False

        all_sent = True
        try:
            for line in lines:
                if not self.send_line(sock, line):
                    all_sent = False
        finally:
            sock.close()
        return all_sent
