"""Self-test entry point, emits sample counters to the configured statsd daemon."""

import logging
import sys

from netstatsd.client import StatsdClient
from netstatsd.config import load_config

logger = logging.getLogger(__name__)


def run_self_test(client: StatsdClient) -> list[bool]:
    """Send two increments and two decrements, returning each call's outcome."""
    return [
        client.increment("test.counter1"),
        client.increment("test.counter2"),
        client.decrement("test.counter1"),
        client.decrement("test.counter2"),
    ]


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stderr,
    )

    config = load_config(argv)
    client = StatsdClient(config)
    logger.info("Sending self-test stats to %s:%d", config.host, config.port)

    results = run_self_test(client)
    logger.info("Self-test finished: %d/%d calls accepted", sum(results), len(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
