"""Configuration module: frozen dataclass loaded from YAML, env vars and CLI args."""

import argparse
import logging
import os
import sys
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    host: str = "localhost"
    port: int = 8125

    def __post_init__(self):
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise TypeError(f"Port must be an integer, got {type(self.port).__name__}")
        if not 0 < self.port < 65536:
            raise ValueError(f"Port out of range: {self.port}")


def load_yaml_config(path: str | None) -> dict:
    """Read ``host``/``port`` from a statsd YAML file; a missing file yields no overrides."""
    if not path:
        return {}
    if not os.path.exists(path):
        logger.warning("Statsd config %s not found, ignoring it", path)
        return {}

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Statsd config {path} must be a mapping of host/port")
    logger.info("Loaded statsd destination from %s", path)
    return {key: data[key] for key in ("host", "port") if key in data}


def load_config(argv: list[str] | None = None) -> Config:
    """Build Config from defaults <- YAML file <- env vars <- CLI args (highest priority)."""
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--host")
    parser.add_argument("--port")
    parser.add_argument("--config")
    args, _ = parser.parse_known_args(argv)

    settings = {"host": Config.host, "port": Config.port}
    settings.update(load_yaml_config(args.config or os.environ.get("STATSD_CONFIG")))
    settings["host"] = args.host or os.environ.get("STATSD_HOST", settings["host"])
    settings["port"] = args.port or os.environ.get("STATSD_PORT", settings["port"])

    return Config(host=str(settings["host"]), port=int(settings["port"]))
