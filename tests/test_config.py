"""Tests for config module."""

import pytest

from netstatsd.config import Config, load_config, load_yaml_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("STATSD_HOST", "STATSD_PORT", "STATSD_CONFIG"):
        monkeypatch.delenv(name, raising=False)


class TestConfigDefaults:
    def test_defaults(self):
        cfg = Config()
        assert cfg.host == "localhost"
        assert cfg.port == 8125

    def test_frozen(self):
        cfg = Config()
        with pytest.raises(AttributeError):
            cfg.port = 1234

    @pytest.mark.parametrize("port", [0, -1, 65536, 70000])
    def test_out_of_range_port(self, port):
        with pytest.raises(ValueError):
            Config("localhost", port)

    def test_non_integer_port(self):
        with pytest.raises(TypeError):
            Config("localhost", "8125")

    def test_unknown_cli_args_ignored(self):
        cfg = load_config(["--verbose", "--host", "stats.local"])
        assert cfg.host == "stats.local"

    def test_empty_argv(self):
        cfg = load_config([])
        assert cfg == Config()


class TestLoadConfigCLI:
    def test_cli_overrides(self):
        cfg = load_config(["--host", "10.0.0.1", "--port", "9999"])
        assert cfg.host == "10.0.0.1"
        assert cfg.port == 9999

    def test_cli_equals_syntax(self):
        cfg = load_config(["--host=stats.example.net", "--port=7777"])
        assert cfg.host == "stats.example.net"
        assert cfg.port == 7777

    def test_invalid_port(self):
        with pytest.raises(ValueError):
            load_config(["--port", "70000"])

    def test_non_numeric_port(self):
        with pytest.raises(ValueError):
            load_config(["--port", "abc"])


class TestLoadConfigEnv:
    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("STATSD_HOST", "env-host")
        monkeypatch.setenv("STATSD_PORT", "5555")
        cfg = load_config([])
        assert cfg.host == "env-host"
        assert cfg.port == 5555

    def test_cli_overrides_env(self, monkeypatch):
        monkeypatch.setenv("STATSD_HOST", "env-host")
        monkeypatch.setenv("STATSD_PORT", "5555")
        cfg = load_config(["--host", "cli-host", "--port", "6666"])
        assert cfg.host == "cli-host"
        assert cfg.port == 6666


class TestLoadConfigYaml:
    def test_yaml_file(self, tmp_path):
        path = tmp_path / "statsd.yml"
        path.write_text("host: yaml-host\nport: 8200\n")
        cfg = load_config(["--config", str(path)])
        assert cfg.host == "yaml-host"
        assert cfg.port == 8200

    def test_yaml_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "statsd.yml"
        path.write_text("host: yaml-host\n")
        monkeypatch.setenv("STATSD_CONFIG", str(path))
        cfg = load_config([])
        assert cfg.host == "yaml-host"
        assert cfg.port == 8125

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "statsd.yml"
        path.write_text("host: yaml-host\nport: 8200\n")
        monkeypatch.setenv("STATSD_PORT", "8300")
        cfg = load_config(["--config", str(path)])
        assert cfg.host == "yaml-host"
        assert cfg.port == 8300

    def test_missing_file(self, tmp_path):
        assert load_yaml_config(str(tmp_path / "nope.yml")) == {}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_yaml_config(str(path)) == {}

    def test_no_path(self):
        assert load_yaml_config(None) == {}
