"""
Tests for sigctl/config/config.py.
"""

import pytest

from sigctl.config import Config, MAX_CONFIG_SIZE_BYTES
from sigctl.exceptions import ConfigError


@pytest.mark.unit
class TestLoad:
    def test_loads_yaml(self, config_file):
        config = Config(config_file)
        assert config["control"]["process_name"] == "gnatsd"
        assert config.path == config_file.resolve()

    def test_dotted_get(self, config_file):
        config = Config(config_file)
        assert config.get("logging.level") == "info"
        assert config.get("logging.missing", "x") == "x"
        assert config.get("control.process_name.deeper") is None

    def test_has(self, config_file):
        config = Config(config_file)
        assert config.has("control.disable_signals")
        assert not config.has("control.nope")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert dict(Config(path)) == {}

    def test_no_file(self):
        assert dict(Config()) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            Config(tmp_path / "missing.yaml")
        assert "unable to read configuration" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("a: [1, 2\n")
        with pytest.raises(ConfigError):
            Config(path)

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            Config(path)

    def test_oversized_file(self, tmp_path):
        path = tmp_path / "big.yaml"
        path.write_text("a: " + "x" * MAX_CONFIG_SIZE_BYTES + "\n")
        with pytest.raises(ConfigError) as exc_info:
            Config(path)
        assert "too large" in str(exc_info.value)


@pytest.mark.unit
class TestReload:
    def test_reload_picks_up_changes(self, config_file):
        config = Config(config_file)
        config_file.write_text("logging:\n  level: debug\n")

        assert config.reload() is config
        assert config.get("logging.level") == "debug"
        assert not config.has("control")

    def test_failed_reload_keeps_contents(self, config_file):
        config = Config(config_file)
        config_file.write_text("a: [1, 2\n")

        with pytest.raises(ConfigError):
            config.reload()
        assert config.get("control.process_name") == "gnatsd"

    def test_load_fresh_leaves_current_untouched(self, config_file, monkeypatch):
        monkeypatch.setenv("SIGCTL_LOGGING__LEVEL", "warning")
        config = Config(config_file)
        config_file.write_text("control:\n  process_name: other\n")

        fresh = config.load_fresh()

        assert fresh is not config
        assert fresh.path == config.path
        assert fresh.get("control.process_name") == "other"
        assert fresh.get("logging.level") == "warning"
        assert config.get("control.process_name") == "gnatsd"

        config.replace(fresh)
        assert config.get("control.process_name") == "other"

    def test_reload_without_file(self):
        with pytest.raises(ConfigError):
            Config().reload()


@pytest.mark.unit
class TestEnvOverrides:
    def test_override_nested_value(self, config_file, monkeypatch):
        monkeypatch.setenv("SIGCTL_CONTROL__PROCESS_NAME", "nats-server")
        monkeypatch.setenv("SIGCTL_CONTROL__DISABLE_SIGNALS", "true")
        config = Config(config_file)
        assert config.get("control.process_name") == "nats-server"
        assert config.get("control.disable_signals") is True

    def test_override_creates_sections(self, monkeypatch):
        monkeypatch.setenv("SIGCTL_CONTROL__TIMEOUT", "2.5")
        assert Config().get("control.timeout") == 2.5

    def test_overrides_disabled(self, config_file, monkeypatch):
        monkeypatch.setenv("SIGCTL_LOGGING__LEVEL", "debug")
        config = Config(config_file, enable_env_overrides=False)
        assert config.get("logging.level") == "info"
        assert config.get_env_overrides() == {}

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("GNATSD_LOGGING__LEVEL", "debug")
        assert Config(env_prefix="GNATSD_").get("logging.level") == "debug"

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("False", False), ("null", None), ("", None), ("12", 12),
         ("1.5", 1.5), ("pgrep", "pgrep")],
    )
    def test_value_conversion(self, raw, expected):
        assert Config._convert_env_value(raw) == expected
