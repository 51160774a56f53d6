"""Tests for trafficbar.config."""

import textwrap

import pytest

from trafficbar.config import AppConfig


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for key in ("TRAFFICBAR_INTERVAL", "TRAFFICBAR_INTERFACE", "TRAFFICBAR_HIDE"):
        monkeypatch.delenv(key, raising=False)


class TestAppConfig:
    def test_defaults(self, default_config):
        assert default_config.interval == 1.5
        assert default_config.connectivity_interval == 2.0
        assert default_config.interface == ""
        assert default_config.proc_path == "/proc"
        assert default_config.hide == []
        assert default_config.log_level == "WARNING"

    def test_load_from_toml(self, sample_config):
        config = AppConfig.load(config_path=str(sample_config))
        assert config.interface == "wlan0"
        assert config.interval == 2.0
        assert isinstance(config.interval, float)
        assert config.connectivity_interval == 5.0
        assert config.hide == ["network_traffic", "clock"]
        assert config.text_color == "green"
        assert config.log_level == "DEBUG"

    def test_hide_as_string(self, tmp_path):
        config_file = tmp_path / "config.toml"
        config_file.write_text(textwrap.dedent("""\
            [indicator]
            hide = "network_traffic,clock"
        """))
        config = AppConfig.load(config_path=str(config_file))
        assert config.hide == ["clock", "network_traffic"]

    def test_cli_overrides(self, sample_config):
        config = AppConfig.load(
            config_path=str(sample_config),
            cli_overrides={"interface": "eth1", "interval": 0.5, "text_color": None},
        )
        assert config.interface == "eth1"
        assert config.interval == 0.5
        # None overrides are ignored
        assert config.text_color == "green"

    def test_load_nonexistent_config(self):
        config = AppConfig.load(config_path="/nonexistent/path.toml")
        assert config.interval == 1.5

    def test_xdg_location(self, tmp_path):
        xdg_dir = tmp_path / "xdg" / "trafficbar"
        xdg_dir.mkdir(parents=True)
        (xdg_dir / "config.toml").write_text('interface = "ens3"\n')
        config = AppConfig.load()
        assert config.interface == "ens3"

    def test_env_override(self, monkeypatch, sample_config):
        monkeypatch.setenv("TRAFFICBAR_INTERVAL", "3")
        monkeypatch.setenv("TRAFFICBAR_INTERFACE", "lo")
        monkeypatch.setenv("TRAFFICBAR_HIDE", "clock")
        config = AppConfig.load(config_path=str(sample_config))
        assert config.interval == 3.0
        assert config.interface == "lo"
        assert config.hide == ["clock"]

    def test_invalid_interval(self):
        with pytest.raises(ValueError):
            AppConfig.load(cli_overrides={"interval": 0})

    def test_invalid_connectivity_interval(self):
        with pytest.raises(ValueError):
            AppConfig(connectivity_interval=-1).validate()
