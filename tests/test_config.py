"""Tests for config loading and resolution."""

from cytheme.config import DEFAULTS, load_config, resolve


class TestLoadConfig:
    def test_missing_file(self, tmp_path):
        assert load_config(tmp_path / "nope.toml") == {}

    def test_reads_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('model = "gemini-2.5-pro"\nstatus_interval = 1.5\npalette = "light"\n')
        cfg = load_config(path)
        assert cfg == {"model": "gemini-2.5-pro", "status_interval": 1.5, "palette": "light"}


class TestResolve:
    def test_cli_wins(self):
        assert resolve("flag", "config", "default") == "flag"

    def test_config_over_default(self):
        assert resolve(None, "config", "default") == "config"

    def test_default(self):
        assert resolve(None, None, "default") == "default"

    def test_falsy_cli_value_still_wins(self):
        assert resolve(0, 5, 10) == 0

    def test_defaults(self):
        assert DEFAULTS["model"] == "gemini-2.5-flash"
        assert DEFAULTS["base_url"] == "https://generativelanguage.googleapis.com/v1beta"
        assert DEFAULTS["status_interval"] == 2.0
