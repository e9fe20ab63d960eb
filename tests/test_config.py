"""
Tests for progressors.config — config loading and per-key fallback.
"""

from progressors.config import DEFAULTS, load_config


class TestLoadConfig:
    def test_missing_file_returns_defaults(self, tmp_path):
        missing = tmp_path / "nonexistent" / "config.toml"
        assert load_config(path=missing) == DEFAULTS

    def test_default_path_is_used(self, isolated_config):
        isolated_config.write_text('style = "climbing"\n')
        assert load_config()["style"] == "climbing"

    def test_valid_toml_overrides_every_key(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text(
            'style = "smooth"\n'
            "width = 60\n"
            'value_display = "value_and_max"\n'
            "delay = 0.5\n"
        )
        assert load_config(path=cfg) == {
            "style": "smooth",
            "width": 60,
            "value_display": "value_and_max",
            "delay": 0.5,
        }

    def test_integer_delay_becomes_float(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("delay = 1\n")
        result = load_config(path=cfg)
        assert result["delay"] == 1.0
        assert isinstance(result["delay"], float)

    def test_malformed_toml_returns_defaults(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("style = [not valid toml\n")
        assert load_config(path=cfg) == DEFAULTS

    def test_non_utf8_returns_defaults(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_bytes(b'style = "\xff\xfe"\n')
        assert load_config(path=cfg) == DEFAULTS

    def test_unknown_style_falls_back(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('style = "rainbow"\nwidth = 12\n')
        result = load_config(path=cfg)
        assert result["style"] == "ascii"
        assert result["width"] == 12

    def test_negative_width_falls_back(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("width = -3\n")
        assert load_config(path=cfg)["width"] == 40

    def test_boolean_width_falls_back(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("width = true\n")
        assert load_config(path=cfg)["width"] == 40

    def test_string_delay_falls_back(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('delay = "fast"\n')
        assert load_config(path=cfg)["delay"] == 0.025

    def test_unknown_value_display_falls_back(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('value_display = "fraction"\n')
        assert load_config(path=cfg)["value_display"] == "percentage"

    def test_unrelated_keys_ignored(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('title = "my config"\n')
        assert load_config(path=cfg) == DEFAULTS

    def test_unreadable_file_returns_defaults(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('style = "smooth"\n')
        cfg.chmod(0o000)
        try:
            result = load_config(path=cfg)
        finally:
            cfg.chmod(0o644)  # restore for cleanup
        if result["style"] == "smooth":
            return  # running as root; permissions are not enforced
        assert result == DEFAULTS

    def test_defaults_are_not_shared(self, tmp_path):
        result = load_config(path=tmp_path / "missing.toml")
        result["width"] = 1
        assert DEFAULTS["width"] == 40
