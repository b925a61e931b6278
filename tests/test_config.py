"""Tests for environment driven configuration."""

import pytest
from rich.style import Style

from hilite.config import HiliteConfig, load_config
from hilite.exceptions import ConfigurationError, StyleParseError


class TestHiliteConfig:
    """Defaults, overrides and derived option values."""

    def test_defaults(self):
        config = load_config()
        assert config.matched_style == "bold yellow"
        assert config.unmatched_style == ""
        assert config.ellipsis == "..."
        assert config.max_width is None
        assert config.search_threshold == 70
        assert config.strict_ranges is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("HILITE_MATCHED_STYLE", "red")
        monkeypatch.setenv("HILITE_MAX_WIDTH", "40")
        monkeypatch.setenv("HILITE_STRICT_RANGES", "true")
        config = load_config()
        assert config.matched_style == "red"
        assert config.max_width == 40
        assert config.strict_ranges is True

    def test_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("HILITE_ELLIPSIS=~\n", encoding="utf-8")
        assert load_config().ellipsis == "~"

    def test_populate_by_name(self):
        assert HiliteConfig(ellipsis="…").ellipsis == "…"

    def test_invalid_threshold(self, monkeypatch):
        monkeypatch.setenv("HILITE_SEARCH_THRESHOLD", "500")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config()
        assert exc_info.value.details["errors"]

    def test_highlight_options(self):
        options = HiliteConfig(matched_style="red", strict_ranges=True).highlight_options()
        assert options.matched_style == Style(color="red")
        assert options.unmatched_style == Style.null()
        assert options.ellipsis is None
        assert options.strict is True

    def test_highlight_options_with_ellipsis(self):
        assert HiliteConfig().highlight_options(ellipsis=True).ellipsis == "..."

    def test_invalid_style(self):
        with pytest.raises(StyleParseError):
            HiliteConfig(matched_style="bold notacolor").highlight_options()

    def test_truncate_options(self):
        config = HiliteConfig(max_width=10)
        options = config.truncate_options()
        assert options is not None
        assert options.max_width == 10
        assert options.ellipsis == "..."
        assert options.ellipsis_style == Style(dim=True)
        assert config.truncate_options(4).max_width == 4

    def test_truncate_options_without_width(self):
        assert HiliteConfig().truncate_options() is None
