"""Tests for domain/model/configuration.py."""

import pytest

from callorder.domain.model.configuration import PluginConfig


class TestPluginConfig:
    """Tests for PluginConfig."""

    def test_default_values(self) -> None:
        config = PluginConfig()
        assert config.auto_verify is False
        assert config.report is True
        assert config.report_width == 120

    def test_custom_values(self) -> None:
        config = PluginConfig(auto_verify=True, report=False, report_width=80)
        assert config.auto_verify is True
        assert config.report is False
        assert config.report_width == 80

    @pytest.mark.parametrize("width", [0, -10])
    def test_non_positive_width_raises(self, width: int) -> None:
        with pytest.raises(ValueError, match="report_width must be > 0"):
            PluginConfig(report_width=width)

    def test_is_frozen(self) -> None:
        config = PluginConfig()
        with pytest.raises(AttributeError):
            config.auto_verify = True  # type: ignore[misc]
