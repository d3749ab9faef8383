"""Tests for activeroute.config — ActiveConfig frozen dataclass."""

import pytest

from activeroute.config import ActiveConfig
from activeroute.errors import ActiveRouteError, ConfigurationError


class TestActiveConfig:
    def test_defaults(self) -> None:
        cfg = ActiveConfig()

        assert cfg.active_class == "active"
        assert cfg.action_separator == "@"
        assert cfg.controller_suffix == "Controller"
        assert cfg.method_prefixes == ("get", "post", "put", "delete", "show")
        assert cfg.trim_mode == "replace"
        assert cfg.autoescape is True

    def test_override(self) -> None:
        cfg = ActiveConfig(active_class="current", trim_mode="affix", autoescape=False)

        assert cfg.active_class == "current"
        assert cfg.trim_mode == "affix"
        assert cfg.autoescape is False

    def test_frozen(self) -> None:
        cfg = ActiveConfig()

        with pytest.raises(AttributeError):
            cfg.active_class = "other"  # type: ignore[misc]

    def test_unknown_trim_mode(self) -> None:
        with pytest.raises(ConfigurationError, match="trim_mode"):
            ActiveConfig(trim_mode="prefix")

    def test_empty_separator(self) -> None:
        with pytest.raises(ConfigurationError, match="action_separator"):
            ActiveConfig(action_separator="")

    def test_empty_method_prefix(self) -> None:
        with pytest.raises(ConfigurationError, match="method_prefixes"):
            ActiveConfig(method_prefixes=("get", ""))

    def test_empty_suffix_allowed(self) -> None:
        assert ActiveConfig(controller_suffix="").controller_suffix == ""


class TestHierarchy:
    def test_configuration_error_is_active_route_error(self) -> None:
        assert issubclass(ConfigurationError, ActiveRouteError)

    def test_active_route_error_is_exception(self) -> None:
        assert issubclass(ActiveRouteError, Exception)
