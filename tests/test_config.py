"""Tests for signpost.config — RouterConfig."""

import pytest

from signpost.config import RouterConfig


class TestRouterConfig:
    def test_defaults(self) -> None:
        config = RouterConfig()
        assert config.api_group == "api"
        assert config.param_pattern == r"[^/]+"
        assert config.case_sensitive is False

    def test_override(self) -> None:
        config = RouterConfig(api_group="rpc", case_sensitive=True)
        assert config.api_group == "rpc"
        assert config.case_sensitive is True

    def test_frozen(self) -> None:
        config = RouterConfig()
        with pytest.raises(AttributeError):
            config.api_group = "rpc"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert RouterConfig() == RouterConfig()
        assert RouterConfig() != RouterConfig(api_group="rpc")
