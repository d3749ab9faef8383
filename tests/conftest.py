"""Shared fixtures for activeroute tests."""

from collections.abc import Callable

import pytest

from activeroute.active import Active
from activeroute.config import ActiveConfig
from activeroute.routing.provider import StaticRouteProvider
from activeroute.routing.route import CurrentRoute


@pytest.fixture
def make_active() -> Callable[..., Active]:
    """Build an ``Active`` checker over a fixed route."""

    def _make(
        uri: str = "",
        name: str | None = None,
        action: str | None = None,
        config: ActiveConfig | None = None,
    ) -> Active:
        route = CurrentRoute(uri=uri, name=name, action=action)
        return Active(StaticRouteProvider(route), config)

    return _make
