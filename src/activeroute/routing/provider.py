"""Route provider protocol and built-in providers.

A provider is any object answering the three current-route queries::

    class MyProvider:
        def current_route_uri(self) -> str: ...
        def current_route_name(self) -> str | None: ...
        def current_route_action(self) -> str | None: ...

No base class required. The checker checks the shape, not the lineage.
"""

from typing import Protocol, runtime_checkable

from activeroute.context import lookup_route
from activeroute.routing.route import CurrentRoute


@runtime_checkable
class RouteProvider(Protocol):
    """Read-only view of the host router's current route."""

    def current_route_uri(self) -> str: ...

    def current_route_name(self) -> str | None: ...

    def current_route_action(self) -> str | None: ...


class StaticRouteProvider:
    """Provider bound to a single, fixed route.

    Useful in tests and for one-off renders outside a request::

        checker = Active(StaticRouteProvider(CurrentRoute("users/42", name="users.show")))
    """

    __slots__ = ("_route",)

    def __init__(self, route: CurrentRoute) -> None:
        self._route = route

    @property
    def route(self) -> CurrentRoute:
        return self._route

    def current_route_uri(self) -> str:
        return self._route.uri

    def current_route_name(self) -> str | None:
        return self._route.name

    def current_route_action(self) -> str | None:
        return self._route.action

    def __repr__(self) -> str:
        return f"StaticRouteProvider({self._route!r})"


class ContextRouteProvider:
    """Provider that reads the route bound to the current request.

    The host binds the matched route with ``bind_route()`` (or sets
    ``route_var`` directly) before rendering. One instance serves every
    request; each task or thread sees its own route.

    Outside a bound route every query answers as an empty route, so
    matchers return ``""``.
    """

    __slots__ = ()

    def current_route_uri(self) -> str:
        return lookup_route().uri

    def current_route_name(self) -> str | None:
        return lookup_route().name

    def current_route_action(self) -> str | None:
        return lookup_route().action
