"""activeroute — "active" CSS classes for the current route.

Decides whether a navigation element represents the current route by
comparing its URI pattern, name, action identifier or controller with
caller-supplied values.

Basic usage::

    from activeroute import Active, ContextRouteProvider, CurrentRoute, bind_route

    active = Active(ContextRouteProvider())

    with bind_route(CurrentRoute("users/{id}", name="users.show",
                                 action="UserController@getShow")):
        active.match_by_uri_pattern("users/*")     # "active"
        active.match_by_route_name("users.index")  # ""
        active.match_by_controller("User")         # "active"

Templates (kida)::

    from activeroute.templating.integration import install_globals
    install_globals(env, active)
"""

__version__ = "0.1.0"
__all__ = [
    "ActionName",
    "Active",
    "ActiveConfig",
    "ActiveRouteError",
    "ActivationQuery",
    "ConfigurationError",
    "ContextRouteProvider",
    "Controller",
    "ControllerSet",
    "CurrentRoute",
    "RouteName",
    "RouteProvider",
    "StaticRouteProvider",
    "UriPattern",
    "bind_route",
    "get_current_route",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import activeroute`` fast while providing a clean top-level API.
    """
    if name == "Active":
        from activeroute.active import Active

        return Active

    if name == "ActiveConfig":
        from activeroute.config import ActiveConfig

        return ActiveConfig

    if name in ("ActiveRouteError", "ConfigurationError"):
        from activeroute import errors as _errors

        return getattr(_errors, name)

    if name == "CurrentRoute":
        from activeroute.routing.route import CurrentRoute

        return CurrentRoute

    if name in ("RouteProvider", "StaticRouteProvider", "ContextRouteProvider"):
        from activeroute.routing import provider as _provider

        return getattr(_provider, name)

    if name in ("bind_route", "get_current_route"):
        from activeroute import context as _ctx

        return getattr(_ctx, name)

    if name in ("ActivationQuery", "ActionName", "Controller", "ControllerSet", "RouteName", "UriPattern"):
        from activeroute import queries as _queries

        return getattr(_queries, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
