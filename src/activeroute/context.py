"""Request-scoped current route via ContextVar.

Provides:
- ``route_var``: the ``CurrentRoute`` matched for this task/thread.
- ``bind_route()``: context manager that sets and resets ``route_var``.

The host sets the route after dispatch and resets it after the
response is rendered. Accessing it outside that window raises
``LookupError`` from ``get_current_route()``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    free-threading. No locks needed.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from activeroute.routing.route import EMPTY_ROUTE, CurrentRoute

logger = logging.getLogger("activeroute.context")

route_var: ContextVar[CurrentRoute] = ContextVar("activeroute_route")
"""The current route. Set by the host before rendering."""


def get_current_route() -> CurrentRoute:
    """Return the current route.

    Raises ``LookupError`` if called outside a bound route.
    """
    return route_var.get()


def lookup_route() -> CurrentRoute:
    """Return the current route, or an empty route when none is bound."""
    route = route_var.get(None)
    if route is None:
        logger.debug("No current route bound; treating as empty route")
        return EMPTY_ROUTE
    return route


@contextmanager
def bind_route(route: CurrentRoute) -> Iterator[CurrentRoute]:
    """Bind *route* as the current route for the enclosed block.

    Usage::

        with bind_route(CurrentRoute("users/{id}", name="users.show")):
            html = template.render(ctx)
    """
    token = route_var.set(route)
    try:
        yield route
    finally:
        route_var.reset(token)
