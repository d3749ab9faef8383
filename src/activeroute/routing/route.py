"""CurrentRoute frozen dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CurrentRoute:
    """Read-only view of the route matched for the current request.

    ``uri`` is the route's URI pattern as registered with the host router.
    ``action`` is the controller-style identifier, e.g.
    ``"App\\Http\\Controllers\\HomeController@getIndex"``; closure routes
    have none.
    """

    uri: str
    name: str | None = None
    action: str | None = None


EMPTY_ROUTE = CurrentRoute(uri="")
"""Stand-in used when no route is bound. Every matcher degrades to ``""``."""
