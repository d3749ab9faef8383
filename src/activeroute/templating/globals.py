"""Template globals backed by an ``Active`` checker.

Registered on a kida Environment so navigation templates can ask about
the current route directly::

    <li class="{{ active_pattern('users/*') }}">Users</li>
    <a href="/posts"{{ active_controller('Post', excluded=['Create']) | attr('class') }}>Posts</a>

Each global returns the active class or ``""``.
"""

from collections.abc import Callable, Iterable
from typing import Any

from activeroute.active import Active


def template_globals(checker: Active) -> dict[str, Callable[..., Any]]:
    """Build the template globals for *checker*.

    The returned callables close over *checker*; pair them with a
    ``ContextRouteProvider`` and one environment serves every request.
    """

    def active_pattern(patterns: str | Iterable[str], cls: str | None = None) -> str:
        return checker.match_by_uri_pattern(patterns, cls)

    def active_route(names: str | Iterable[str], cls: str | None = None) -> str:
        return checker.match_by_route_name(names, cls)

    def active_action(actions: str | Iterable[str], cls: str | None = None) -> str:
        return checker.match_by_action_name(actions, cls)

    def active_controller(
        controller: str,
        cls: str | None = None,
        excluded: str | Iterable[str] = (),
    ) -> str:
        return checker.match_by_controller(controller, cls, excluded)

    def active_controllers(controllers: str | Iterable[str], cls: str | None = None) -> str:
        return checker.match_by_controller_set(controllers, cls)

    def current_controller() -> str:
        return checker.derive_controller_name() or ""

    def current_method() -> str:
        return checker.derive_method_name() or ""

    return {
        "active_action": active_action,
        "active_controller": active_controller,
        "active_controllers": active_controllers,
        "active_pattern": active_pattern,
        "active_route": active_route,
        "current_controller": current_controller,
        "current_method": current_method,
    }
