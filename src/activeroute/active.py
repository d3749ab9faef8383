"""Decide whether the current route earns an "active" class.

Each matcher compares one facet of the current route against
caller-supplied values and returns the active class on a match or
``""`` otherwise:

- ``match_by_uri_pattern``: the route URI against glob patterns
- ``match_by_route_name``: the route name
- ``match_by_action_name``: the full action identifier
- ``match_by_controller`` / ``match_by_controller_set``: the controller
  name derived from the action identifier

Missing route data (no name, no action identifier) never raises; it
degrades to ``""``.

Thread safety:
    ``Active`` holds only its provider and a frozen config. It is safe to
    share one instance across requests and threads.
"""

import logging
from collections.abc import Iterable

from activeroute.config import ActiveConfig
from activeroute.queries import (
    ActionName,
    ActivationQuery,
    Controller,
    ControllerSet,
    RouteName,
    UriPattern,
)
from activeroute.routing.action import split_action, strip_controller, strip_method
from activeroute.routing.patterns import matches_any
from activeroute.routing.provider import RouteProvider

logger = logging.getLogger("activeroute.active")


def _as_tuple(values: str | Iterable[str]) -> tuple[str, ...]:
    """Normalize a single string into a one-element tuple."""
    if isinstance(values, str):
        return (values,)
    return tuple(values)


class Active:
    """Return an "active" class for the current route when it matches.

    Usage::

        active = Active(ContextRouteProvider())

        active.match_by_uri_pattern("users/*")          # "active" on users/42
        active.match_by_route_name(["home", "landing"])
        active.match_by_controller("Post", excluded_methods=["Create"])
    """

    __slots__ = ("_config", "_provider")

    def __init__(self, provider: RouteProvider, config: ActiveConfig | None = None) -> None:
        self._provider = provider
        self._config = config or ActiveConfig()

    @property
    def provider(self) -> RouteProvider:
        return self._provider

    @property
    def config(self) -> ActiveConfig:
        return self._config

    def _class(self, active_class: str | None) -> str:
        return self._config.active_class if active_class is None else active_class

    # -- Matchers --

    def match_by_uri_pattern(
        self,
        patterns: str | Iterable[str],
        active_class: str | None = None,
    ) -> str:
        """Return the active class if the current URI matches any glob pattern."""
        uri = self._provider.current_route_uri()
        if matches_any(_as_tuple(patterns), uri):
            return self._class(active_class)
        return ""

    def match_by_route_name(
        self,
        names: str | Iterable[str],
        active_class: str | None = None,
    ) -> str:
        """Return the active class if the current route name is one of *names*.

        Unnamed routes never match.
        """
        route_name = self._provider.current_route_name()
        if not route_name:
            logger.debug("Current route has no name; %r not active", names)
            return ""
        if route_name in _as_tuple(names):
            return self._class(active_class)
        return ""

    def match_by_action_name(
        self,
        actions: str | Iterable[str],
        active_class: str | None = None,
    ) -> str:
        """Return the active class if the current action identifier is one of *actions*."""
        route_action = self._provider.current_route_action()
        if route_action is not None and route_action in _as_tuple(actions):
            return self._class(active_class)
        return ""

    def match_by_controller(
        self,
        controller: str,
        active_class: str | None = None,
        excluded_methods: str | Iterable[str] = (),
    ) -> str:
        """Return the active class if the current controller is *controller*.

        Methods listed in *excluded_methods* suppress the match, so a
        "New post" link can stay inactive on ``PostController@store``
        while the rest of the controller lights up "Posts".
        """
        if self.derive_controller_name() != controller:
            return ""
        method = self.derive_method_name()
        if method in _as_tuple(excluded_methods):
            logger.debug("Controller %r matched but method %r is excluded", controller, method)
            return ""
        return self._class(active_class)

    def match_by_controller_set(
        self,
        controllers: str | Iterable[str],
        active_class: str | None = None,
    ) -> str:
        """Return the active class if the current controller is one of *controllers*."""
        current = self.derive_controller_name()
        if current is not None and current in _as_tuple(controllers):
            return self._class(active_class)
        return ""

    # -- Derived names --

    def derive_controller_name(self) -> str | None:
        """Current controller name with the controller suffix removed.

        ``None`` when the route has no action identifier.
        """
        action = self._provider.current_route_action()
        if not action:
            return None
        controller, _ = split_action(action, self._config.action_separator)
        return strip_controller(
            controller,
            self._config.controller_suffix,
            self._config.trim_mode,
        )

    def derive_method_name(self) -> str | None:
        """Current method name with HTTP-verb prefixes removed.

        ``None`` when the route has no action identifier; ``""`` when the
        identifier names no method.
        """
        action = self._provider.current_route_action()
        if not action:
            return None
        _, method = split_action(action, self._config.action_separator)
        if method is None:
            return ""
        return strip_method(method, self._config.method_prefixes, self._config.trim_mode)

    # -- Query dispatch --

    def check(self, query: ActivationQuery) -> str:
        """Evaluate an activation query against the current route.

        Raises ``TypeError`` for objects that are not activation queries.
        """
        match query:
            case UriPattern(patterns=patterns, active_class=cls):
                return self.match_by_uri_pattern(patterns, cls)
            case RouteName(names=names, active_class=cls):
                return self.match_by_route_name(names, cls)
            case ActionName(names=names, active_class=cls):
                return self.match_by_action_name(names, cls)
            case Controller(name=name, excluded_methods=excluded, active_class=cls):
                return self.match_by_controller(name, cls, excluded)
            case ControllerSet(names=names, active_class=cls):
                return self.match_by_controller_set(names, cls)
            case _:
                msg = f"Unsupported activation query: {query!r}"
                raise TypeError(msg)

    def __repr__(self) -> str:
        return f"Active(provider={self._provider!r})"
