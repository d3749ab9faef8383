"""Activation queries — one frozen dataclass per matcher.

Queries let callers describe *what* makes a link active as data and hand
it to ``Active.check()``, e.g. from a navigation table::

    NAV = [
        ("Home", "/", UriPattern("/")),
        ("Posts", "/posts", Controller("Post", excluded_methods=("Create",))),
        ("Admin", "/admin", UriPattern(("admin", "admin/*"))),
    ]

``active_class=None`` defers to the checker's configured default.
"""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UriPattern:
    """Active when the current URI matches any glob pattern."""

    patterns: str | Sequence[str]
    active_class: str | None = None


@dataclass(frozen=True, slots=True)
class RouteName:
    """Active when the current route name is one of *names*."""

    names: str | Sequence[str]
    active_class: str | None = None


@dataclass(frozen=True, slots=True)
class ActionName:
    """Active when the full action identifier is one of *names*."""

    names: str | Sequence[str]
    active_class: str | None = None


@dataclass(frozen=True, slots=True)
class Controller:
    """Active on any method of controller *name* except *excluded_methods*."""

    name: str
    excluded_methods: str | Sequence[str] = ()
    active_class: str | None = None


@dataclass(frozen=True, slots=True)
class ControllerSet:
    """Active when the current controller is one of *names*."""

    names: str | Sequence[str]
    active_class: str | None = None


type ActivationQuery = UriPattern | RouteName | ActionName | Controller | ControllerSet
