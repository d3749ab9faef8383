"""Action identifier parsing.

An action identifier names the controller and method that handle a
route, ``"App\\Http\\Controllers\\PostController@getIndex"``. The
controller and method names derived from it drop the conventional
``Controller`` suffix and HTTP-verb prefixes.

Two trimming modes:

- ``"replace"``: every occurrence of the suffix/prefixes is removed,
  wherever it appears. ``"App\\Controllers\\PostController"`` becomes
  ``"App\\s\\Post"`` and ``"showgetIndex"`` becomes ``"Index"``.
- ``"affix"``: only a trailing suffix and a single leading prefix are
  removed.
"""

DEFAULT_SEPARATOR = "@"
DEFAULT_SUFFIX = "Controller"
DEFAULT_PREFIXES: tuple[str, ...] = ("get", "post", "put", "delete", "show")


def split_action(action: str, separator: str = DEFAULT_SEPARATOR) -> tuple[str, str | None]:
    """Split an action identifier into ``(controller, method)`` on the last separator.

    Identifiers without a separator are all controller and have no method.

    Examples::

        "HomeController@getIndex"  -> ("HomeController", "getIndex")
        "HomeController"           -> ("HomeController", None)
    """
    controller, sep, method = action.rpartition(separator)
    if not sep:
        return action, None
    return controller, method


def strip_controller(
    controller: str,
    suffix: str = DEFAULT_SUFFIX,
    mode: str = "replace",
) -> str:
    """Drop the controller suffix from a qualified controller name."""
    if not suffix:
        return controller
    if mode == "affix":
        return controller.removesuffix(suffix)
    return controller.replace(suffix, "")


def strip_method(
    method: str,
    prefixes: tuple[str, ...] = DEFAULT_PREFIXES,
    mode: str = "replace",
) -> str:
    """Drop HTTP-verb prefixes from a method name.

    In ``"replace"`` mode the prefixes are removed one after another, in
    order, so removing one can expose another: ``"gpostet"`` loses
    ``"post"`` and keeps the ``"get"`` that results.
    """
    if mode == "affix":
        for prefix in prefixes:
            if method.startswith(prefix):
                return method[len(prefix):]
        return method
    for prefix in prefixes:
        method = method.replace(prefix, "")
    return method
