"""activeroute exception hierarchy.

Route data never raises: a missing name or action identifier degrades to
the unmatched result. These types cover setup-time misuse only.
"""


class ActiveRouteError(Exception):
    """Base for all activeroute-specific errors."""


class ConfigurationError(ActiveRouteError):
    """Raised when an ``ActiveConfig`` is invalid.

    Raised from ``ActiveConfig.__post_init__`` so a bad configuration
    fails at construction, not while rendering a template.
    """
