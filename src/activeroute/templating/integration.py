"""Kida environment setup and checker binding.

Binds an ``Active`` checker's matchers as globals on a kida
Environment. The environment is created once at startup; the route each
render sees comes from the checker's provider.
"""

from kida import Environment

from activeroute.active import Active
from activeroute.templating.filters import BUILTIN_FILTERS
from activeroute.templating.globals import template_globals


def install_globals(env: Environment, checker: Active) -> Environment:
    """Register the checker's template globals and filters on *env*.

    Existing globals and filters with the same names are replaced.
    Returns *env*.
    """
    env.update_filters(BUILTIN_FILTERS)
    for name, value in template_globals(checker).items():
        env.add_global(name, value)
    return env


def create_environment(checker: Active) -> Environment:
    """Create a kida Environment with the checker's globals installed.

    ``autoescape`` follows the checker's ``ActiveConfig``.
    """
    env = Environment(autoescape=checker.config.autoescape)
    return install_globals(env, checker)
