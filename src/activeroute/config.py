"""Checker configuration.

ActiveConfig is a frozen dataclass: immutable after creation and safe to
share across requests.
"""

from dataclasses import dataclass

from activeroute.errors import ConfigurationError

TRIM_MODES: frozenset[str] = frozenset({"replace", "affix"})


@dataclass(frozen=True, slots=True)
class ActiveConfig:
    """Checker configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ActiveConfig(active_class="is-current", trim_mode="affix")
    """

    # Class returned when a matcher is called without an explicit one
    active_class: str = "active"

    # Action identifier parsing
    action_separator: str = "@"
    controller_suffix: str = "Controller"
    method_prefixes: tuple[str, ...] = ("get", "post", "put", "delete", "show")

    # "replace" removes every occurrence; "affix" trims suffix/prefix only
    trim_mode: str = "replace"

    # Templates
    autoescape: bool = True

    def __post_init__(self) -> None:
        if self.trim_mode not in TRIM_MODES:
            allowed = ", ".join(sorted(TRIM_MODES))
            msg = f"Unknown trim_mode {self.trim_mode!r}. Expected one of: {allowed}"
            raise ConfigurationError(msg)
        if not self.action_separator:
            msg = "action_separator must be a non-empty string."
            raise ConfigurationError(msg)
        if any(not prefix for prefix in self.method_prefixes):
            msg = "method_prefixes must not contain empty strings."
            raise ConfigurationError(msg)
