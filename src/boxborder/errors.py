"""Exceptions raised by the border package.

Borders that cannot be combined are reported with ``None`` rather than an
exception; the classes below cover programming mistakes and bad user input.
"""


class BorderInvariantError(Exception):
    """Raised when a border operation reaches a state its callers cannot produce."""


class BorderSpecError(ValueError):
    """Raised when textual border notation cannot be parsed."""


class ConfigError(ValueError):
    """Raised when a settings file or environment override is malformed."""
