"""Errors raised while wiring the application together."""


class UtilError(Exception):
    """Base error for configuration and DI wiring."""


class ConfigurationError(UtilError):
    """A required setting is missing or invalid for the current environment."""


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""
