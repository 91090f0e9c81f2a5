"""
Exception types raised while parsing layer configurations.

Both error kinds derive from ValueError so callers that already guard
against bad values keep working.
"""


class ParallaxError(Exception):
    """Base class for every error raised by PyParallax."""


class ConfigError(ParallaxError, ValueError):
    """Malformed configuration: unknown layer type, enum name or literal."""


class ParameterError(ParallaxError, ValueError):
    """Well-formed but unusable value for a single layer field."""
