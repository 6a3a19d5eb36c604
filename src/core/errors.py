"""Custom exceptions for the strip-comments plugin.

TIER 0: No internal imports, only Python stdlib.

The comment stripper itself never raises; these cover the request
pipeline around it.
"""


class PluginError(Exception):
    """Base exception for the strip-comments plugin."""

    pass


class ConfigError(PluginError):
    """Configuration error."""

    pass


class RenderError(PluginError):
    """Request rendering failed."""

    pass


class SendError(PluginError):
    """Request could not be sent."""

    pass
