"""
Exceptions raised by the search core.
"""


class ConfigurationError(ValueError):
    """A run cannot start: missing start/end node, bad cell or unknown algorithm."""


class RunInProgressError(RuntimeError):
    """A search or its playback is still in flight."""
