"""Custom exception classes for meshview."""


class MeshViewError(Exception):
    """Base exception for all meshview errors."""
    pass


class ConfigError(MeshViewError):
    """Raised when display configuration is invalid or missing."""
    pass


class UnknownMetricKindError(MeshViewError):
    """Raised when a metric kind has no registered formatter."""
    pass
