from __future__ import annotations


class BulkCopyError(Exception):
    """Base class for errors raised by orabulk itself.

    Driver errors raised while a batch executes are not wrapped; they reach the caller unchanged.
    """


class ConfigurationError(BulkCopyError, ValueError):
    """Invalid destination table name or batch size."""


class ArgumentError(BulkCopyError, ValueError):
    """Missing or unusable input table."""


class ConsistencyError(BulkCopyError):
    """Connection missing, or transaction bound to a different connection."""


class BindCountError(BulkCopyError, ValueError):
    """A parameter array does not hold exactly array_bind_count values."""
