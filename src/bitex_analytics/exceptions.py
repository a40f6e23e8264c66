"""Domain-specific exceptions for BiteX Analytics.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from BiteXError for easy catching.
"""


class BiteXError(Exception):
    """Base exception for all BiteX Analytics errors.

    Users can catch this exception to handle any error raised by the package.
    Degenerate inputs (empty order sets, zero totals) are never errors; the
    metrics engine resolves them to zero-valued outputs.
    """

    pass


class ConfigError(BiteXError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - Invalid configuration values are provided
    - Required configuration files cannot be found
    """

    pass


class DataQualityError(BiteXError):
    """Raised when input data cannot be used as given.

    This exception is raised when:
    - A dataset file is not a JSON object or a record misses a required field
    - Order totals disagree with their line items and strict mode is enabled
    """

    pass


class ExportError(BiteXError):
    """Raised when a CSV export cannot be written to disk."""

    pass
