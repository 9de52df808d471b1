"""
Errors — Exception types raised by the SchemaSweep pipeline.

Only LiteralParseError is recoverable: the scanner prints a warning and
moves on to the next literal. Every other error propagates to the
orchestrator and fails the run (exit status 1, no report written).
"""

from typing import Optional


class SchemaSweepError(Exception):
    """Base class for all SchemaSweep errors."""


class ConfigNotFoundError(SchemaSweepError):
    """The config file does not exist at the expected location."""

    def __init__(self, config_path: str):
        self.config_path = config_path
        super().__init__(f"Could not find config file: {config_path}")


class ConfigError(SchemaSweepError):
    """The config file exists but cannot be used (bad JSON, missing values)."""


class SchemaFetchError(SchemaSweepError):
    """The introspection request failed or returned no usable data.

    Attributes:
        status_code: HTTP status of the response, if one was received.
        body: Raw response body text (may be empty).
        errors: GraphQL "errors" array from the response, if any.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: str = "",
        errors: Optional[list] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.errors = errors
        super().__init__(message)


class LiteralParseError(SchemaSweepError):
    """A plucked literal is not a valid GraphQL document."""

    def __init__(self, source: str, cause: Exception):
        self.source = source
        self.cause = cause
        super().__init__(str(cause))
