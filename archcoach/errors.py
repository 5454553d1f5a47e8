"""
Error taxonomy for the coaching backend.

Every request-scoped error is caught at the API boundary and turned into a
JSON envelope. Only ConfigurationError raised during startup stops the process.
"""


class ArchCoachError(Exception):
    """Base class for all application errors."""


class ConfigurationError(ArchCoachError):
    """A required setting is missing or a static catalog cannot be loaded."""


class UpstreamError(ArchCoachError):
    """The language model call failed or returned no usable text."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(ArchCoachError):
    """The model reply could not be parsed as a structured verdict."""

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text


class PersistenceError(ArchCoachError):
    """A project store operation failed."""
